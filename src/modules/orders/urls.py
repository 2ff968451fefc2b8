"""Order URL configuration.

Routes (under ``/api/v1/``)::

    orders/                 GET list, POST create
    orders/{id}/            GET retrieve, DELETE destroy
    orders/{id}/status/     PUT update_status
    orders/{id}/shipping/   PUT update_shipping
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.orders.views import OrderViewSet

router = SimpleRouter(trailing_slash=True)
router.register("orders", OrderViewSet, basename="order")

urlpatterns = router.urls
