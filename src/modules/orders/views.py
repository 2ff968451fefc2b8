"""Order API views.

Exposes the ``OrderService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes:
``NotFound`` becomes 404 and ``InvalidRequest`` becomes 400.  The view
never swallows generic exceptions.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.orders.dtos import (
    CreateOrderDTO,
    CreateOrderItemDTO,
    UpdateOrderStatusDTO,
    UpdateShippingInfoDTO,
)
from modules.orders.exceptions import InvalidRequest, NotFound
from modules.orders.serializers import (
    CreateOrderSerializer,
    OrderListSerializer,
    OrderSerializer,
    UpdateOrderStatusSerializer,
    UpdateShippingInfoSerializer,
)
from modules.orders.wiring import get_order_service
from shared.domain.value_objects import Address


class OrderViewSet(ViewSet):
    """ViewSet for Order operations.

    All state goes through the process-wide ``OrderService``; the view
    only validates payload structure and maps outcomes to responses.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = get_order_service()

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/orders/"""
        create_serializer = CreateOrderSerializer(data=request.data)
        create_serializer.is_valid(raise_exception=True)

        data = create_serializer.validated_data
        dto = CreateOrderDTO(
            customer_id=data["customer_id"],
            items=[
                CreateOrderItemDTO(
                    product_id=item["product_id"],
                    variant_id=item["variant_id"],
                    quantity=item["quantity"],
                )
                for item in data["items"]
            ],
            shipping_address=Address(**data["shipping_address"]),
        )

        try:
            order = self._service.create_order(dto)
        except NotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRequest as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        out = OrderSerializer(order)
        return Response(out.data, status=status.HTTP_201_CREATED)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/orders/"""
        serializer = OrderListSerializer(self._service.list_orders(), many=True)
        return Response(serializer.data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/orders/{pk}/"""
        try:
            order = self._service.get_order(str(pk))
        except NotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Status Update
    # ------------------------------------------------------------------

    @action(detail=True, methods=["put"], url_path="status")
    def update_status(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/status/"""
        serializer = UpdateOrderStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = UpdateOrderStatusDTO(**serializer.validated_data)

        try:
            order = self._service.update_order_status(str(pk), dto.status)
        except NotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRequest as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Shipping Update
    # ------------------------------------------------------------------

    @action(detail=True, methods=["put"], url_path="shipping")
    def update_shipping(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/orders/{pk}/shipping/"""
        serializer = UpdateShippingInfoSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        dto = UpdateShippingInfoDTO(**serializer.validated_data)

        try:
            order = self._service.update_shipping_info(
                str(pk),
                tracking_company=dto.tracking_company,
                tracking_number=dto.tracking_number,
                estimated_delivery_date=dto.estimated_delivery_date,
            )
        except NotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        except InvalidRequest as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        return Response(OrderSerializer(order).data)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/orders/{pk}/"""
        try:
            self._service.delete_order(str(pk))
        except NotFound as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
        return Response(status=status.HTTP_204_NO_CONTENT)
