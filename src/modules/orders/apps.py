from django.apps import AppConfig


class OrdersConfig(AppConfig):
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from modules.orders.events import (
            OrderCanceled,
            OrderCreated,
            OrderDeleted,
            OrderStatusChanged,
            ShippingInfoUpdated,
        )
        from modules.orders.handlers import (
            order_canceled_handler,
            order_created_handler,
            order_deleted_handler,
            order_status_changed_handler,
            shipping_info_updated_handler,
        )
        from shared.infrastructure.bus import event_bus

        event_bus.subscribe(OrderCreated, order_created_handler)
        event_bus.subscribe(OrderStatusChanged, order_status_changed_handler)
        event_bus.subscribe(OrderCanceled, order_canceled_handler)
        event_bus.subscribe(ShippingInfoUpdated, shipping_info_updated_handler)
        event_bus.subscribe(OrderDeleted, order_deleted_handler)
