"""Order DRF serializers for API input/output.

The serializer operates at the Interface layer (API Views): it checks the
structure of the payload (required fields, types, positive quantities).
Business rules live in the Service Layer, which receives Pydantic DTOs
from ``dtos.py``.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.orders.constants import OrderStatus

# ---------------------------------------------------------------------------
# Input Serializers
# ---------------------------------------------------------------------------


class AddressSerializer(serializers.Serializer):
    street = serializers.CharField()
    city = serializers.CharField()
    state = serializers.CharField()
    country = serializers.CharField()
    postal_code = serializers.CharField()


class CreateOrderItemSerializer(serializers.Serializer):
    """Validates a single item in an order creation request."""

    product_id = serializers.CharField()
    variant_id = serializers.CharField()
    quantity = serializers.IntegerField(min_value=1)


class CreateOrderSerializer(serializers.Serializer):
    """Validates the order creation request payload."""

    customer_id = serializers.CharField()
    items = CreateOrderItemSerializer(many=True, allow_empty=False)
    shipping_address = AddressSerializer()


class UpdateOrderStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=OrderStatus.choices)


class UpdateShippingInfoSerializer(serializers.Serializer):
    tracking_company = serializers.CharField(allow_blank=True)
    tracking_number = serializers.CharField(allow_blank=True)
    estimated_delivery_date = serializers.DateField(required=False, allow_null=True)


# ---------------------------------------------------------------------------
# Output Serializers (Read)
# ---------------------------------------------------------------------------


class OrderItemSerializer(serializers.Serializer):
    """Read serializer for order items with the price snapshot."""

    product_id = serializers.CharField(read_only=True)
    variant_id = serializers.CharField(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    price = serializers.DecimalField(max_digits=14, decimal_places=4, read_only=True)
    currency = serializers.CharField(read_only=True)


class ShippingInfoSerializer(serializers.Serializer):
    shipping_address = AddressSerializer(read_only=True, allow_null=True)
    tracking_company = serializers.CharField(read_only=True)
    tracking_number = serializers.CharField(read_only=True)
    estimated_delivery_date = serializers.DateField(read_only=True, allow_null=True)


class OrderSerializer(serializers.Serializer):
    """Read serializer for orders with nested items and shipping info."""

    id = serializers.CharField(read_only=True)
    customer_id = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    items = OrderItemSerializer(many=True, read_only=True)
    shipping_info = ShippingInfoSerializer(read_only=True, allow_null=True)
    subtotal = serializers.DecimalField(max_digits=14, decimal_places=4, read_only=True)
    tax = serializers.DecimalField(max_digits=14, decimal_places=4, read_only=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=4, read_only=True)
    currency = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
    updated_at = serializers.DateTimeField(read_only=True)


class OrderListSerializer(serializers.Serializer):
    """Lightweight serializer for order list (no nested relations)."""

    id = serializers.CharField(read_only=True)
    customer_id = serializers.CharField(read_only=True)
    status = serializers.CharField(read_only=True)
    total = serializers.DecimalField(max_digits=14, decimal_places=4, read_only=True)
    currency = serializers.CharField(read_only=True)
    created_at = serializers.DateTimeField(read_only=True)
