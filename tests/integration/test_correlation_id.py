import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_correlation_id_reaches_service_logs(self, api_client, caplog):
        custom_id = "order-flow-correlation-789"
        with caplog.at_level(logging.INFO):
            api_client.post(
                "/api/v1/orders/",
                {
                    "customer_id": "1",
                    "items": [
                        {"product_id": "prod1", "variant_id": "v1", "quantity": 1}
                    ],
                    "shipping_address": {
                        "street": "500 Market St",
                        "city": "San Francisco",
                        "state": "CA",
                        "country": "USA",
                        "postal_code": "94105",
                    },
                },
                format="json",
                HTTP_X_REQUEST_ID=custom_id,
            )
        service_records = [
            r for r in caplog.records if r.name == "modules.orders.services"
        ]
        assert service_records
        assert all(custom_id in r.getMessage() for r in service_records)

    def test_correlation_id_exposed_in_context_var(self, client):
        from modules.core.middleware import correlation_id_var

        client.get("/health", HTTP_X_REQUEST_ID="ctx-var-id")
        assert correlation_id_var.get() == "ctx-var-id"

    def test_request_finished_logs_duration(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health")
        assert any(
            "request_finished" in r.getMessage() and "duration_ms" in r.getMessage()
            for r in caplog.records
        )
