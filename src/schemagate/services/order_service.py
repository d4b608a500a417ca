"""Order intake: schema validation in front of order processing."""

import logging

from schemagate.errors.exceptions import PayloadValidationError
from schemagate.models.order import OrderRequest
from schemagate.models.validation import ValidationResult
from schemagate.schemas.validator import JsonSchemaValidator

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(self, validator: JsonSchemaValidator):
        self.validator = validator

    def process_order(self, request: OrderRequest) -> str:
        """Validate the order and run processing.

        Raises:
            PayloadValidationError: If the order does not satisfy the schema.
        """
        logger.info("Processing order request")
        payload = request.to_json()
        logger.debug("Order JSON: %s", payload)

        result = self.validator.validate(payload)
        if not result.valid:
            logger.warning("Order validation failed: %s", result.messages())
            raise PayloadValidationError(result.messages())

        logger.info("Order validation passed")
        return self._execute(request)

    def _execute(self, request: OrderRequest) -> str:
        info = request.order_info
        order_id = info.order_id if info else None
        logger.info(
            "Executing order: title=%s order_id=%s city=%s",
            request.title,
            order_id,
            info.city_name if info else None,
        )
        return f"Order processed, orderId: {order_id}"

    def validate_order(self, request: OrderRequest) -> ValidationResult:
        """Check-only validation of a typed order."""
        result = self.validator.validate(request.to_json())
        if not result.valid:
            logger.debug("Order validation failed: %s", result.messages())
        return result

    def validate_json(self, json_text: str | bytes) -> ValidationResult:
        """Check-only validation of raw JSON text."""
        return self.validator.validate(json_text)
