"""Schema validation service using the jsonschema library."""

import json
import logging
from typing import Any

from schemagate.config import SchemaSettings
from schemagate.errors.exceptions import MalformedInputError, SchemaLoadError
from schemagate.models.validation import FieldError, ValidationResult
from schemagate.schemas.cache import SchemaCache
from schemagate.schemas.formatter import display_path, format_error

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"Non-standard JSON constant: {name}")


def parse_document(text: str | bytes) -> Any:
    """Parse JSON text, rejecting the NaN/Infinity extensions of the json module.

    Raises:
        MalformedInputError: If ``text`` is not a JSON document.
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedInputError(exc.msg, line=exc.lineno, column=exc.colno) from exc
    except RecursionError as exc:
        raise MalformedInputError("document nested too deeply") from exc
    except (ValueError, TypeError) as exc:
        raise MalformedInputError(str(exc)) from exc


def _field_error(diagnostic) -> FieldError:
    path = diagnostic.json_path
    return FieldError(
        field_path=display_path(path),
        message=diagnostic.message,
        description=format_error(path, diagnostic.message),
    )


class JsonSchemaValidator:
    """Validates JSON documents against the configured schema."""

    def __init__(self, cache: SchemaCache, settings: SchemaSettings | None = None):
        self.cache = cache
        self.settings = settings or cache.settings

    @property
    def location(self) -> str:
        return self.settings.location

    def validate(self, json_text: str | bytes) -> ValidationResult:
        """Parse ``json_text`` and validate it.

        Raises:
            MalformedInputError: If the text is not parseable JSON.
            SchemaLoadError: If the schema cannot be loaded.
        """
        logger.debug("Validating JSON document")
        return self.validate_instance(parse_document(json_text))

    def validate_instance(self, instance: Any) -> ValidationResult:
        """Validate an already-parsed document."""
        schema = self.cache.get(self.location)

        try:
            errors = [_field_error(diagnostic) for diagnostic in schema.iter_errors(instance)]
        except RecursionError as exc:
            raise MalformedInputError("document nested too deeply") from exc

        result = ValidationResult(errors=tuple(errors))
        if result.valid:
            logger.debug("Validation passed")
        else:
            logger.warning("Validation failed with %d error(s)", len(errors))
            for error in errors:
                logger.debug("Validation error: %s", error.description)
        return result

    def clear_cache(self) -> None:
        logger.info("Clearing schema cache")
        self.cache.invalidate()


def initialize_validator(validator: JsonSchemaValidator) -> None:
    """Eagerly load the configured schema, failing fast when it is unavailable.

    Raises:
        SchemaLoadError: If neither the primary nor the fallback location
            produces a valid schema.
    """
    settings = validator.settings
    logger.info("Initialising JSON Schema validator")
    logger.info("Schema location: %s", settings.location)
    logger.info("Schema fallback location: %s", settings.fallback_location)
    logger.info("Schema cache enabled: %s", settings.cache_enabled)
    logger.info("Schema reload interval: %ss", settings.reload_interval)

    try:
        validator.cache.get(settings.location)
    except SchemaLoadError as exc:
        logger.error("Schema initialisation failed: %s", exc.message)
        raise
    logger.info("Schema loaded successfully")
