"""Draft-07 schema compilation using the jsonschema library."""

from jsonschema import Draft7Validator, ValidationError, validators
from jsonschema.exceptions import SchemaError

from schemagate.errors.exceptions import SchemaLoadError


def _required(validator, required, instance, schema):
    """Draft-07 ``required`` that points each error at the missing property."""
    if not validator.is_type(instance, "object"):
        return
    for prop in required:
        if prop not in instance:
            yield ValidationError(f"{prop!r} is a required property", path=[prop])


FieldLevelDraft7Validator = validators.extend(Draft7Validator, {"required": _required})

# Compiled schemas are validator instances; they hold no per-call state.
CompiledSchema = FieldLevelDraft7Validator


def compile_schema(document: dict | bool, location: str | None = None) -> CompiledSchema:
    """Check ``document`` against the draft-07 metaschema and build a validator.

    Raises:
        SchemaLoadError: If the document is not a valid draft-07 schema.
    """
    try:
        FieldLevelDraft7Validator.check_schema(document)
    except SchemaError as exc:
        raise SchemaLoadError(
            f"Invalid schema at {location}: {exc.message}", location=location
        ) from exc
    return FieldLevelDraft7Validator(
        document, format_checker=Draft7Validator.FORMAT_CHECKER
    )
