"""Custom exception classes for the schema gate."""

SYNTAX_HINT = "JSON syntax error, check brackets and quotes"
TYPE_HINT = "JSON data type mismatch"
GENERIC_HINT = "Malformed JSON"
NESTING_HINT = "JSON document nested too deeply"


class SchemagateError(Exception):
    """Base exception for schemagate."""

    def __init__(self, code: str, message: str, details=None, status_code: int = 500):
        self.code = code
        self.message = message
        self.details = details
        self.status_code = status_code
        super().__init__(message)


class SchemaLoadError(SchemagateError):
    """No configured location produced a usable schema, or compilation failed.

    The message may name internal paths; it is logged, never sent to clients.
    """

    def __init__(self, message: str, location: str | None = None):
        self.location = location
        super().__init__("SCHEMA_LOAD_ERROR", message, status_code=500)


class MalformedInputError(SchemagateError):
    """Input text could not be parsed as JSON."""

    def __init__(self, parser_message: str, line: int | None = None, column: int | None = None):
        self.parser_message = parser_message
        self.hint = describe_parse_failure(parser_message)
        details = {"parser_message": parser_message}
        if line is not None:
            details["line"] = line
            details["column"] = column
        super().__init__("MALFORMED_INPUT", self.hint, details, status_code=400)


class PayloadValidationError(SchemagateError):
    """A well-formed document violated the schema and the caller chose to fail on it."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__(
            "VALIDATION_ERROR",
            "Data validation failed: " + "; ".join(errors),
            details=errors,
            status_code=400,
        )


def describe_parse_failure(parser_message: str | None) -> str:
    """Best-effort hint about why a document failed to parse."""
    if not parser_message:
        return GENERIC_HINT
    lowered = parser_message.lower()
    if "nested too deeply" in lowered or "recursion" in lowered:
        return NESTING_HINT
    if "type" in lowered or "deserialize" in lowered:
        return TYPE_HINT
    if (
        "expecting" in lowered
        or "unterminated" in lowered
        or "delimiter" in lowered
        or "extra data" in lowered
        or "control character" in lowered
        or "unexpected" in lowered
    ):
        return SYNTAX_HINT
    return GENERIC_HINT
