"""CLI entry points for the schemagate API server and one-off validation."""

import argparse
import os
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="schemagate-server",
        description="schemagate API server: JSON Schema validation gate",
    )
    parser.add_argument("--host", default="0.0.0.0", help="Bind host (default: 0.0.0.0)")
    parser.add_argument("--port", type=int, default=8080, help="Bind port (default: 8080)")
    parser.add_argument("--schema", help="Primary schema location (overrides SCHEMAGATE_SCHEMA_LOCATION)")
    parser.add_argument("--fallback-schema", help="Fallback schema location")
    parser.add_argument(
        "--reload-interval",
        type=int,
        help="Seconds; >0 reloads the schema when its file changes",
    )
    args = parser.parse_args(argv)

    if args.schema:
        os.environ["SCHEMAGATE_SCHEMA_LOCATION"] = args.schema
    if args.fallback_schema:
        os.environ["SCHEMAGATE_SCHEMA_FALLBACK_LOCATION"] = args.fallback_schema
    if args.reload_interval is not None:
        os.environ["SCHEMAGATE_SCHEMA_RELOAD_INTERVAL"] = str(args.reload_interval)

    import uvicorn

    uvicorn.run("schemagate.main:app", host=args.host, port=args.port)


def validate_main(argv: list[str] | None = None) -> int:
    """Validate a JSON file against the configured schema.

    Exit status: 0 valid, 1 invalid, 2 unreadable input or schema.
    """
    parser = argparse.ArgumentParser(
        prog="schemagate-validate",
        description="Validate a JSON document against the configured schema",
    )
    parser.add_argument("document", help="Path to the JSON document, or - for stdin")
    parser.add_argument("--schema", help="Schema location (default: configured location)")
    parser.add_argument("--fallback-schema", help="Fallback schema location")
    args = parser.parse_args(argv)

    from schemagate.config import SchemaSettings, settings
    from schemagate.errors.exceptions import MalformedInputError, SchemaLoadError
    from schemagate.schemas.cache import SchemaCache
    from schemagate.schemas.validator import JsonSchemaValidator

    schema_settings = SchemaSettings(
        location=args.schema or settings.schema_location,
        fallback_location=args.fallback_schema or settings.schema_fallback_location,
        cache_enabled=True,
        reload_interval=0,
    )
    validator = JsonSchemaValidator(SchemaCache(schema_settings), schema_settings)

    try:
        text = sys.stdin.read() if args.document == "-" else Path(args.document).read_text(encoding="utf-8")
    except OSError as exc:
        print(f"error: cannot read {args.document}: {exc}", file=sys.stderr)
        return 2

    try:
        result = validator.validate(text)
    except MalformedInputError as exc:
        print(f"error: {exc.hint} ({exc.parser_message})", file=sys.stderr)
        return 2
    except SchemaLoadError as exc:
        print(f"error: {exc.message}", file=sys.stderr)
        return 2

    if result.valid:
        print("valid")
        return 0
    for message in result.messages():
        print(message)
    return 1


if __name__ == "__main__":
    main()
