"""Pydantic models for validation outcomes."""

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FieldError(BaseModel):
    """One structural violation, located by a dotted path from the document root."""

    model_config = ConfigDict(frozen=True)

    field_path: str
    message: str
    description: str = Field(..., description="field [<path>]: <message>")


class ValidationResult(BaseModel):
    """Outcome of validating one document. ``valid`` is derived from ``errors``."""

    model_config = ConfigDict(frozen=True)

    errors: tuple[FieldError, ...] = ()

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    def first_error(self) -> str | None:
        return self.errors[0].description if self.errors else None

    def messages(self) -> list[str]:
        return [e.description for e in self.errors]

    def all_errors_as_string(self) -> str:
        return "; ".join(self.messages())
