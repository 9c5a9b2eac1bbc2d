"""Pydantic base classes for validated entities and immutable records"""

from typing import Any, Optional, Tuple
from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from bank_bistro.utils.errors import ValidationError


def describe_validation_error(error: PydanticValidationError) -> Tuple[Optional[str], str]:
    """
    Turn the first pydantic error into a (field, message) pair

    Args:
        error: Error raised by pydantic during construction or assignment

    Returns:
        Field name (None for model-level errors) and a "field: reason" message
    """
    first = error.errors()[0]
    field = ".".join(str(part) for part in first.get("loc", ())) or None
    reason = first.get("msg", "invalid value")
    if reason.startswith("Value error, "):
        reason = reason[len("Value error, "):]
    message = f"{field}: {reason}" if field else reason
    return field, message


class Entity(BaseModel):
    """
    Mutable domain entity.

    Every assignment is re-validated, and pydantic errors surface as the
    domain ValidationError so callers only deal with one error family.
    """

    model_config = ConfigDict(validate_assignment=True)

    def __init__(self, **data: Any):
        try:
            super().__init__(**data)
        except PydanticValidationError as e:
            field, message = describe_validation_error(e)
            raise ValidationError(message, field=field) from e

    def __setattr__(self, name: str, value: Any):
        try:
            super().__setattr__(name, value)
        except PydanticValidationError as e:
            field, message = describe_validation_error(e)
            raise ValidationError(message, field=field) from e


class Record(Entity):
    """Immutable history record"""

    model_config = ConfigDict(frozen=True)
