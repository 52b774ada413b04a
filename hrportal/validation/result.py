"""
Structured validation outcome shared by every validator in this package.
"""
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ValidationError


class FieldError(BaseModel):
    """One field-level failure: dotted path to the field and a readable reason."""
    path: str
    message: str


class ValidationResult(BaseModel):
    """Either a validated value or the complete list of failures, never both."""
    value: Optional[Any] = None
    errors: List[FieldError] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def error_paths(self) -> List[str]:
        return [error.path for error in self.errors]

    def messages_for(self, path: str) -> List[str]:
        return [error.message for error in self.errors if error.path == path]


def format_path(loc: Tuple[Union[str, int], ...]) -> str:
    return ".".join(str(part) for part in loc)


def field_errors_from(exc: ValidationError, required_messages: Optional[Dict[str, str]] = None) -> List[FieldError]:
    """
    Flatten a pydantic ValidationError into FieldErrors.

    Errors of type ``field_rules`` carry every violated rule for one field in
    their context and expand into one FieldError each. Missing fields use the
    field's entry in ``required_messages`` when there is one.

    Args:
        exc: Error raised by model validation
        required_messages: Field alias -> message for missing mandatory fields

    Returns:
        FieldErrors in the order pydantic reported them
    """
    required_messages = required_messages or {}
    errors: List[FieldError] = []

    for error in exc.errors():
        path = format_path(error["loc"])
        field = str(error["loc"][-1]) if error["loc"] else ""

        if error["type"] == "field_rules":
            for message in error["ctx"]["messages"]:
                errors.append(FieldError(path=path, message=message))
        elif error["type"] == "missing" and field in required_messages:
            errors.append(FieldError(path=path, message=required_messages[field]))
        else:
            errors.append(FieldError(path=path, message=error["msg"]))

    return errors
