"""
Argument validation against a tool's input model
"""

from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .registry import ToolDefinition


class ParameterValidationError(Exception):
    """Arguments did not satisfy the tool's input model"""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def format_validation_errors(exc: ValidationError) -> str:
    """One ``path: reason`` entry per violation, comma separated"""
    return ", ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )


def validate_params(
    definition: ToolDefinition, raw_params: Optional[Mapping[str, Any]]
) -> Any:
    """
    Apply the tool's input model to the raw arguments.

    Tools without a model get ``raw_params`` back unchanged. Errors other than
    pydantic's ValidationError propagate as they are.
    """
    if definition.input_model is None:
        return raw_params

    try:
        return definition.input_model.model_validate(
            raw_params if raw_params is not None else {}
        )
    except ValidationError as e:
        raise ParameterValidationError(
            format_validation_errors(e), errors=e.errors()
        ) from e
