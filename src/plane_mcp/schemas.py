"""Pydantic schemas for tool argument validation.

Only the arguments that end up in the request path are declared; everything
else the caller sends is passed through to Plane untouched.
"""
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, StrictStr, ValidationError


class ToolValidationError(ValueError):
    """Raised when required tool arguments are missing or not strings."""

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(
            f"Missing or invalid required argument(s): {', '.join(fields)} (must be a string)"
        )


class ToolArgs(BaseModel):
    """Base schema for tool arguments; unknown arguments are kept."""

    model_config = ConfigDict(extra="allow")


class ProjectArgs(ToolArgs):
    """Arguments addressing a single project."""

    project_id: StrictStr


class IssueArgs(ProjectArgs):
    """Arguments addressing a single issue within a project."""

    issue_id: StrictStr


class CreateIssueArgs(ProjectArgs):
    """Arguments for creating an issue; the title is mandatory."""

    name: StrictStr


ArgsT = TypeVar("ArgsT", bound=ToolArgs)


def validate_arguments(model: type[ArgsT], arguments: dict[str, Any]) -> ArgsT:
    """Parse arguments against a schema, naming every offending field on failure."""
    try:
        return model.model_validate(arguments)
    except ValidationError as e:
        fields = []
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"]) or "arguments"
            if field not in fields:
                fields.append(field)
        raise ToolValidationError(fields) from e


def passthrough(arguments: dict[str, Any], exclude: Iterable[str]) -> dict[str, Any]:
    """Return the arguments not consumed by the request path, in caller order."""
    excluded = set(exclude)
    return {key: value for key, value in arguments.items() if key not in excluded}
