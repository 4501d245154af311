"""Tagged results for shape checks on untrusted payloads."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[M]):
    value: M
    ok: bool = True


@dataclass(frozen=True)
class Err:
    message: str
    errors: list[dict[str, Any]] = field(default_factory=list)
    ok: bool = False


def check_shape(model: type[M], payload: Any) -> Ok[M] | Err:
    """Validate ``payload`` against ``model`` without raising."""
    if not isinstance(payload, dict):
        return Err(f"expected a JSON object, got {type(payload).__name__}")
    try:
        return Ok(model.model_validate(payload))
    except ValidationError as e:
        details = e.errors(include_url=False)
        first = details[0] if details else {}
        location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
        return Err(f"{location}: {first.get('msg', 'invalid value')}", details)
