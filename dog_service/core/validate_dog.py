"""Dog Validation — typed checks for create/update payloads and path identifiers.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Return a typed value on success, an error instance on failure (never raise)
    - Create requires name/breed/description as strings and age as a number
    - Update accepts any subset of the four fields (including none); present
      fields must carry the right type, explicit null included
    - Booleans are never numbers; NaN and infinities are never ages
    - Unknown extra fields are ignored
    - A path id is a number when it reads as one; whether it names a row is
      the repository's call

Design Decisions:
    - Pydantic strict mode over manual isinstance chains: no coercion ("3" is not
      an age), and bool is rejected for numeric fields
    - int | float for age: the stored value keeps its JSON number shape
    - DogUpdate.changes uses exclude_unset so "absent" and "sent" stay distinct
"""

import math
import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from dog_service.core.domain_types import DogId
from dog_service.core.errors import DogValidationError, InvalidIdError

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_PREFIXED = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)
_INFINITY = re.compile(r"[+-]?Infinity")


class DogCreate(BaseModel):
    """Fully populated payload for creating a dog."""
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    name: str
    breed: str
    description: str
    age: int | float


class DogUpdate(BaseModel):
    """Partial payload for updating a dog — only set fields are applied."""
    model_config = ConfigDict(strict=True, extra="ignore", allow_inf_nan=False)

    name: str | None = None
    breed: str | None = None
    description: str | None = None
    age: int | float | None = None

    @field_validator("name", "breed", "description", "age", mode="before")
    @classmethod
    def reject_explicit_null(cls, v):
        if v is None:
            raise ValueError("field may be omitted but not null")
        return v

    @property
    def changes(self) -> dict:
        """Fields present in the request, with their validated values."""
        return self.model_dump(exclude_unset=True)


def validate_create(payload: object) -> DogCreate | DogValidationError:
    """Validate a full create payload."""
    if not isinstance(payload, dict):
        return DogValidationError(["payload must be a JSON object"])
    try:
        return DogCreate.model_validate(payload)
    except ValidationError as e:
        return DogValidationError(_describe(e))


def validate_partial(payload: object) -> DogUpdate | DogValidationError:
    """Validate a partial update payload. An empty object is a valid no-op."""
    if not isinstance(payload, dict):
        return DogValidationError(["payload must be a JSON object"])
    try:
        return DogUpdate.model_validate(payload)
    except ValidationError as e:
        return DogValidationError(_describe(e))


def validate_id(raw: str) -> DogId | float | InvalidIdError:
    """Parse a path identifier as a number.

    Follows the JavaScript Number() grammar: decimal
    ("7", " 7 ", "7.0", "1e2", ".5"), 0x/0o/0b prefixed integers, and
    [+-]Infinity; a blank identifier reads as 0. Digit separators ("1_000")
    are not numbers. Integral values come back as DogId; a numeric but
    non-integral or infinite value is returned as a float and left for the
    repository to refuse. Anything else is an InvalidIdError.
    """
    if not isinstance(raw, str):
        return InvalidIdError(str(raw))
    value = _parse_number(raw)
    if value is None:
        return InvalidIdError(raw)
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        value = int(value)
    return DogId(value) if isinstance(value, int) else value


def _parse_number(raw: str) -> int | float | None:
    text = raw.strip()
    if not text:
        return 0
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    if _INFINITY.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _DECIMAL.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            return float(text)
    return None


def _describe(exc: ValidationError) -> list[str]:
    return [
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    ]
