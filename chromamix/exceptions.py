"""
Exception hierarchy for chromamix.

```
ChromamixError (base, a ValueError)
├── InvalidColorFormatError
├── InvalidWeightsError
├── EmptyInputError
├── PositionCountMismatchError
├── PositionsNotAscendingError
├── InvalidGeometryError
└── InvalidParametersError
```

Every error carries a stable ``code`` and a ``details`` dict so a response
layer can map it onto a structured reply without parsing the message.
Arithmetic edge cases (zero division in blend modes, out-of-gamut LAB) are
resolved by policy and never raise.
"""

from typing import Any, ClassVar, Optional


class ChromamixError(ValueError):
    """Base exception for all chromamix errors."""

    code: ClassVar[str] = "CHROMAMIX_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class InvalidColorFormatError(ChromamixError):
    """A color input could not be parsed or a channel is out of range."""

    code = "INVALID_COLOR_FORMAT"

    def __init__(self, value: Any, reason: Optional[str] = None):
        message = f"Invalid color {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message, {"value": repr(value), "reason": reason})
        self.value = value
        self.reason = reason


class InvalidWeightsError(ChromamixError):
    """Mix weights do not match the colors, are negative, or do not sum to 1."""

    code = "INVALID_WEIGHTS"

    def __init__(self, weights: Any, reason: str):
        super().__init__(
            f"Invalid weights {list(weights)!r}: {reason}",
            {"weights": list(weights), "reason": reason},
        )
        self.weights = list(weights)
        self.reason = reason


class EmptyInputError(ChromamixError):
    """An operation that needs at least one color received none."""

    code = "EMPTY_INPUT"

    def __init__(self, operation: str):
        super().__init__(f"{operation} requires at least one color", {"operation": operation})
        self.operation = operation


class PositionCountMismatchError(ChromamixError):
    """Explicit gradient positions do not match the number of colors."""

    code = "POSITION_COUNT_MISMATCH"

    def __init__(self, expected: int, got: int):
        super().__init__(
            f"Expected {expected} positions (one per color), got {got}",
            {"expected": expected, "got": got},
        )
        self.expected = expected
        self.got = got


class PositionsNotAscendingError(ChromamixError):
    """Explicit gradient positions are not strictly ascending."""

    code = "POSITIONS_NOT_ASCENDING"

    def __init__(self, positions: Any, index: int):
        positions = list(positions)
        super().__init__(
            f"Positions must be strictly ascending; {positions[index]} at index {index} "
            f"does not exceed {positions[index - 1]}",
            {"positions": positions, "index": index},
        )
        self.positions = positions
        self.index = index


class InvalidGeometryError(ChromamixError):
    """A radial geometry is incomplete or malformed."""

    code = "INVALID_GEOMETRY"

    def __init__(self, reason: str, **details: Any):
        super().__init__(f"Invalid gradient geometry: {reason}", {"reason": reason, **details})
        self.reason = reason


class InvalidParametersError(ChromamixError):
    """Operation parameters failed model validation."""

    code = "INVALID_PARAMETERS"

    def __init__(self, operation: str, errors: list[dict[str, Any]]):
        summary = "; ".join(
            f"{'.'.join(str(part) for part in err.get('loc', ())) or '<root>'}: {err.get('msg')}"
            for err in errors
        )
        super().__init__(
            f"Invalid parameters for {operation}: {summary}",
            {"operation": operation, "errors": errors},
        )
        self.operation = operation
        self.errors = errors
