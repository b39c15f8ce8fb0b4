from typing import Any


class ShapeError(ValueError):
    """Base error for inputs that cannot be normalized into a Vec or Mat."""

    def __init__(self, message: str, value: Any = None):
        super().__init__(message)
        self.value = value


class UnrecognizedShapeError(ShapeError):
    """Input matches none of the accepted vector or matrix shapes."""

    def __init__(self, value: Any, kind: str = "vector"):
        super().__init__(f"Unsupported {kind} format: {value!r}", value)
        self.kind = kind


class InvalidAffineFormError(ShapeError):
    """A 3x3 input whose third row is not [0, 0, 1]."""

    def __init__(self, value: Any):
        super().__init__(
            f"A square 3x3 matrix must be in row format with the final row [0, 0, 1], got {value!r}", value)


class UnknownArraySizeError(ShapeError):
    """An array-like matrix input whose size matches no accepted layout."""

    def __init__(self, value: Any):
        super().__init__(f"Matrix array of unknown size: {value!r}", value)
