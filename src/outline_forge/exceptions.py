"""Exception hierarchy for Outline Forge.

Geometry operations never raise for degenerate input; they return an empty
or absent result instead. These exceptions cover invalid construction of
inputs and malformed arguments at the command line boundary.
"""


class OutlineForgeError(Exception):
    """Base exception for all Outline Forge errors."""

    pass


class MaskError(OutlineForgeError):
    """Errors related to raster mask construction."""

    pass


class MaskShapeError(MaskError):
    """Mask buffer does not match the declared dimensions."""

    def __init__(self, width: int, height: int, length: int) -> None:
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            f"Mask buffer of length {length} does not match {width}x{height}"
        )


class MaskFileError(MaskError):
    """Error reading a mask description file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read mask '{path}': {reason}")


class GeometryError(OutlineForgeError):
    """Errors in geometry descriptions supplied by the caller."""

    pass


class GeometryParseError(GeometryError):
    """A geometry argument could not be parsed."""

    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(f"Cannot parse '{value}': expected {expected}")
