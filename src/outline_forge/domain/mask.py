"""Binary raster masks derived from alpha channels."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from outline_forge.exceptions import MaskError, MaskShapeError


@dataclass(frozen=True)
class RasterMask:
    """A width x height grid of foreground/background cells.

    Cells are stored row-major. Reads outside the grid are background,
    which lets boundary tests treat the image edge like transparency.

    Attributes:
        width: Number of columns (>= 0)
        height: Number of rows (>= 0)
        cells: Row-major foreground flags, length width * height
    """

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise MaskError(f"Mask dimensions must be non-negative, got {self.width}x{self.height}")
        if len(self.cells) != self.width * self.height:
            raise MaskShapeError(self.width, self.height, len(self.cells))

    @classmethod
    def from_alpha(
        cls,
        width: int,
        height: int,
        alpha: Sequence[int] | bytes,
        threshold: int,
    ) -> "RasterMask":
        """Threshold a byte-per-pixel alpha channel.

        Args:
            width: Mask width in pixels
            height: Mask height in pixels
            alpha: One alpha value (0-255) per pixel, row-major
            threshold: Pixels with alpha >= threshold are foreground

        Returns:
            RasterMask instance

        Raises:
            MaskShapeError: If the buffer length is not width * height
        """
        return cls(width, height, tuple(value >= threshold for value in alpha))

    @classmethod
    def from_rgba(
        cls,
        width: int,
        height: int,
        rgba: Sequence[int] | bytes,
        threshold: int,
    ) -> "RasterMask":
        """Threshold the alpha channel of an interleaved RGBA buffer."""
        if len(rgba) != width * height * 4:
            raise MaskShapeError(width, height, len(rgba) // 4)
        return cls.from_alpha(width, height, rgba[3::4], threshold)

    @classmethod
    def from_rows(cls, rows: Iterable[str], foreground: str = "#") -> "RasterMask":
        """Build a mask from text rows, one character per cell.

        Rows shorter than the widest row are padded with background.
        """
        lines = [row.rstrip("\r\n") for row in rows]
        while lines and not lines[-1].strip():
            lines.pop()
        width = max((len(line) for line in lines), default=0)
        cells: list[bool] = []
        for line in lines:
            padded = line.ljust(width)
            cells.extend(char in foreground for char in padded)
        return cls(width, len(lines) if width else 0, tuple(cells))

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def is_foreground(self, x: int, y: int) -> bool:
        """Check a cell; anything outside the grid is background."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return False
        return self.cells[y * self.width + x]

    def foreground_count(self) -> int:
        return sum(self.cells)

    def to_rows(self, foreground: str = "#", background: str = ".") -> list[str]:
        """Render the mask as text rows."""
        return [
            "".join(
                foreground if self.cells[y * self.width + x] else background
                for x in range(self.width)
            )
            for y in range(self.height)
        ]
