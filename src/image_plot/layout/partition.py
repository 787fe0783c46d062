"""Assign images to row-major grid slots."""

from __future__ import annotations

from dataclasses import dataclass

from image_plot.errors import InvalidGridSpec


@dataclass(frozen=True)
class GridSpec:
    """Image count and row count for a grid; validated on construction."""

    image_count: int
    row_count: int

    def __post_init__(self) -> None:
        if (
            self.image_count < 1
            or self.row_count < 1
            or self.row_count > self.image_count
        ):
            raise InvalidGridSpec(self.image_count, self.row_count)

    @property
    def row_sizes(self) -> list[int]:
        """
        Return the number of images in each row.

        Every row gets ``image_count // row_count`` images and the earliest
        ``image_count % row_count`` rows get one more.
        """
        base, extra = divmod(self.image_count, self.row_count)
        return [base + (1 if r < extra else 0) for r in range(self.row_count)]

    @property
    def column_count(self) -> int:
        """Width of the widest (first) row."""
        return -(-self.image_count // self.row_count)


@dataclass(frozen=True)
class Cell:
    """A filled grid slot; ``index`` points into the input image list."""

    row: int
    column: int
    index: int


def partition(image_count: int, row_count: int) -> list[list[Cell]]:
    """Distribute ``image_count`` images over ``row_count`` rows."""
    spec = GridSpec(image_count=image_count, row_count=row_count)
    rows: list[list[Cell]] = []
    index = 0
    for r, size in enumerate(spec.row_sizes):
        rows.append([Cell(row=r, column=c, index=index + c)
                     for c in range(size)])
        index += size
    return rows
