"""Board - mark placement on a 3x3 grid."""

from __future__ import annotations

from collections.abc import Iterator

from noughts.core.enums import Mark

BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE


class OutOfRangeError(IndexError):
    """A cell index outside ``0..8`` was passed by the caller."""

    def __init__(self, index: object) -> None:
        super().__init__(f"Cell index must be an int in 0..{BOARD_CELLS - 1}, got {index!r}")
        self.index = index


def check_index(index: object) -> int:
    """Return *index* unchanged, or raise :class:`OutOfRangeError`."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise OutOfRangeError(index)
    if not 0 <= index < BOARD_CELLS:
        raise OutOfRangeError(index)
    return index


def row_of(index: int) -> int:
    return index // BOARD_SIDE


def col_of(index: int) -> int:
    return index % BOARD_SIDE


def make_index(row: int, col: int) -> int:
    return row * BOARD_SIDE + col


class Board:
    """Mutable 9-cell board, indexed row-major from the top-left corner."""

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells: list[Mark] = [Mark.EMPTY] * BOARD_CELLS

    # -- Element access -----------------------------------------------------

    def get_cell(self, index: int) -> Mark:
        return self._cells[check_index(index)]

    def set_cell(self, index: int, mark: Mark) -> None:
        self._cells[check_index(index)] = mark

    def __getitem__(self, index: int) -> Mark:
        return self.get_cell(index)

    def __len__(self) -> int:
        return BOARD_CELLS

    def __iter__(self) -> Iterator[Mark]:
        return iter(self._cells)

    # -- Query helpers ------------------------------------------------------

    def snapshot(self) -> tuple[Mark, ...]:
        """All nine marks in index order."""
        return tuple(self._cells)

    # -- Mutation -----------------------------------------------------------

    def reset(self) -> None:
        self._cells = [Mark.EMPTY] * BOARD_CELLS

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_marks(cls, marks: str) -> Board:
        """Build a board from a 9-character string of ``x``, ``o`` and ``.``.

        Whitespace is ignored, so rows may be written on separate lines.
        """
        chars = [ch for ch in marks if not ch.isspace()]
        if len(chars) != BOARD_CELLS:
            raise ValueError(f"Board layout needs {BOARD_CELLS} cells: {marks!r}")
        lookup = {".": Mark.EMPTY, "x": Mark.X, "o": Mark.O}
        b = cls()
        for i, ch in enumerate(chars):
            mark = lookup.get(ch.lower())
            if mark is None:
                raise ValueError(f"Invalid board cell {ch!r}: {marks!r}")
            b._cells[i] = mark
        return b

    def __repr__(self) -> str:
        rows = []
        for r in range(BOARD_SIDE):
            cells = self._cells[r * BOARD_SIDE : (r + 1) * BOARD_SIDE]
            rows.append("".join(m.symbol.lower() or "." for m in cells))
        return f"Board({'/'.join(rows)})"
