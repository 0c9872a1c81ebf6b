"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterator

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import BoardCorruptedError
from chessrules.core.piece import Piece
from chessrules.core.types import Square, make_square

_RULE_LINE = "|:------------------------------:|"
_EMPTY_CELL = " *  "

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.KING,
    PieceType.QUEEN,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64-square board holding at most one :class:`Piece` per square.

    Boards are cheap to :meth:`copy`; hypothetical positions are always
    explored on copies so the original is never touched.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: list[Piece | None] | None = None) -> None:
        if squares is None:
            squares = [None] * 64
        elif len(squares) != 64:
            raise ValueError(f"A board needs 64 squares, got {len(squares)}")
        self._squares: list[Piece | None] = list(squares)

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq] = piece

    def __iter__(self) -> Iterator[Piece | None]:
        return iter(self._squares)

    def __len__(self) -> int:
        return 64

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, in index order."""
        return [
            sq
            for sq, piece in enumerate(self._squares)
            if piece is not None and piece.color == color
        ]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in enumerate(self._squares) if piece == target]

    def king_square(self, color: Color) -> Square:
        """Return the king square for *color*.

        A board without that king is corrupted; the error is not meant to
        be caught.
        """
        king = Piece(color, PieceType.KING)
        for sq, piece in enumerate(self._squares):
            if piece == king:
                return sq
        raise BoardCorruptedError(f"No {color.name} king on board")

    # -- Mutation / copying -------------------------------------------------

    def move_piece(self, from_sq: Square, to_sq: Square) -> Piece | None:
        """Move whatever stands on *from_sq* to *to_sq*; return the captured piece."""
        captured = self._squares[to_sq]
        self._squares[to_sq] = self._squares[from_sq]
        self._squares[from_sq] = None
        return captured

    def copy(self) -> Board:
        b = Board.__new__(Board)
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting position: kings on the d-file, queens on the e-file."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[make_square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Rendering ----------------------------------------------------------

    def render(self) -> str:
        """Fixed-width text grid, row 0 first, four characters per cell."""
        lines = [_RULE_LINE]
        for rank in range(8):
            cells = []
            for file in range(8):
                piece = self._squares[make_square(file, rank)]
                cells.append(_EMPTY_CELL if piece is None else " " + piece.grid_code)
            lines.append("|" + "".join(cells) + "|")
        lines.append(_RULE_LINE)
        return "\n".join(lines)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[make_square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)
