"""Interactive console: play a game by typing moves like ``d2 d3``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Iterable

from chessrules.core.enums import GameState
from chessrules.core.errors import ChessError
from chessrules.core.types import square_name
from chessrules.game.session import Session

_LOGGER = logging.getLogger(__name__)

Writer = Callable[[str], None]

_HELP = (
    "Commands: '<from> <to>' (e.g. 'd2 d3'), 'state', 'colour', 'gm <sq>', "
    "'piece <sq>', 'board', 'fen', 'help', 'quit'."
)


class Console:
    """Line-oriented command loop around a :class:`Session`.

    I/O is injected so the loop can run against any iterable of lines.
    """

    def __init__(self, session: Session, write: Writer) -> None:
        self.session = session
        self._write = write

    # ---- Loop ----
    def run(self, lines: Iterable[str]) -> Session:
        self._prompt()
        for raw in lines:
            line = raw.strip()
            if line.lower() in ("quit", "exit"):
                break
            if self.session.get_game_state() == GameState.WAITING_ON_PROMOTION_CHOICE:
                self.cmd_promote(line)
            elif not self.dispatch(line):
                break
            self._prompt()
        return self.session

    def dispatch(self, line: str) -> bool:
        """Handle one command; return ``False`` to stop the loop."""
        tokens = line.split()
        if not tokens:
            return True
        cmd = tokens[0].lower()
        if cmd in ("quit", "exit"):
            return False
        if cmd == "help":
            self._write(_HELP)
        elif cmd == "state":
            self._write(str(self.session.get_game_state()))
        elif cmd == "colour":
            self._write(str(self.session.get_active_colour()))
        elif cmd == "board":
            self._write(str(self.session))
        elif cmd == "fen":
            self._write(self.session.to_fen())
        elif cmd == "gm" and len(tokens) == 2:
            self.cmd_possible_moves(tokens[1])
        elif cmd == "piece" and len(tokens) == 2:
            self.cmd_piece(tokens[1])
        elif len(tokens) == 2:
            self.cmd_move(tokens[0], tokens[1])
        else:
            self._write("Invalid input. Please try again!")
        return True

    # ---- Command handlers ----
    def cmd_move(self, from_text: str, to_text: str) -> None:
        try:
            self.session.make_move(from_text, to_text)
        except ChessError as exc:
            _LOGGER.debug("Move %s %s rejected: %s", from_text, to_text, exc)
            self._write(f"Error received: \n'{exc}'\nPlease try again!")
            return
        self._write("Succeeded in moving the piece!")

    def cmd_promote(self, choice: str) -> None:
        try:
            self.session.set_promotion(choice)
        except ChessError as exc:
            self._write(f"Error received:\n{exc}\nPlease try again!")
            return
        self._write("Successfully promoted the piece!")

    def cmd_possible_moves(self, square_text: str) -> None:
        try:
            moves = self.session.get_possible_moves(square_text)
        except ChessError as exc:
            self._write(f"Error received: \n'{exc}'")
            return
        self._write(" ".join(square_name(sq) for sq in moves) or "(none)")

    def cmd_piece(self, square_text: str) -> None:
        try:
            piece = self.session.get_piece(square_text)
        except ChessError as exc:
            self._write(f"Error received: \n'{exc}'")
            return
        if piece is None:
            self._write("(empty)")
        else:
            self._write(f"{piece.color} {piece.piece_type.name.lower()}")

    # ---- Prompts ----
    def _prompt(self) -> None:
        state = self.session.get_game_state()
        if state == GameState.WAITING_ON_PROMOTION_CHOICE:
            self._write("What would you like to promote the pawn to?")
            return
        self._write(
            "This is the current board. "
            f"It is {self.session.get_active_colour()}'s turn."
        )
        self._write(str(self.session))
        if state == GameState.GAME_OVER:
            self._write("The game is over.")
        else:
            if state == GameState.CHECK:
                self._write("Check!")
            self._write(
                "Please input your move (on the format 'XF XF' where X is a "
                "character and F is a number)."
            )


def run_console(session: Session, lines: Iterable[str], write: Writer) -> Session:
    return Console(session, write).run(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules", description="Play chess in the terminal."
    )
    parser.add_argument(
        "--fen", type=str, default=None, help="Start position (default: startpos)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch the console game."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.fen is None:
        session = Session.new()
    else:
        try:
            session = Session.from_fen(args.fen)
        except ChessError as exc:
            parser.error(str(exc))

    run_console(session, sys.stdin, print)
    return 0


if __name__ == "__main__":
    sys.exit(main())
