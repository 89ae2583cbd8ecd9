"""Command-line interface for playing draughts against the computer."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional, Sequence

from .config import DraughtsConfig, get_config, load_config_from_file, setup_logging
from .engine import GameEngine
from .errors import DraughtsError, InvalidChoiceError
from .eval import get_evaluator
from .notation import parse_square, to_notation
from .render import BoardRenderer
from .types import Outcome, Side

QUIT_WORDS = {"q", "quit", "exit"}


class ConsoleGame:
    """One human against the computer on a text console."""

    def __init__(self, config: Optional[DraughtsConfig] = None,
                 input_fn: Callable[[str], str] = input,
                 output: Callable[[str], None] = print,
                 engine: Optional[GameEngine] = None) -> None:
        self.config = config or get_config()
        self.input_fn = input_fn
        self.output = output
        self.renderer = BoardRenderer(self.config.ui)
        self.engine: Optional[GameEngine] = engine

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------
    def _prompt(self, text: str) -> Optional[str]:
        try:
            value = self.input_fn(text)
        except EOFError:
            return None
        value = value.strip()
        if value.lower() in QUIT_WORDS:
            return None
        return value

    def _choose_side(self) -> Optional[Side]:
        preset = self.config.game.human_side
        if preset is not None:
            return Side(preset)
        while True:
            self.output("\nChoose your colour:\n1. White\n2. Black")
            choice = self._prompt("Your choice: ")
            if choice is None:
                return None
            choice = choice.lower()
            if choice in {"1", "white", "w"}:
                return Side.WHITE
            if choice in {"2", "black", "b"}:
                return Side.BLACK
            self.output("Please type 'White' or 'Black'.")

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------
    def _show(self, **highlight) -> None:
        assert self.engine is not None
        self.output(self.renderer.render(self.engine.board, self.engine.counts, **highlight))

    def _human_turn(self) -> bool:
        engine = self.engine
        assert engine is not None
        while True:
            origin = self._prompt("\nYour move. Enter the square of a piece (e.g. B3): ")
            if origin is None:
                return False
            try:
                options = engine.enumerate_human_options(origin)
            except DraughtsError as e:
                self.output(f"{e}. Try again.")
                continue

            destinations = [parse_square(dest) for _, dest in options]
            self._show(selected=parse_square(origin), destinations=destinations)
            self.output("You can move to:")
            for index, dest in options:
                self.output(f"{index}. {dest}")

            while True:
                raw = self._prompt("Enter the option number: ")
                if raw is None:
                    return False
                try:
                    engine.apply_human_move(origin, int(raw))
                except ValueError as e:
                    message = str(e) if isinstance(e, InvalidChoiceError) else "Please enter a number"
                    self.output(f"{message}.")
                    continue
                return True

    def _computer_turn(self) -> bool:
        engine = self.engine
        assert engine is not None
        outcome: Optional[Outcome] = engine.compute_computer_move()
        if outcome is None:
            self.output("The computer has no moves.")
            return False
        sep = "x" if outcome.is_capture else "-"
        self.output(f"Computer moves {to_notation(outcome.origin)}{sep}{to_notation(outcome.landing)}.")
        if outcome.captured:
            taken = ", ".join(to_notation(c) for c in outcome.captured)
            self.output(f"Captured: {taken}.")
        return True

    def _announce(self, winner: Side) -> None:
        engine = self.engine
        assert engine is not None
        loser = winner.opponent
        if engine.counts.remaining(loser) == 0:
            reason = f"{loser.title} has no pieces left"
        else:
            reason = f"{loser.title} has no moves"
        verdict = "You win!" if winner is engine.ctx.human else "The computer wins."
        self.output(f"\n{winner.title} wins: {reason}. {verdict}")

    # ------------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------------
    def run(self) -> int:
        self.output("\nWelcome to draughts!")
        if self.engine is None:
            human = self._choose_side()
            if human is None:
                return 0
            self.engine = GameEngine(human, get_evaluator(self.config.evaluation))
            if human is Side.WHITE:
                self.output("\nYou play White (O). You move first.")
            else:
                self.output("\nYou play Black (0). The computer moves first.")
        self.output(self.renderer.legend())
        self._show()

        while True:
            engine = self.engine
            self.output(f"\nTo move: {'you' if engine.ctx.is_human_turn else 'computer'}")
            winner = engine.is_game_over()
            if winner is not None:
                self._announce(winner)
                break
            if engine.ctx.is_human_turn:
                if not self._human_turn():
                    self.output("Game abandoned.")
                    break
            elif not self._computer_turn():
                break
            self._show()
        return 0


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play draughts against the computer")
    ap.add_argument("--side", choices=["white", "black"], help="Your colour (prompted when omitted)")
    ap.add_argument("--config", help="JSON configuration file")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--unicode", action="store_true", help="Draw pieces with Unicode glyphs")
    ap.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return ap.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = load_config_from_file(args.config) if args.config else get_config()
    if args.side:
        config.game.human_side = args.side
    if args.no_color:
        config.ui.use_color = False
    if args.unicode:
        config.ui.use_unicode = True
    setup_logging(args.log_level)
    return ConsoleGame(config).run()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    sys.exit(main())
