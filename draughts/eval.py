"""
Evaluation interfaces and the material evaluator used by the computer player.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .board import piece_at
from .config import EvaluationSettings, get_evaluation_settings
from .notation import parse_square
from .types import Board, Cell, GameState, Side, man_of


class Evaluator(ABC):
    """Abstract evaluator interface for position scoring."""

    @abstractmethod
    def evaluate(self, board: Board, counts: GameState, side: Side) -> int:  # pragma: no cover
        """Score a position from ``side``'s point of view."""
        raise NotImplementedError


class MaterialEvaluator(Evaluator):
    """Material count with a flat bonus for holding the centre cell.

    Each material term only rewards an advantage: a deficit scores 0, never a
    negative number.
    """

    def __init__(self, man_weight: int = 10, king_weight: int = 15,
                 centre: Cell = Cell(4, 3), centre_bonus: int = 8) -> None:
        self.man_weight = man_weight
        self.king_weight = king_weight
        self.centre = centre
        self.centre_bonus = centre_bonus

    def evaluate(self, board: Board, counts: GameState, side: Side) -> int:
        opp = side.opponent
        score: int = 0
        score += max(0, (counts.men(side) - counts.men(opp)) * self.man_weight)
        score += max(0, (counts.kings(side) - counts.kings(opp)) * self.king_weight)
        if piece_at(board, self.centre) == man_of(side):
            score += self.centre_bonus
        return score


# Factory to get an Evaluator-conforming object

def get_evaluator(settings: Optional[EvaluationSettings] = None) -> Evaluator:
    s = settings or get_evaluation_settings()
    centre = parse_square(s.centre_square)
    if centre is None:
        raise ValueError(f"Invalid centre square {s.centre_square!r}")
    return MaterialEvaluator(
        man_weight=s.man_weight,
        king_weight=s.king_weight,
        centre=centre,
        centre_bonus=s.centre_bonus,
    )


__all__ = [
    "Evaluator",
    "MaterialEvaluator",
    "get_evaluator",
]
