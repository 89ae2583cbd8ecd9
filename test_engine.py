import numpy as np
import pytest

from draughts.board import cells_of, census, empty_board, piece_at, place
from draughts.engine import GameEngine
from draughts.errors import (
    CaptureRequiredError,
    DraughtsError,
    InvalidChoiceError,
    InvalidNotationError,
    NoLegalMoveError,
    NotYourPieceError,
    OutOfTurnError,
)
from draughts.eval import MaterialEvaluator
from draughts.types import Cell, GameState, Piece, Side, TurnContext

HUMAN_WHITE = TurnContext(current=Side.WHITE, human=Side.WHITE)


def make_board(pieces):
    board = empty_board()
    for cell, piece in pieces.items():
        place(board, cell, piece)
    return board


def capture_position():
    return GameEngine(ctx=HUMAN_WHITE, evaluator=MaterialEvaluator(), board=make_board({
        Cell(3, 4): Piece.WHITE_MAN,
        Cell(6, 7): Piece.WHITE_MAN,
        Cell(2, 3): Piece.BLACK_MAN,
        Cell(4, 3): Piece.BLACK_MAN,
        Cell(1, 0): Piece.BLACK_MAN,
    }))


def play_out(engine, max_plies=300):
    """Human takes the last option of its first playable piece; computer searches."""
    for _ in range(max_plies):
        if engine.is_game_over() is not None:
            return
        if engine.ctx.is_human_turn:
            for cell in list(cells_of(engine.board, engine.ctx.human)):
                try:
                    options = engine.enumerate_human_options(cell)
                except DraughtsError:
                    continue
                engine.apply_human_move(cell, len(options))
                break
        else:
            mandatory = engine.is_capture_mandatory_for(engine.ctx.current)
            outcome = engine.compute_computer_move()
            assert outcome is not None
            assert outcome.is_capture == mandatory
        assert engine.census_is_consistent()


def test_initial_options():
    engine = GameEngine(Side.WHITE, MaterialEvaluator())
    assert engine.ctx.is_human_turn
    assert not engine.is_capture_mandatory_for(Side.WHITE)
    assert not engine.is_capture_mandatory_for(Side.BLACK)
    assert engine.enumerate_human_options("C3") == [(1, "B4"), (2, "D4")]
    assert engine.enumerate_human_options("c3") == [(1, "B4"), (2, "D4")]
    assert engine.enumerate_human_options(Cell(0, 5)) == [(1, "B4")]


@pytest.mark.parametrize("square, error", [
    ("Z9", InvalidNotationError),
    ("C", InvalidNotationError),
    ("B6", NotYourPieceError),
    ("B4", NotYourPieceError),
    ("B2", NoLegalMoveError),
])
def test_invalid_selection(square, error):
    engine = GameEngine(Side.WHITE, MaterialEvaluator())
    before = engine.board.copy()
    with pytest.raises(error):
        engine.enumerate_human_options(square)
    assert np.array_equal(engine.board, before)


def test_invalid_choice_leaves_state_unchanged():
    engine = GameEngine(Side.WHITE, MaterialEvaluator())
    before = engine.board.copy()
    for choice in (0, 3, -1):
        with pytest.raises(InvalidChoiceError):
            engine.apply_human_move("C3", choice)
    assert np.array_equal(engine.board, before)
    assert engine.ctx.is_human_turn


def test_human_move_commits_and_passes_turn():
    engine = GameEngine(Side.WHITE, MaterialEvaluator())
    counts = engine.apply_human_move("C3", 1)
    assert counts == GameState()
    assert piece_at(engine.board, Cell(0, 4)) == Piece.EMPTY
    assert piece_at(engine.board, Cell(1, 4)) == Piece.WHITE_MAN
    assert piece_at(engine.board, Cell(2, 5)) == Piece.EMPTY
    assert engine.ctx.current is Side.BLACK
    with pytest.raises(OutOfTurnError):
        engine.enumerate_human_options("E3")


def test_computer_reply():
    engine = GameEngine(Side.WHITE, MaterialEvaluator())
    with pytest.raises(OutOfTurnError):
        engine.compute_computer_move()
    engine.apply_human_move("C3", 2)
    outcome = engine.compute_computer_move()
    assert outcome is not None
    assert not outcome.is_capture
    assert engine.ctx.is_human_turn
    assert engine.census_is_consistent()


def test_computer_opens_when_human_plays_black():
    engine = GameEngine(Side.BLACK, MaterialEvaluator())
    assert not engine.ctx.is_human_turn
    # Human pieces always start at the bottom
    assert piece_at(engine.board, Cell(0, 7)) == Piece.BLACK_MAN
    outcome = engine.compute_computer_move()
    assert outcome is not None
    assert outcome.landing.row == 3
    assert engine.ctx.is_human_turn


def test_capture_required_elsewhere():
    engine = capture_position()
    assert engine.is_capture_mandatory_for(Side.WHITE)
    with pytest.raises(CaptureRequiredError):
        engine.enumerate_human_options("G1")


def test_human_chooses_among_capture_lines():
    engine = capture_position()
    assert engine.enumerate_human_options("D4") == [(1, "B6"), (2, "F6")]
    counts = engine.apply_human_move("D4", 2)
    assert counts.black_men == 2
    assert piece_at(engine.board, Cell(5, 2)) == Piece.WHITE_MAN
    assert piece_at(engine.board, Cell(4, 3)) == Piece.EMPTY
    assert piece_at(engine.board, Cell(2, 3)) == Piece.BLACK_MAN
    assert engine.census_is_consistent()


def test_game_over_by_material():
    engine = GameEngine(ctx=HUMAN_WHITE, evaluator=MaterialEvaluator(),
                        board=make_board({Cell(3, 4): Piece.WHITE_MAN}))
    assert engine.is_game_over() is Side.WHITE


def test_game_over_by_immobilization():
    engine = GameEngine(ctx=HUMAN_WHITE.switched(), evaluator=MaterialEvaluator(), board=make_board({
        Cell(1, 0): Piece.BLACK_MAN,
        Cell(0, 1): Piece.WHITE_MAN,
        Cell(2, 1): Piece.WHITE_MAN,
        Cell(3, 2): Piece.WHITE_MAN,
    }))
    assert engine.is_game_over() is Side.WHITE
    assert engine.compute_computer_move() is None
    assert engine.ctx.current is Side.BLACK


def test_counts_follow_board_when_not_given():
    board = make_board({Cell(3, 4): Piece.WHITE_KING, Cell(4, 1): Piece.BLACK_MAN})
    engine = GameEngine(ctx=HUMAN_WHITE, evaluator=MaterialEvaluator(), board=board)
    assert engine.counts == census(board)


@pytest.mark.parametrize("human", [Side.WHITE, Side.BLACK])
def test_full_game_keeps_census(human):
    engine = GameEngine(human, MaterialEvaluator())
    play_out(engine)
    assert engine.census_is_consistent()


@pytest.mark.parametrize("cell", [Cell(-1, 6), Cell(8, 5), Cell(3, -2)])
def test_cells_off_the_board_are_rejected(cell):
    engine = GameEngine(ctx=HUMAN_WHITE, evaluator=MaterialEvaluator(),
                        board=make_board({Cell(7, 6): Piece.WHITE_MAN, Cell(1, 0): Piece.BLACK_MAN}))
    before = engine.board.copy()
    with pytest.raises(InvalidNotationError):
        engine.enumerate_human_options(cell)
    with pytest.raises(InvalidNotationError):
        engine.apply_human_move(cell, 1)
    assert np.array_equal(engine.board, before)
    assert engine.ctx.is_human_turn
