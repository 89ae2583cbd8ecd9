import numpy as np

from draughts.board import census, empty_board, piece_at, place
from draughts.chains import explore_capture_chains
from draughts.types import Cell, GameState, Piece, Side, TurnContext

WHITE_TO_MOVE = TurnContext(current=Side.WHITE, human=Side.WHITE)


def make_board(pieces):
    board = empty_board()
    for cell, piece in pieces.items():
        place(board, cell, piece)
    return board


def test_one_outcome_per_alternative():
    board = make_board({
        Cell(3, 4): Piece.WHITE_MAN,
        Cell(2, 3): Piece.BLACK_MAN,
        Cell(4, 3): Piece.BLACK_MAN,
    })
    counts = census(board)
    outcomes = explore_capture_chains(board, counts, Cell(3, 4), WHITE_TO_MOVE)
    assert [o.landing for o in outcomes] == [Cell(1, 2), Cell(5, 2)]
    for o in outcomes:
        assert o.origin == Cell(3, 4)
        assert o.counts.remaining(Side.BLACK) < counts.remaining(Side.BLACK)
        assert census(o.board) == o.counts


def test_chain_continues_in_another_direction():
    board = make_board({
        Cell(2, 7): Piece.WHITE_MAN,
        Cell(3, 6): Piece.BLACK_MAN,
        Cell(3, 4): Piece.BLACK_MAN,
    })
    counts = census(board)
    outcomes = explore_capture_chains(board, counts, Cell(2, 7), WHITE_TO_MOVE)
    assert len(outcomes) == 1
    leaf = outcomes[0]
    assert leaf.landing == Cell(2, 3)
    assert leaf.captured == (Cell(3, 6), Cell(3, 4))
    assert leaf.counts == GameState(white_men=1, black_men=0)
    assert piece_at(leaf.board, Cell(2, 3)) == Piece.WHITE_MAN


def test_chain_promotes_on_landing():
    board = make_board({
        Cell(3, 4): Piece.WHITE_MAN,
        Cell(4, 3): Piece.BLACK_MAN,
        Cell(4, 1): Piece.BLACK_MAN,
    })
    outcomes = explore_capture_chains(board, census(board), Cell(3, 4), WHITE_TO_MOVE)
    assert len(outcomes) == 1
    leaf = outcomes[0]
    assert leaf.landing == Cell(3, 0)
    assert piece_at(leaf.board, Cell(3, 0)) == Piece.WHITE_KING
    assert leaf.counts == GameState(white_men=0, black_men=0, white_kings=1, black_kings=0)


def test_branching_chain_enumerates_every_line():
    # After the first jump the man can go on either way
    board = make_board({
        Cell(4, 7): Piece.WHITE_MAN,
        Cell(3, 6): Piece.BLACK_MAN,
        Cell(1, 4): Piece.BLACK_MAN,
        Cell(3, 4): Piece.BLACK_MAN,
    })
    counts = census(board)
    outcomes = explore_capture_chains(board, counts, Cell(4, 7), WHITE_TO_MOVE)
    assert [o.landing for o in outcomes] == [Cell(0, 3), Cell(4, 3)]
    assert [len(o.captured) for o in outcomes] == [2, 2]
    for o in outcomes:
        assert census(o.board) == o.counts
        assert len(o.captured) <= 12


def test_input_position_is_not_modified():
    board = make_board({
        Cell(3, 4): Piece.WHITE_MAN,
        Cell(2, 3): Piece.BLACK_MAN,
        Cell(4, 3): Piece.BLACK_MAN,
    })
    before = board.copy()
    counts = census(board)
    explore_capture_chains(board, counts, Cell(3, 4), WHITE_TO_MOVE)
    assert np.array_equal(board, before)
    assert counts == census(before)


def test_piece_without_captures_is_a_single_leaf():
    board = make_board({Cell(3, 4): Piece.WHITE_MAN})
    outcomes = explore_capture_chains(board, census(board), Cell(3, 4), WHITE_TO_MOVE)
    assert len(outcomes) == 1
    assert outcomes[0].captured == ()
    assert np.array_equal(outcomes[0].board, board)
    assert outcomes[0].board is not board
