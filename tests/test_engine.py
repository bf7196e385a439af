"""Tests for the exhaustive move search."""

import pytest

from conftest import T, make_board
from qwirkle.bag import Bag
from qwirkle.board import Board
from qwirkle.engine import MoveEngine
from qwirkle.rack import Rack
from qwirkle.scoring import score_move


def best_single_tile_score(board, rack):
    """Brute force: the best score of placing exactly one rack tile."""
    best = 0
    for x in range(board.min_x - 1, board.max_x + 1):
        for y in range(board.min_y - 1, board.max_y + 1):
            if not board.is_adjacent(x, y):
                continue
            for tile in rack:
                b = board.copy()
                b.insert_tile(tile, x, y)
                if b.is_valid_board():
                    best = max(best, score_move(b, [(x, y)], True))
    return best


@pytest.fixture
def engine():
    return MoveEngine()


class TestFindBestMove:
    def test_extend_single_tile(self, engine):
        board = make_board({(0, 0): "red-circle"})
        move = engine.find_best_move(board, [T("red-x")])
        assert move.score == 2
        assert move.tiles_used == [T("red-x")]
        assert move.rack == ()
        x, y = move.positions[0]
        assert board.is_adjacent(x, y)
        assert move.board.is_valid_board()
        assert move.board.count_tiles() == 2

    def test_first_found_wins_ties(self, engine):
        board = make_board({(0, 0): "red-circle"})
        move = engine.find_best_move(board, [T("red-x")])
        # anchors are scanned column by column from the top-left corner
        assert move.positions == [(-1, 0)]

    def test_no_legal_move(self, engine):
        board = make_board({(0, 0): "red-circle"})
        rack = [T("cyan-x"), T("cyan-x")]
        move = engine.find_best_move(board, rack)
        assert move.score == 0
        assert move.is_pass
        assert move.board == board
        assert move.board is not board
        assert move.rack == tuple(rack)

    def test_empty_rack(self, engine):
        board = make_board({(0, 0): "red-circle"})
        assert engine.find_best_move(board, []).is_pass

    def test_opening_move(self, engine):
        move = engine.find_best_move(Board(), [T("red-circle"), T("red-x")])
        assert move.score == 2
        assert move.placements == [(T("red-circle"), 0, 0), (T("red-x"), 1, 0)]
        assert move.horizontal

    def test_opening_single_tile_gets_one_point(self, engine):
        move = engine.find_best_move(Board(), [T("red-circle"), T("blue-x")])
        assert move.score == 1
        assert move.positions == [(0, 0)]

    def test_turns_a_corner_for_the_cross_word(self, engine):
        board = make_board({(0, 0): "red-circle"})
        rack = [T("red-x"), T("red-diamond"), T("blue-square")]
        move = engine.find_best_move(board, rack)
        # column x/diamond (2) plus the row x/circle (2) beats a row of three
        assert move.score == 4
        assert move.placements == [(T("red-x"), -1, 0), (T("red-diamond"), -1, 1)]
        assert not move.horizontal
        assert move.rack == (T("blue-square"),)
        straight = frozenset([(T("red-x"), -1, 0), (T("red-diamond"), -2, 0)])
        scores = {m.key(): m.score for m in engine.find_best_moves(board, rack, top_n=50)}
        assert scores[straight] == 3

    def test_plays_several_tiles_in_a_line(self, engine):
        board = make_board({
            (0, 0): "red-circle", (1, 0): "red-x", (2, 0): "red-diamond", (3, 0): "red-square",
            (-1, 1): "blue-circle",  # closes the left end to both rack tiles
            (5, -1): "blue-cross",   # takes the cross, not the starburst
        })
        rack = [T("red-starburst"), T("red-cross")]
        move = engine.find_best_move(board, rack)
        # Qwirkle (12) plus the blue/red cross column (2)
        assert move.score == 14
        assert move.placements == [(T("red-starburst"), 4, 0), (T("red-cross"), 5, 0)]
        assert move.horizontal
        top = engine.find_best_moves(board, rack, top_n=50)
        assert [m.score for m in top].count(14) == 1

    def test_extension_steps_over_existing_tiles(self, engine):
        board = make_board({
            (0, 0): "red-circle", (1, 0): "red-x", (3, 0): "red-square",
            (2, 1): "cyan-diamond", (-1, 1): "cyan-circle",
        })
        rack = [T("red-diamond"), T("red-starburst")]
        move = engine.find_best_move(board, rack)
        # row of five plus the diamond column
        assert move.score == 7
        assert move.placements == [(T("red-diamond"), 2, 0), (T("red-starburst"), 4, 0)]
        assert move.horizontal
        top = engine.find_best_moves(board, rack, top_n=50)
        assert [m.score for m in top].count(7) == 1
        assert all(m.score < 7 for m in top[1:])

    def test_completes_qwirkle(self, engine):
        board = make_board({
            (0, 0): "red-circle", (1, 0): "red-x", (2, 0): "red-diamond",
            (3, 0): "red-square", (4, 0): "red-starburst",
        })
        move = engine.find_best_move(board, [T("blue-x"), T("red-cross")])
        assert move.score == 12
        assert T("red-cross") in move.tiles_used

    def test_duplicate_rack_tiles(self, engine):
        board = make_board({(0, 0): "red-circle"})
        move = engine.find_best_move(board, [T("red-x"), T("red-x")])
        assert move.score == 2
        assert move.rack == (T("red-x"),)

    def test_does_not_mutate_input(self, engine):
        board = make_board({(0, 0): "red-circle", (1, 0): "red-x"})
        before = board.copy()
        engine.find_best_move(board, [T("red-diamond"), T("red-square"), T("blue-x")])
        assert board == before

    def test_counts_nodes(self, engine):
        board = make_board({(0, 0): "red-circle"})
        engine.find_best_move(board, [T("red-x"), T("blue-x")])
        assert engine.nodes > 0

    @pytest.mark.parametrize("placements,rack", [
        ({(0, 0): "red-circle", (1, 0): "red-x", (1, 1): "blue-x"},
         ["red-diamond", "blue-circle", "green-x", "yellow-x", "red-square", "cyan-cross"]),
        ({(0, 0): "green-square", (0, 1): "green-circle", (0, 2): "green-cross"},
         ["green-x", "blue-square", "violet-square", "green-diamond", "red-circle", "red-x"]),
    ])
    def test_never_worse_than_best_single_tile(self, engine, placements, rack):
        board = make_board(placements)
        tiles = [T(t) for t in rack]
        move = engine.find_best_move(board, tiles)
        assert move.score >= best_single_tile_score(board, tiles) > 0
        assert move.board.is_valid_board()

    def test_self_play_stays_legal(self, engine):
        """Engine plays both racks for a few turns; every result is legal."""
        bag = Bag(seed=7)
        racks = [Rack(bag), Rack(bag)]
        board = Board()
        for turn in range(6):
            rack = racks[turn % 2]
            move = engine.find_best_move(board, rack.get_tiles())
            assert move.score >= best_single_tile_score(board, rack.get_tiles())
            if move.is_pass:
                continue
            assert move.board.is_valid_board()
            assert move.board.count_tiles() == board.count_tiles() + len(move.placements)
            board = move.board
            rack.replace(move.rack)
            rack.populate()


class TestFindBestMoves:
    def test_sorted_and_unique(self, engine):
        board = make_board({(0, 0): "red-circle"})
        rack = [T("red-x"), T("red-diamond"), T("blue-circle")]
        moves = engine.find_best_moves(board, rack, top_n=50)
        scores = [m.score for m in moves]
        assert scores == sorted(scores, reverse=True)
        keys = [m.key() for m in moves]
        assert len(keys) == len(set(keys))
        assert moves[0].score == engine.find_best_move(board, rack).score

    def test_top_n(self, engine):
        board = make_board({(0, 0): "red-circle"})
        rack = [T("red-x"), T("red-diamond"), T("blue-circle")]
        assert len(engine.find_best_moves(board, rack, top_n=3)) == 3

    def test_nothing_playable(self, engine):
        board = make_board({(0, 0): "red-circle"})
        assert engine.find_best_moves(board, [T("cyan-x")]) == []
