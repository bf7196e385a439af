"""Tests for the terminal game loop."""

import io

from conftest import T, make_board
from qwirkle.bag import Bag
from qwirkle.cli import move_command, run_cli
from qwirkle.engine import MoveEngine
from qwirkle.game import Game


def scripted_game(user, computer):
    game = Game(bag=Bag(seed=0, tiles=[]))
    game.user_rack.replace(T(t) for t in user)
    game.computer_rack.replace(T(t) for t in computer)
    return game


def play(game, script):
    out = io.StringIO()
    run_cli(game, inp=io.StringIO(script), out=out, ansi=False)
    return out.getvalue()


class TestRunCli:
    def test_user_goes_out(self):
        game = scripted_game(["red-circle", "red-x"], ["red-diamond"])
        text = play(game, "h0,0;0,1\n")
        assert "User Move Score=2" in text
        assert "*** GAME OVER ****" in text
        assert game.over

    def test_bad_input_reprompts(self):
        game = scripted_game(["red-circle", "red-x"], ["red-diamond"])
        text = play(game, "bogus\nr0\nh0,0;0\n")
        assert "Missing h, v or r" in text
        assert "INVALID MOVE" in text
        assert "User Move Score=1" in text
        assert "Computer Move Score=2" in text
        assert game.over

    def test_help_and_hint(self):
        game = scripted_game(["red-circle", "red-x"], ["red-diamond"])
        text = play(game, "help\nhint\n")
        assert "return rack tiles" in text
        assert "h0,0;0,1" in text
        assert "h-1,0;1,0" in text
        assert not game.over

    def test_end_of_input(self):
        game = scripted_game(["red-circle"], ["red-x"])
        text = play(game, "")
        assert "*** GAME OVER ****" in text
        assert game.board.is_board_empty()

    def test_hint_with_nothing_playable(self):
        game = scripted_game(["cyan-x"], ["red-x"])
        game.board = make_board({(0, 0): "red-circle"})
        text = play(game, "hint\n")
        assert "No moves found" in text


class TestMoveCommand:
    def test_vertical_command_from_top_cell(self):
        board = make_board({(0, 0): "red-circle"})
        rack = (T("blue-square"), T("red-x"), T("red-diamond"))
        move = MoveEngine().find_best_move(board, rack)
        assert move.placements == [(T("red-x"), -1, 0), (T("red-diamond"), -1, 1)]
        assert move_command(move, rack) == "v-1,0;1,2"

    def test_command_replays_the_move(self):
        game = scripted_game(["red-x", "red-diamond"], ["blue-square"])
        game.board = make_board({(0, 0): "red-circle"})
        best = game.hints(top_n=1)[0]
        result = game.play_command(move_command(best, game.user_rack.get_tiles()))
        assert result.score == best.score
        assert game.board == best.board
