"""
Turn loop tests, driven by scripted console answers.
"""

from isola.game.controller import play_turn, request, run_game
from isola.game.state import new_game
from isola.types import Occupied, Tile
from isola.ui.prompts import parse_direction


class TestRequest:

    def test_retries_until_parsed(self, scripted, capsys):
        ask = scripted(["abc", "5", "3"])
        assert int(request(ask, "dir? ", parse_direction)) == 3
        assert ask.prompts == ["dir? "] * 3
        assert capsys.readouterr().out.count("Invalid Input!") == 2


class TestPlayTurn:

    def test_move_down_then_shoot(self, scripted, capsys):
        state = new_game()
        start = [row[:] for row in state.board.grid]
        # move 2 (down); shoot row 1 col 4 -> now dead, refused; then row 1 col 3
        ask = scripted(["2", "1", "4", "1", "3"])

        assert play_turn(state, ask) is None

        assert state.players["P1"].position == (1, 3)
        assert state.current == "P2"

        changed = {
            (r, c): state.board.get(r, c)
            for r in range(7)
            for c in range(7)
            if state.board.get(r, c) != start[r][c]
        }
        assert changed == {
            (0, 3): Tile.DEAD,
            (1, 3): Occupied("P1"),
            (0, 2): Tile.DEAD,
        }
        out = capsys.readouterr().out
        assert "That location cannot be destroyed." in out
        assert "B time to fire an arrow!" in out

    def test_turns_alternate(self, scripted):
        state = new_game()
        play_turn(state, scripted(["2", "4", "4"]))
        ask = scripted(["8", "4", "1"])
        play_turn(state, ask)
        assert ask.prompts[0].startswith("Turn: W")
        assert state.players["P2"].position == (5, 3)
        assert state.current == "P1"

    def test_centre_key_reprompts_without_changes(self, scripted):
        state = new_game()
        snapshots = []

        def ask(prompt):
            snapshots.append((prompt, [row[:] for row in state.board.grid], state.active.position))
            return answers.pop(0)

        answers = ["5", "2", "7", "7"]
        play_turn(state, ask)

        first, second = snapshots[0], snapshots[1]
        assert first == second
        assert "number pad" in second[0]
        assert state.players["P1"].position == (1, 3)

    def test_illegal_move_reprompts(self, scripted, capsys):
        state = new_game()
        # 8 walks off the top edge
        ask = scripted(["8", "3", "7", "1"])
        play_turn(state, ask)
        assert state.players["P1"].position == (1, 4)
        assert "Invalid move, please try again." in capsys.readouterr().out

    def test_bad_coordinates_reprompt_only_that_coordinate(self, scripted, capsys):
        state = new_game()
        ask = scripted(["2", "0", "x", "4", "9", "5"])
        play_turn(state, ask)
        assert state.board.get(3, 4) is Tile.DEAD
        assert ask.prompts[1:] == [
            "Please select a row: ",
            "Please select a row: ",
            "Please select a row: ",
            "Please select a column: ",
            "Please select a column: ",
        ]
        assert capsys.readouterr().out.count("Invalid coordinate!") == 3

    def test_boxed_in_player_is_never_prompted(self, make_state, scripted):
        state = make_state(p1=(0, 0), p2=(1, 1), dead=[(0, 1), (1, 0)])
        ask = scripted([])
        assert play_turn(state, ask) == ("P1", "P2")
        assert ask.prompts == []
        assert state.players["P1"].position == (0, 0)


class TestRunGame:

    def test_announces_loser_and_winner(self, make_state, scripted, capsys):
        state = make_state(p1=(0, 0), p2=(1, 1), dead=[(0, 1), (1, 0)])
        assert run_game(state, scripted([])) == ("P1", "P2")
        out = capsys.readouterr().out
        assert "B is no longer able to move." in out
        assert "W is the winner!" in out

    def test_game_plays_out_to_a_result(self, make_state, scripted, capsys):
        # W sits in the corner with a single free square left at (5, 6)
        state = make_state(p1=(0, 3), p2=(6, 6), dead=[(5, 5), (6, 5)])
        ask = scripted(["2", "6", "7"])
        assert run_game(state, ask) == ("P2", "P1")
        out = capsys.readouterr().out
        assert "W is no longer able to move." in out
        assert "B is the winner!" in out

    def test_board_and_keypad_are_drawn(self, make_state, scripted, capsys):
        state = make_state(p1=(0, 0), p2=(1, 1), dead=[(0, 1), (1, 0)])
        run_game(state, scripted([]))
        out = capsys.readouterr().out
        assert "  1234567\n1 BA+++++\n2 AW+++++\n" in out
        assert "7-8-9\n4---6\n1-2-3" in out
