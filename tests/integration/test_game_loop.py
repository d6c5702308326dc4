# tests/integration/test_game_loop.py

from textgame.config import GameConfig
from textgame.loop import ask_name, game_loop, init_world, run
from textgame.renderer.text import render
from textgame.state import World
from tests.test_utils import ScriptedTerminal, assert_player_at, make_world

CONFIG = GameConfig(line_separator="\n")


def play(
    lines: list[str], world_pos: tuple[int, int] = (0, 0)
) -> tuple[World, ScriptedTerminal]:
    terminal = ScriptedTerminal.with_lines(lines)
    world = game_loop(
        make_world(world_pos), terminal.read_line, terminal.write_line, CONFIG
    )
    return world, terminal


def test_move_up_from_origin_reports_invalid() -> None:
    world, terminal = play(["move up", "quit"])
    assert terminal.output == ["Invalid direction", "Bye bye Ada!"]
    assert_player_at(world, (0, 0))


def test_move_down_is_silent() -> None:
    world, terminal = play(["move down", "quit"])
    assert terminal.output == ["Bye bye Ada!"]
    assert_player_at(world, (1, 0))


def test_parse_outcomes_are_reported() -> None:
    _, terminal = play(["move", "move sideways", "fly", "quit"])
    assert terminal.output == [
        "Missing direction",
        "Unknown direction",
        "Unknown command",
        "Bye bye Ada!",
    ]


def test_quit_stops_reading() -> None:
    _, terminal = play(["quit", "help", "show"])
    assert terminal.output == ["Bye bye Ada!"]
    assert terminal.reads == 1


def test_blank_lines_are_ignored() -> None:
    world, terminal = play(["", "   ", "move right", "", "quit"])
    assert terminal.output == ["Bye bye Ada!"]
    assert_player_at(world, (0, 1))


def test_end_of_input_terminates_silently() -> None:
    world, terminal = play(["move down", "move right"])
    assert terminal.output == []
    assert_player_at(world, (1, 1))


def test_show_reflects_moves_and_is_idempotent() -> None:
    _, terminal = play(["move down", "move right", "show", "show", "quit"])
    first, second = terminal.output[0], terminal.output[1]
    assert first == second
    rows = first.strip("\n").split("\n")
    assert rows[1].split(" ")[1] == "x"


def test_failed_move_keeps_world_for_next_command() -> None:
    world, _ = play(["move left", "move down", "quit"])
    assert_player_at(world, (1, 0))


def test_ask_name_trims_and_greets() -> None:
    terminal = ScriptedTerminal.with_lines(["  Ada  "])
    assert ask_name(terminal.read_line, terminal.write_line) == "Ada"
    assert terminal.output == ["What is your name?", "Hello, Ada, welcome to the game!"]


def test_init_world_places_player_at_origin() -> None:
    terminal = ScriptedTerminal()
    world = init_world("Ada", GameConfig(grid_size=5), terminal.write_line)
    assert_player_at(world, (0, 0))
    assert world.grid.size == 5
    assert terminal.output == ["Use commands to play"]


def test_init_world_uses_configured_marker() -> None:
    terminal = ScriptedTerminal()
    config = GameConfig(grid_size=2, empty_marker=".", line_separator="\n")
    world = init_world("Ada", config, terminal.write_line)
    assert all(cell == "." for row in world.grid.cells for cell in row)
    assert render(world, "\n") == "\nx .\n. .\n"


def test_run_full_session() -> None:
    terminal = ScriptedTerminal.with_lines(["Ada", "HELP", "move down", "quit"])
    world = run(terminal.read_line, terminal.write_line, CONFIG)
    assert world is not None
    assert_player_at(world, (1, 0))
    assert terminal.output == [
        "What is your name?",
        "Hello, Ada, welcome to the game!",
        "Use commands to play",
        "\nValid commands:\n\n help\n show\n move <up|down|left|right>\n quit\n",
        "Bye bye Ada!",
    ]


def test_run_without_name_input() -> None:
    terminal = ScriptedTerminal()
    assert run(terminal.read_line, terminal.write_line, CONFIG) is None
    assert terminal.output == ["What is your name?"]


def test_run_on_small_grid_blocks_at_edge() -> None:
    terminal = ScriptedTerminal.with_lines(["Bo", "move down", "move down", "quit"])
    world = run(terminal.read_line, terminal.write_line, GameConfig(grid_size=2))
    assert world is not None
    assert_player_at(world, (1, 0))
    assert terminal.output[-2:] == ["Invalid direction", "Bye bye Bo!"]
