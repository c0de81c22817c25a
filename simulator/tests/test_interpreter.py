import pytest

from simulator.commands.interpreter import CommandInterpreter, run_commands
from simulator.commands.scenarios import SCENARIOS, run_scenarios
from simulator.entities.grid import Grid

NOT_PLACED = "Command '{}' ignored: Robot not placed."


def test_scenario_move():
    assert run_commands(["PLACE 0,0,NORTH", "MOVE", "REPORT"]) == ["0,1,NORTH"]


def test_scenario_left():
    assert run_commands(["PLACE 0,0,NORTH", "LEFT", "REPORT"]) == ["0,0,WEST"]


def test_scenario_move_and_turn():
    commands = ["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"]
    assert run_commands(commands) == ["3,3,NORTH"]


def test_scenario_ignored_then_stop_at_edge():
    commands = ["MOVE", "REPORT", "PLACE 0,0,NORTH", "MOVE", "MOVE", "MOVE", "MOVE", "MOVE", "REPORT"]
    assert run_commands(commands) == [
        NOT_PLACED.format("MOVE"),
        NOT_PLACED.format("REPORT"),
        "0,4,NORTH",
    ]


def test_scenario_place_off_table_then_report():
    assert run_commands(["PLACE 5,5,NORTH", "REPORT"]) == [
        "PLACE command ignored: Invalid coordinates (5,5) or off table.",
        NOT_PLACED.format("REPORT"),
    ]


def test_builtin_scenarios_all_pass():
    results = run_scenarios()
    assert len(results) == len(SCENARIOS)
    assert all(r.passed for r in results), [r for r in results if not r.passed]


@pytest.mark.parametrize("x", range(5))
@pytest.mark.parametrize("y", range(5))
@pytest.mark.parametrize("d", ["NORTH", "EAST", "SOUTH", "WEST"])
def test_place_then_report(x, y, d):
    assert run_commands([f"PLACE {x},{y},{d}", "REPORT"]) == [f"{x},{y},{d}"]


@pytest.mark.parametrize("command", ["MOVE", "LEFT", "RIGHT", "REPORT"])
def test_each_command_before_place_gives_one_notice(command):
    assert run_commands([command]) == [NOT_PLACED.format(command)]


def test_not_placed_notice_keeps_command_text_verbatim():
    assert run_commands(["  MOVE  "]) == [NOT_PLACED.format("  MOVE  ")]


@pytest.mark.parametrize("line", [
    "PLACE",
    "PLACE 1,2",
    "PLACE one,two,NORTH",
    "PLACE 1,2,NORTH,EXTRA",
    "PLACE ١,٢,NORTH",
    "PLACE ０,０,NORTH",
])
def test_invalid_place_format(line):
    assert run_commands([line]) == [
        "PLACE command ignored: Invalid format or missing/incorrect arguments. "
        f"Expected 'X,Y,DIRECTION'. Input: '{line}'"
    ]


def test_invalid_place_direction():
    assert run_commands(["PLACE 1,1,UP", "REPORT"]) == [
        "PLACE command ignored: Invalid direction 'UP'.",
        NOT_PLACED.format("REPORT"),
    ]


def test_place_tolerates_whitespace_and_lowercase():
    assert run_commands(["PLACE 1 , 2 , east", "REPORT"]) == ["1,2,EAST"]


def test_failed_place_keeps_previous_position():
    commands = ["PLACE 2,2,NORTH", "PLACE -1,0,EAST", "PLACE 9,9", "REPORT"]
    output = run_commands(commands)
    assert output[-1] == "2,2,NORTH"
    assert len(output) == 3


def test_unknown_command():
    assert run_commands(["PLACE 0,0,NORTH", "JUMP 3", "REPORT"]) == [
        "Warning: Unknown command 'JUMP 3' was encountered and ignored.",
        "0,0,NORTH",
    ]


def test_verbs_are_case_sensitive():
    assert run_commands(["PLACE 0,0,NORTH", "move", "REPORT"]) == [
        "Warning: Unknown command 'move' was encountered and ignored.",
        "0,0,NORTH",
    ]


def test_lowercase_place_is_not_a_place():
    assert run_commands(["place 0,0,NORTH"]) == [NOT_PLACED.format("place 0,0,NORTH")]


def test_report_is_idempotent():
    output = run_commands(["PLACE 3,2,SOUTH", "REPORT", "REPORT", "REPORT"])
    assert output == ["3,2,SOUTH"] * 3


def test_walk_around_the_edge():
    commands = ["PLACE 0,0,EAST"] + ["MOVE"] * 6 + ["LEFT"] + ["MOVE"] * 6 + ["REPORT"]
    assert run_commands(commands) == ["4,4,NORTH"]


def test_runs_are_independent():
    interpreter = CommandInterpreter()
    assert interpreter.run(["PLACE 1,1,NORTH", "MOVE", "REPORT"]) == ["1,2,NORTH"]
    assert interpreter.run(["REPORT"]) == [NOT_PLACED.format("REPORT")]


def test_quiet_mode_drops_notices():
    commands = ["MOVE", "PLACE 9,9,NORTH", "PLACE 1", "PLACE 0,0,NORTH", "JUMP", "MOVE", "REPORT"]
    assert run_commands(commands, verbose=False) == ["0,1,NORTH"]


def test_custom_grid():
    commands = ["PLACE 0,0,NORTH", "MOVE", "MOVE", "MOVE", "REPORT", "PLACE 2,0,EAST"]
    assert run_commands(commands, grid=Grid(2, 2)) == [
        "0,1,NORTH",
        "PLACE command ignored: Invalid coordinates (2,0) or off table.",
    ]


def test_empty_input():
    assert run_commands([]) == []


@pytest.mark.parametrize("bad", ["PLACE 0,0,NORTH", None, ["MOVE", 3]])
def test_malformed_input_raises(bad):
    with pytest.raises(TypeError):
        run_commands(bad)
