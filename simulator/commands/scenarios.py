# simulator/commands/scenarios.py
# Worked examples that can be replayed from the server or the CLI.
from typing import List, NamedTuple

from simulator.commands.interpreter import run_commands


class Scenario(NamedTuple):
    name: str
    commands: List[str]
    expected: List[str]


class ScenarioResult(NamedTuple):
    name: str
    commands: List[str]
    expected: List[str]
    actual: List[str]
    passed: bool


SCENARIOS: List[Scenario] = [
    Scenario(
        "move north",
        ["PLACE 0,0,NORTH", "MOVE", "REPORT"],
        ["0,1,NORTH"],
    ),
    Scenario(
        "turn left",
        ["PLACE 0,0,NORTH", "LEFT", "REPORT"],
        ["0,0,WEST"],
    ),
    Scenario(
        "move and turn",
        ["PLACE 1,2,EAST", "MOVE", "MOVE", "LEFT", "MOVE", "REPORT"],
        ["3,3,NORTH"],
    ),
    Scenario(
        "ignored before place, stop at edge",
        ["MOVE", "REPORT", "PLACE 0,0,NORTH", "MOVE", "MOVE", "MOVE", "MOVE", "MOVE", "REPORT"],
        [
            "Command 'MOVE' ignored: Robot not placed.",
            "Command 'REPORT' ignored: Robot not placed.",
            "0,4,NORTH",
        ],
    ),
    Scenario(
        "place off table",
        ["PLACE 5,5,NORTH", "REPORT"],
        [
            "PLACE command ignored: Invalid coordinates (5,5) or off table.",
            "Command 'REPORT' ignored: Robot not placed.",
        ],
    ),
]


def run_scenarios() -> List[ScenarioResult]:
    results = []
    for scenario in SCENARIOS:
        actual = run_commands(scenario.commands)
        results.append(ScenarioResult(
            scenario.name,
            scenario.commands,
            scenario.expected,
            actual,
            actual == scenario.expected,
        ))
    return results
