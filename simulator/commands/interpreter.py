# simulator/commands/interpreter.py
import logging
from typing import List, Optional, Sequence

from simulator.commands.parser import parse_place_args, split_command
from simulator.entities.grid import Grid
from simulator.entities.robot import Robot
from simulator.utils.consts import (
    INVALID_PLACE_FORMAT_MSG,
    NOT_PLACED_IGNORED_MSG,
    UNKNOWN_COMMAND_MSG,
)
from simulator.utils.enums import Verb

logger = logging.getLogger(__name__)


class CommandInterpreter:
    """
    Runs a sequence of command lines against a fresh Robot and collects
    the output lines (REPORT results and notices) in input order.

    With verbose=False, notices about rejected or ignored commands are only
    logged; REPORT results are still collected.
    """

    def __init__(self, grid: Optional[Grid] = None, verbose: bool = True):
        self.grid = grid
        self.verbose = verbose

    def run(self, commands: Sequence[str]) -> List[str]:
        if not isinstance(commands, (list, tuple)):
            raise TypeError(f"commands must be a list of strings, got {type(commands).__name__}")
        for i, line in enumerate(commands):
            if not isinstance(line, str):
                raise TypeError(f"command {i} must be a string, got {type(line).__name__}")

        logger.info("Processing %d commands", len(commands))
        robot = Robot(self.grid)
        output: List[str] = []

        for line in commands:
            self._execute(robot, line, output)

        logger.info("Finished, %d output lines", len(output))
        return output

    def _execute(self, robot: Robot, line: str, output: List[str]) -> None:
        command = split_command(line)
        logger.debug("Parsed: verb=%r args=%r", command.verb, command.args)
        verb = Verb.lookup(command.verb)

        if verb is Verb.PLACE:
            args = parse_place_args(command.args)
            if args is None:
                self._notice(output, INVALID_PLACE_FORMAT_MSG.format(line=command.raw))
                return
            result = robot.place(args.x, args.y, args.direction)
            if not result:
                self._notice(output, result.message)
            return

        if not robot.is_placed:
            self._notice(output, NOT_PLACED_IGNORED_MSG.format(line=command.raw))
            return

        if verb is Verb.MOVE:
            robot.move()
        elif verb is Verb.LEFT:
            robot.turn_left()
        elif verb is Verb.RIGHT:
            robot.turn_right()
        elif verb is Verb.REPORT:
            report = robot.report()
            logger.debug("Collected report: %r", report)
            output.append(report)
        else:
            self._notice(output, UNKNOWN_COMMAND_MSG.format(line=command.raw))

    def _notice(self, output: List[str], message: str) -> None:
        logger.debug(message)
        if self.verbose:
            output.append(message)


def run_commands(commands: Sequence[str], grid: Optional[Grid] = None, verbose: bool = True) -> List[str]:
    """
    Run commands on a new robot and return the collected output lines.

    Example:
        run_commands(["PLACE 0,0,NORTH", "MOVE", "REPORT"]) -> ["0,1,NORTH"]
    """
    return CommandInterpreter(grid, verbose).run(commands)
