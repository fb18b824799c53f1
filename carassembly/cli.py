"""Interactive console session that walks the user through assembling a car."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from carassembly.car import (
    CarBuilder,
    InvalidAnswerError,
    check_answer,
    parse_answer,
    selection_message,
)
from carassembly.parts import DriveType, Step, delay_ms
from carassembly.questions import question_for

SEPARATOR = "==============================="
INPUT_PROMPT = "INPUT > "
EXIT_COMMAND = "exit"
GOODBYE = "바이바이"

_SETTERS = {
    Step.CAR_TYPE: CarBuilder.set_car_type,
    Step.ENGINE: CarBuilder.set_engine,
    Step.BRAKE_SYSTEM: CarBuilder.set_brake_system,
    Step.STEERING_SYSTEM: CarBuilder.set_steering_system,
}


def _strip_line_end(line: str) -> str:
    """Cut the line at its first carriage return or newline."""
    for terminator in ("\r", "\n"):
        line = line.split(terminator, 1)[0]
    return line


class AssemblySession:
    """State of one assembly dialogue: the current step and the parts chosen so far."""

    def __init__(
        self,
        output: TextIO | None = None,
        delay: Callable[[int], None] = delay_ms,
    ) -> None:
        self.output = output if output is not None else sys.stdout
        self.delay = delay
        self.step = Step.CAR_TYPE
        self.builder = CarBuilder()

    def _say(self, text: str) -> None:
        self.output.write(f"{text}\n")

    def prompt(self) -> str:
        """The screen for the current step followed by the input prompt."""
        return f"{question_for(self.step)}{SEPARATOR}\n{INPUT_PROMPT}"

    def handle(self, line: str) -> bool:
        """Process one line of input; return False once the user asks to exit."""
        text = _strip_line_end(line)
        if text == EXIT_COMMAND:
            self._say(GOODBYE)
            return False

        try:
            answer = parse_answer(text)
        except InvalidAnswerError as error:
            self._say(str(error))
            self.delay(800)
            return True

        if answer == 0 and self.step is Step.RUN_TEST:
            self.step = Step.CAR_TYPE
            return True
        if answer == 0 and self.step >= Step.ENGINE:
            self.step = Step(self.step - 1)
            return True

        try:
            choice = check_answer(self.step, answer)
        except InvalidAnswerError as error:
            self._say(str(error))
            self.delay(800)
            return True

        if self.step is Step.RUN_TEST:
            self._drive(DriveType(choice))
        else:
            _SETTERS[self.step](self.builder, choice)
            self._say(selection_message(self.step, choice))
            self.delay(800)
            self.step = Step(self.step + 1)
        return True

    def _drive(self, drive: DriveType) -> None:
        car = self.builder.build()
        if drive is DriveType.RUN:
            self._say(car.run())
            self.delay(2000)
        else:
            self._say("Test...")
            self.delay(1500)
            self._say(car.test())
            self.delay(2000)


def run_session(
    lines: Iterable[str],
    output: TextIO | None = None,
    delay: Callable[[int], None] = delay_ms,
) -> AssemblySession:
    """Run a dialogue over the given input lines until "exit" or the input ends."""
    session = AssemblySession(output, delay)
    source = iter(lines)
    while True:
        session.output.write(session.prompt())
        session.output.flush()
        line = next(source, None)
        if line is None or not session.handle(line):
            break
    return session


def main(argv: list[str] | None = None) -> int:
    """Start an interactive assembly session on standard input and output."""
    run_session(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())