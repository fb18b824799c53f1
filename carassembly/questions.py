"""Screens shown to the user at each assembly step."""

from __future__ import annotations

from collections.abc import Callable

from carassembly.parts import Step

CLEAR_SCREEN = "\033[H\033[2J"


def _screen(*lines: str) -> str:
    return CLEAR_SCREEN + "".join(f"{line}\n" for line in lines)


def car_type_question() -> str:
    """Screen asking for the car type."""
    return _screen(
        "        ______________",
        "       /|            | ",
        "  ____/_|_____________|____",
        " |                      O  |",
        " '-(@)----------------(@)--'",
        "===============================",
        "어떤 차량 타입을 선택할까요?",
        "1. Sedan",
        "2. SUV",
        "3. Truck",
    )


def engine_question() -> str:
    """Screen asking for the engine."""
    return _screen(
        "어떤 엔진을 탑재할까요?",
        "0. 뒤로가기",
        "1. GM",
        "2. TOYOTA",
        "3. WIA",
        "4. 고장난 엔진",
    )


def brake_system_question() -> str:
    """Screen asking for the brake system."""
    return _screen(
        "어떤 제동장치를 선택할까요?",
        "0. 뒤로가기",
        "1. MANDO",
        "2. CONTINENTAL",
        "3. BOSCH",
    )


def steering_system_question() -> str:
    """Screen asking for the steering system."""
    return _screen(
        "어떤 조향장치를 선택할까요?",
        "0. 뒤로가기",
        "1. BOSCH",
        "2. MOBIS",
    )


def run_test_question() -> str:
    """Screen asking whether to run or test the finished car."""
    return _screen(
        "멋진 차량이 완성되었습니다.",
        "어떤 동작을 할까요?",
        "0. 처음 화면으로 돌아가기",
        "1. RUN",
        "2. Test",
    )


_QUESTIONS: dict[Step, Callable[[], str]] = {
    Step.CAR_TYPE: car_type_question,
    Step.ENGINE: engine_question,
    Step.BRAKE_SYSTEM: brake_system_question,
    Step.STEERING_SYSTEM: steering_system_question,
    Step.RUN_TEST: run_test_question,
}


def question_for(step: int) -> str:
    """Return the screen for a step; raises ValueError for an unknown step."""
    return _QUESTIONS[Step(step)]()