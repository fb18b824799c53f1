"""The assembled car, its builder and validation of user answers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

from carassembly.parts import (
    ANSWER_BOUNDS,
    ANSWER_TYPES,
    BrakeSystem,
    CarType,
    Engine,
    SteeringSystem,
    Step,
)

TEST_OK = "자동차 부품 조합 테스트 결과 : " + "PASS"
TEST_FAIL = "자동차 부품 조합 테스트 결과 : FAIL"
NOT_A_NUMBER = "ERROR :: 숫자만 입력 가능"

_NUMBER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")

_RANGE_ERRORS = {
    Step.CAR_TYPE: "ERROR :: 차량 타입은 {low} ~ {high} 범위만 선택 가능",
    Step.ENGINE: "ERROR :: 엔진은 {low} ~ {high} 범위만 선택 가능",
    Step.BRAKE_SYSTEM: "ERROR :: 제동장치는 {low} ~ {high} 범위만 선택 가능",
    Step.STEERING_SYSTEM: "ERROR :: 조향장치는 {low} ~ {high} 범위만 선택 가능",
    Step.RUN_TEST: "ERROR :: Run 또는 Test 중 하나를 선택 필요",
}


class InvalidAnswerError(ValueError):
    """An answer typed by the user cannot be accepted."""


def _label(part: IntEnum | None) -> str:
    return "" if part is None else part.label


@dataclass
class Car:
    """A car made of the chosen parts; unset parts are None."""

    car_type: CarType | None = None
    engine: Engine | None = None
    brake_system: BrakeSystem | None = None
    steering_system: SteeringSystem | None = None

    def failure_reason(self) -> str | None:
        """Why the parts do not fit together, or None if they do."""
        if self.car_type == CarType.SEDAN and self.brake_system == BrakeSystem.CONTINENTAL:
            return "Sedan에는 Continental제동장치 사용 불가"
        if self.car_type == CarType.SUV and self.engine == Engine.TOYOTA:
            return "SUV에는 TOYOTA엔진 사용 불가"
        if self.car_type == CarType.TRUCK and self.engine == Engine.WIA:
            return "Truck에는 WIA엔진 사용 불가"
        if self.car_type == CarType.TRUCK and self.brake_system == BrakeSystem.MANDO:
            return "Truck에는 Mando제동장치 사용 불가"
        if (
            self.brake_system == BrakeSystem.BOSCH
            and self.steering_system != SteeringSystem.BOSCH
        ):
            return "Bosch제동장치에는 Bosch조향장치 이외 사용 불가"
        return None

    def is_valid(self) -> bool:
        """True when the parts are compatible."""
        return self.failure_reason() is None

    def run(self) -> str:
        """Describe what happens when the car is driven."""
        if not self.is_valid():
            return "자동차가 동작되지 않습니다"
        if self.engine == Engine.BREAK_DOWN:
            return "엔진이 고장나있습니다.\n자동차가 움직이지 않습니다."
        return "\n".join(
            [
                f"Car Type : {_label(self.car_type)}",
                f"Engine : {_label(self.engine)}",
                f"Brake System : {_label(self.brake_system)}",
                f"Steering System : {_label(self.steering_system)}",
                "자동차가 동작됩니다.",
            ]
        )

    def test(self) -> str:
        """Report of the part-combination test."""
        reason = self.failure_reason()
        if reason is None:
            return TEST_OK
        return f"{TEST_FAIL}\n{reason}"


class CarBuilder:
    """Collects parts step by step and builds a Car."""

    def __init__(self) -> None:
        self.car_type: CarType | None = None
        self.engine: Engine | None = None
        self.brake_system: BrakeSystem | None = None
        self.steering_system: SteeringSystem | None = None

    def set_car_type(self, car_type: int) -> CarBuilder:
        self.car_type = CarType(car_type)
        return self

    def set_engine(self, engine: int) -> CarBuilder:
        self.engine = Engine(engine)
        return self

    def set_brake_system(self, brake_system: int) -> CarBuilder:
        self.brake_system = BrakeSystem(brake_system)
        return self

    def set_steering_system(self, steering_system: int) -> CarBuilder:
        self.steering_system = SteeringSystem(steering_system)
        return self

    def build(self) -> Car:
        return Car(
            car_type=self.car_type,
            engine=self.engine,
            brake_system=self.brake_system,
            steering_system=self.steering_system,
        )


def selection_message(step: int, answer: int) -> str:
    """Confirmation shown after a part has been chosen at a step."""
    step = Step(step)
    if step is Step.CAR_TYPE:
        return f"차량 타입으로 {CarType(answer).label}을 선택하셨습니다."
    if step is Step.ENGINE:
        return f"{Engine(answer).label} 엔진을 선택하셨습니다."
    if step is Step.BRAKE_SYSTEM:
        return f"{BrakeSystem(answer).label} 제동장치를 선택하셨습니다."
    if step is Step.STEERING_SYSTEM:
        return f"{SteeringSystem(answer).label} 조향장치를 선택하셨습니다."
    raise ValueError(f"no part is chosen at step {step.name}")


def parse_answer(text: str) -> int:
    """Read a decimal answer; leading whitespace and a sign are allowed, nothing after."""
    match = _NUMBER.fullmatch(text)
    if match is None:
        raise InvalidAnswerError(NOT_A_NUMBER)
    return int(match.group(1))


def check_answer(step: int, answer: int) -> IntEnum:
    """Return the answer as the step's enum, or raise InvalidAnswerError if out of range."""
    step = Step(step)
    low, high = ANSWER_BOUNDS[step]
    if not low <= answer <= high:
        raise InvalidAnswerError(_RANGE_ERRORS[step].format(low=int(low), high=int(high)))
    return ANSWER_TYPES[step](answer)