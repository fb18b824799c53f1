"""Car parts, assembly steps and the answer ranges each step accepts."""

from __future__ import annotations

import time
from enum import IntEnum


class CarType(IntEnum):
    """Body type of the car."""

    SEDAN = 1
    SUV = 2
    TRUCK = 3

    @property
    def label(self) -> str:
        return _CAR_TYPE_LABELS[self]


class Engine(IntEnum):
    """Engine maker; BREAK_DOWN stands for a broken engine."""

    GM = 1
    TOYOTA = 2
    WIA = 3
    BREAK_DOWN = 4

    @property
    def label(self) -> str:
        return _ENGINE_LABELS[self]


class BrakeSystem(IntEnum):
    """Brake system maker."""

    MANDO = 1
    CONTINENTAL = 2
    BOSCH = 3

    @property
    def label(self) -> str:
        return _BRAKE_SYSTEM_LABELS[self]


class SteeringSystem(IntEnum):
    """Steering system maker."""

    BOSCH = 1
    MOBIS = 2

    @property
    def label(self) -> str:
        return _STEERING_SYSTEM_LABELS[self]


class DriveType(IntEnum):
    """What to do with a finished car."""

    RUN = 1
    TEST = 2


class Step(IntEnum):
    """Assembly steps, in the order they are asked."""

    CAR_TYPE = 0
    ENGINE = 1
    BRAKE_SYSTEM = 2
    STEERING_SYSTEM = 3
    RUN_TEST = 4


_CAR_TYPE_LABELS = {
    CarType.SEDAN: "Sedan",
    CarType.SUV: "SUV",
    CarType.TRUCK: "Truck",
}

_ENGINE_LABELS = {
    Engine.GM: "GM",
    Engine.TOYOTA: "TOYOTA",
    Engine.WIA: "WIA",
    Engine.BREAK_DOWN: "고장난 엔진",
}

_BRAKE_SYSTEM_LABELS = {
    BrakeSystem.MANDO: "MANDO",
    BrakeSystem.CONTINENTAL: "CONTINENTAL",
    BrakeSystem.BOSCH: "BOSCH",
}

_STEERING_SYSTEM_LABELS = {
    SteeringSystem.BOSCH: "BOSCH",
    SteeringSystem.MOBIS: "MOBIS",
}

# Inclusive bounds of the answers each step accepts. The broken engine is
# listed in the engine menu but lies outside the accepted range.
ANSWER_BOUNDS: dict[Step, tuple[int, int]] = {
    Step.CAR_TYPE: (CarType.SEDAN, CarType.TRUCK),
    Step.ENGINE: (Engine.GM, Engine.WIA),
    Step.BRAKE_SYSTEM: (BrakeSystem.MANDO, BrakeSystem.BOSCH),
    Step.STEERING_SYSTEM: (SteeringSystem.BOSCH, SteeringSystem.MOBIS),
    Step.RUN_TEST: (DriveType.RUN, DriveType.TEST),
}

ANSWER_TYPES: dict[Step, type[IntEnum]] = {
    Step.CAR_TYPE: CarType,
    Step.ENGINE: Engine,
    Step.BRAKE_SYSTEM: BrakeSystem,
    Step.STEERING_SYSTEM: SteeringSystem,
    Step.RUN_TEST: DriveType,
}


def delay_ms(ms: int) -> None:
    """Pause for the given number of milliseconds; non-positive values do not pause."""
    if ms > 0:
        time.sleep(ms / 1000)