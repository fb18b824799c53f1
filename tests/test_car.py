import pytest

from carassembly.car import (
    Car,
    CarBuilder,
    InvalidAnswerError,
    check_answer,
    parse_answer,
    selection_message,
)
from carassembly.parts import (
    BrakeSystem,
    CarType,
    DriveType,
    Engine,
    SteeringSystem,
    Step,
)


def test_run_ok():
    car = Car(CarType.SEDAN, Engine.GM, BrakeSystem.MANDO, SteeringSystem.BOSCH)
    output = car.run()
    assert "자동차가 동작됩니다." in output
    assert "Car Type : Sedan" in output
    assert "Engine : GM" in output
    assert "Brake System : MANDO" in output
    assert "Steering System : BOSCH" in output


def test_run_break_down():
    car = Car(CarType.SEDAN, Engine.BREAK_DOWN, BrakeSystem.MANDO, SteeringSystem.BOSCH)
    output = car.run()
    assert "엔진이 고장나있습니다." in output
    assert "자동차가 움직이지 않습니다." in output


def test_run_car_not_working():
    car = Car(CarType.SEDAN, Engine.BREAK_DOWN, BrakeSystem.CONTINENTAL, SteeringSystem.BOSCH)
    assert "자동차가 동작되지 않습니다" in car.run()


def test_test_pass():
    car = Car(CarType.SEDAN, Engine.TOYOTA, BrakeSystem.MANDO, SteeringSystem.BOSCH)
    assert "자동차 부품 조합 테스트 결과 : PASS" in car.test()


@pytest.mark.parametrize(
    "car, reason",
    [
        (Car(car_type=CarType.SEDAN, brake_system=BrakeSystem.CONTINENTAL),
         "Sedan에는 Continental제동장치 사용 불가"),
        (Car(car_type=CarType.SUV, engine=Engine.TOYOTA), "SUV에는 TOYOTA엔진 사용 불가"),
        (Car(car_type=CarType.TRUCK, engine=Engine.WIA), "Truck에는 WIA엔진 사용 불가"),
        (Car(car_type=CarType.TRUCK, brake_system=BrakeSystem.MANDO),
         "Truck에는 Mando제동장치 사용 불가"),
        (Car(brake_system=BrakeSystem.BOSCH, steering_system=SteeringSystem.MOBIS),
         "Bosch제동장치에는 Bosch조향장치 이외 사용 불가"),
    ],
)
def test_invalid_combinations(car, reason):
    assert car.is_valid() is False
    assert car.failure_reason() == reason
    report = car.test()
    assert "자동차 부품 조합 테스트 결과 : FAIL" in report
    assert reason in report
    assert car.run() == "자동차가 동작되지 않습니다"


def test_is_valid_suv_wia():
    assert Car(car_type=CarType.SUV, engine=Engine.WIA).is_valid() is True


def test_is_valid_check_test_ok():
    car = Car(car_type=CarType.SEDAN, engine=Engine.TOYOTA)
    assert car.failure_reason() is None
    assert car.test() == "자동차 부품 조합 테스트 결과 : PASS"


def test_builder_chain():
    builder = CarBuilder()
    builder.set_car_type(CarType.SEDAN)
    car = (
        builder.set_engine(Engine.GM)
        .set_brake_system(BrakeSystem.MANDO)
        .set_steering_system(SteeringSystem.BOSCH)
        .build()
    )
    assert car.car_type == CarType.SEDAN
    assert car == Car(CarType.SEDAN, Engine.GM, BrakeSystem.MANDO, SteeringSystem.BOSCH)


def test_builder_accepts_plain_ints():
    car = CarBuilder().set_car_type(2).set_engine(3).set_brake_system(3).set_steering_system(1).build()
    assert car.car_type is CarType.SUV
    assert car.engine is Engine.WIA
    assert car.brake_system is BrakeSystem.BOSCH
    assert car.steering_system is SteeringSystem.BOSCH


def test_builder_rejects_unknown_part():
    with pytest.raises(ValueError):
        CarBuilder().set_car_type(0)


def test_selection_messages():
    assert selection_message(Step.CAR_TYPE, 1) == "차량 타입으로 Sedan을 선택하셨습니다."
    assert selection_message(Step.ENGINE, 2) == "TOYOTA 엔진을 선택하셨습니다."
    assert selection_message(Step.BRAKE_SYSTEM, 2) == "CONTINENTAL 제동장치를 선택하셨습니다."
    assert selection_message(Step.STEERING_SYSTEM, 2) == "MOBIS 조향장치를 선택하셨습니다."


def test_selection_message_at_run_step_raises():
    with pytest.raises(ValueError):
        selection_message(Step.RUN_TEST, 1)


@pytest.mark.parametrize("text, value", [("3", 3), ("0", 0), ("  2", 2), ("-1", -1), ("+4", 4)])
def test_parse_answer(text, value):
    assert parse_answer(text) == value


@pytest.mark.parametrize("text", ["", "abc", "3a", "2 ", "exit", "1.5"])
def test_parse_answer_rejects_non_numbers(text):
    with pytest.raises(InvalidAnswerError) as info:
        parse_answer(text)
    assert str(info.value) == "ERROR :: 숫자만 입력 가능"


def test_check_answer_returns_enum():
    assert check_answer(Step.CAR_TYPE, 3) is CarType.TRUCK
    assert check_answer(Step.ENGINE, 1) is Engine.GM
    assert check_answer(Step.BRAKE_SYSTEM, 3) is BrakeSystem.BOSCH
    assert check_answer(Step.STEERING_SYSTEM, 2) is SteeringSystem.MOBIS
    assert check_answer(Step.RUN_TEST, 2) is DriveType.TEST


@pytest.mark.parametrize(
    "step, answer, message",
    [
        (Step.CAR_TYPE, 0, "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능"),
        (Step.CAR_TYPE, 4, "ERROR :: 차량 타입은 1 ~ 3 범위만 선택 가능"),
        (Step.ENGINE, 4, "ERROR :: 엔진은 1 ~ 3 범위만 선택 가능"),
        (Step.BRAKE_SYSTEM, 4, "ERROR :: 제동장치는 1 ~ 3 범위만 선택 가능"),
        (Step.STEERING_SYSTEM, 3, "ERROR :: 조향장치는 1 ~ 2 범위만 선택 가능"),
        (Step.RUN_TEST, 3, "ERROR :: Run 또는 Test 중 하나를 선택 필요"),
    ],
)
def test_check_answer_out_of_range(step, answer, message):
    with pytest.raises(InvalidAnswerError) as info:
        check_answer(step, answer)
    assert str(info.value) == message


def test_invalid_answer_error_is_value_error():
    with pytest.raises(ValueError):
        check_answer(Step.ENGINE, -1)