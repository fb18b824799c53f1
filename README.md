# carassembly

A small interactive console game. You pick a car type, an engine, a brake
system and a steering system. Then you run the finished car or test whether
its parts go together. All screens and messages are in Korean.

## Installing

    pip install .

## Playing

    carassembly

Each screen clears the terminal, shows a numbered menu and ends with
`INPUT > `. Type a number and press Enter.

1. Car type: 1 Sedan, 2 SUV, 3 Truck
2. Engine: 1 GM, 2 TOYOTA, 3 WIA
3. Brake system: 1 MANDO, 2 CONTINENTAL, 3 BOSCH
4. Steering system: 1 BOSCH, 2 MOBIS
5. Finished car: 1 RUN, 2 Test

How input is handled:

- `exit` ends the session. The session also ends when the input runs out.
- A number may have leading whitespace and a `+` or `-` sign. Anything else
  after it, or input that is not a number, gives an error and the same
  screen is shown again.
- `0` on the engine, brake or steering screen goes back one step. `0` on the
  last screen goes back to the car type screen. On the car type screen, `0`
  is out of range.
- A number outside a screen's range gives an error naming the range, and
  the screen is shown again. The engine menu lists `4` for a broken engine,
  but this answer is out of range and is not accepted.

After the last choice the car stays on the final screen, so you can run and
test it as often as you like until you type `0` or `exit`.

A combination does not work when any of these hold. They are checked in
this order, and the test report names the first one found:

- a Sedan uses CONTINENTAL brakes
- an SUV uses a TOYOTA engine
- a Truck uses a WIA engine
- a Truck uses MANDO brakes
- BOSCH brakes are used with any steering other than BOSCH

## Using it from Python

The package has four modules:

- `carassembly.parts`: the enums `CarType`, `Engine`, `BrakeSystem`,
  `SteeringSystem`, `DriveType` and `Step`, plus `delay_ms(ms)`, which
  sleeps for the given number of milliseconds.
- `carassembly.questions`: each screen's text as a string
  (`car_type_question()`, `engine_question()`, `brake_system_question()`,
  `steering_system_question()`, `run_test_question()`) and
  `question_for(step)`.
- `carassembly.car`: `Car`, `CarBuilder`, `InvalidAnswerError`,
  `parse_answer(text)`, `check_answer(step, answer)` and
  `selection_message(step, answer)`.
- `carassembly.cli`: `AssemblySession`, `run_session` and `main`.

```python
from carassembly.car import CarBuilder
from carassembly.parts import BrakeSystem, CarType, Engine, SteeringSystem

car = (
    CarBuilder()
    .set_car_type(CarType.SEDAN)
    .set_engine(Engine.GM)
    .set_brake_system(BrakeSystem.MANDO)
    .set_steering_system(SteeringSystem.BOSCH)
    .build()
)
print(car.is_valid())        # True
print(car.failure_reason())  # None
print(car.run())             # the parts list followed by the "runs" line
print(car.test())            # the PASS report
```

`Car.run()` and `Car.test()` return the reports that the game prints. Parts
that were never set are `None`. A car with `Engine.BREAK_DOWN` passes the
combination test, but `run()` reports that the engine is broken.

`parse_answer` and `check_answer` raise `InvalidAnswerError` (a
`ValueError`) with the game's error message. `check_answer` returns the
answer as the step's enum.

`run_session(lines, output, delay)` plays a whole session from an iterable
of input lines and returns the `AssemblySession`. It writes to `output` and
calls `delay` with the pause length in milliseconds. Pass
`delay=lambda ms: None` to play without pauses:

```python
import io
from carassembly.cli import run_session

out = io.StringIO()
session = run_session(["1", "1", "1", "1", "2", "exit"], out, lambda ms: None)
print(session.builder.build().test())
```

## What it does not do

Cars exist only for the length of a session. Nothing is saved, and the
command takes no options.

## Running the tests

    pip install ".[test]"
    pytest