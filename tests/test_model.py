import time

import pytest

from coffeectl.model import (
    TEMP_DEFAULT,
    CoffeeMachine,
    CoffeeType,
    ErrorCode,
    Key,
    MachineState,
    delay_ms,
)


def test_new_machine_defaults():
    machine = CoffeeMachine()
    assert machine.state is MachineState.IDLE
    assert machine.coffee_type is CoffeeType.ESPRESSO
    assert machine.target_temp == TEMP_DEFAULT
    assert machine.water_level == 100
    assert machine.coffee_beans_level == 100
    assert machine.brewing_time == 0
    assert machine.warming_time == 0
    assert machine.error_code is ErrorCode.NONE


def test_machines_are_independent():
    first = CoffeeMachine()
    second = CoffeeMachine()
    first.water_level = 40
    assert second.water_level == 100


def test_enum_values_follow_declaration_order():
    assert [s.value for s in MachineState] == list(range(len(MachineState)))
    assert Key(1) is Key.POWER
    assert Key(7) is Key.OK
    assert ErrorCode(1) is ErrorCode.NO_BEANS
    assert ErrorCode(2) is ErrorCode.NO_WATER


def test_delay_ms_waits_at_least_the_given_time():
    start = time.monotonic()
    result = delay_ms(30)
    elapsed = time.monotonic() - start
    assert result is None
    assert elapsed >= 0.025


def test_delay_ms_rejects_negative():
    with pytest.raises(ValueError):
        delay_ms(-1)