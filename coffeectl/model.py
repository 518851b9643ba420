"""Machine state, coffee types, error codes, keys and shared limits."""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import IntEnum

TEMP_MIN = 60.0
TEMP_MAX = 95.0
TEMP_DEFAULT = 85.0
TEMP_TOLERANCE = 2.0


class MachineState(IntEnum):
    """Operating state of the machine."""

    IDLE = 0
    HEATING = 1
    GRINDING = 2
    BREWING = 3
    WARMING = 4
    ERROR = 5


class CoffeeType(IntEnum):
    """Drinks the machine can make."""

    ESPRESSO = 0
    AMERICANO = 1
    LATTE = 2
    CAPPUCCINO = 3


class ErrorCode(IntEnum):
    """Fault reported while the machine is in the error state."""

    NONE = 0
    NO_BEANS = 1
    NO_WATER = 2
    TEMP_HIGH = 3
    TEMP_LOW = 4
    SYSTEM = 5


class Key(IntEnum):
    """Buttons on the front panel."""

    NONE = 0
    POWER = 1
    START = 2
    STOP = 3
    MENU = 4
    UP = 5
    DOWN = 6
    OK = 7


KEY_LONG_PRESS_TIME = 1000


@dataclass
class CoffeeMachine:
    """Everything the controller tracks about the machine."""

    state: MachineState = MachineState.IDLE
    coffee_type: CoffeeType = CoffeeType.ESPRESSO
    target_temp: float = TEMP_DEFAULT
    water_level: int = 100
    coffee_beans_level: int = 100
    brewing_time: int = 0
    warming_time: int = 0
    error_code: ErrorCode = ErrorCode.NONE


def delay_ms(ms):
    """Block for ``ms`` milliseconds."""
    if ms < 0:
        raise ValueError(f"delay must not be negative: {ms}")
    time.sleep(ms / 1000)