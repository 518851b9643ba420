"""Status display, simulated by writing to a text stream."""

from __future__ import annotations

import sys

from .model import CoffeeMachine, CoffeeType, ErrorCode, MachineState

_STATE_LABELS = {
    MachineState.IDLE: "空闲",
    MachineState.HEATING: "加热中",
    MachineState.GRINDING: "研磨中",
    MachineState.BREWING: "萃取中",
    MachineState.WARMING: "保温中",
    MachineState.ERROR: "错误",
}

_COFFEE_LABELS = {
    CoffeeType.ESPRESSO: "浓缩咖啡",
    CoffeeType.AMERICANO: "美式咖啡",
    CoffeeType.LATTE: "拿铁",
    CoffeeType.CAPPUCCINO: "卡布奇诺",
}

_ERROR_LABELS = {
    ErrorCode.NONE: "无错误",
    ErrorCode.NO_BEANS: "咖啡豆不足",
    ErrorCode.NO_WATER: "水不足",
    ErrorCode.TEMP_HIGH: "温度过高",
    ErrorCode.TEMP_LOW: "温度过低",
    ErrorCode.SYSTEM: "系统错误",
}


def state_label(state):
    """Name shown for a machine state."""
    return _STATE_LABELS.get(state, "未知")


def coffee_type_label(coffee_type):
    """Name shown for a coffee type."""
    return _COFFEE_LABELS.get(coffee_type, "未知")


def error_label(code):
    """Message shown for an error code."""
    return _ERROR_LABELS.get(code, "未知错误")


class Display:
    """Character display; text goes to ``stream`` (stdout by default)."""

    def __init__(self, stream=None):
        self._stream = stream
        self.cursor = (0, 0)

    def clear(self):
        """Clear the screen and home the cursor."""
        self.cursor = (0, 0)

    def set_cursor(self, row, col):
        """Move the cursor."""
        if row < 0 or col < 0:
            raise ValueError(f"invalid cursor position: {row}, {col}")
        self.cursor = (row, col)

    def print_string(self, text):
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(text)

    def print_number(self, num):
        self.print_string(str(int(num)))

    def print_float(self, num, decimal):
        self.print_string(f"{num:.{decimal}f}")

    def update(self, machine: CoffeeMachine, temp):
        """Redraw state, temperatures, drink, levels and any error."""
        self.clear()

        self.set_cursor(0, 0)
        self.print_string("状态: ")
        self.print_string(state_label(machine.state))

        self.set_cursor(1, 0)
        self.print_string("温度: ")
        self.print_float(temp, 1)
        self.print_string("°C/")
        self.print_float(machine.target_temp, 1)
        self.print_string("°C")

        self.set_cursor(2, 0)
        self.print_string("类型: ")
        self.print_string(coffee_type_label(machine.coffee_type))

        self.set_cursor(3, 0)
        self.print_string("水位: ")
        self.print_number(machine.water_level)
        self.print_string("%")

        self.set_cursor(3, 10)
        self.print_string("豆量: ")
        self.print_number(machine.coffee_beans_level)
        self.print_string("%")

        if machine.state is MachineState.ERROR:
            self.set_cursor(4, 0)
            self.print_string("错误: ")
            self.print_string(error_label(machine.error_code))