"""The main loop tying sensor, keypad, controller and display together."""

from __future__ import annotations

import argparse
import sys

from .control import Actuators, Controller
from .display import Display
from .ds18b20 import DS18B20, DataLine
from .keypad import Keypad, process_key_input
from .model import CoffeeMachine, delay_ms

LOOP_DELAY_MS = 100


class CoffeeMachineSystem:
    """All the machine's parts, initialised and stepped together."""

    def __init__(self, stream=None, delay=None):
        self._stream = stream
        self._delay = delay if delay is not None else delay_ms
        self.sensor = DS18B20(DataLine(), self._delay)
        self.sensor.reset()
        self.display = Display(stream)
        self.display.clear()
        self.keypad = Keypad()
        self.controller = Controller(Actuators(stream))
        self.controller.actuators.all_off()
        out = stream if stream is not None else sys.stdout
        print("咖啡机系统初始化完成", file=out)
        self.machine = CoffeeMachine()

    def step(self):
        """Run one pass of the control loop; return the temperature read."""
        temperature = self.sensor.read_temp()
        key = self.keypad.scan()
        process_key_input(key, self.machine)
        self.controller.update_state(self.machine, temperature)
        self.controller.apply(self.machine)
        self.display.update(self.machine, temperature)
        self._delay(LOOP_DELAY_MS)
        return temperature

    def run(self, cycles=None):
        """Step ``cycles`` times, or forever when ``cycles`` is None."""
        if cycles is None:
            while True:
                self.step()
        if cycles < 0:
            raise ValueError(f"cycles must not be negative: {cycles}")
        for _ in range(cycles):
            self.step()


def main(argv=None):
    parser = argparse.ArgumentParser(prog="coffeectl", description="Run the coffee machine controller.")
    parser.add_argument("--cycles", type=int, default=None, help="number of loop passes (default: forever)")
    args = parser.parse_args(argv)
    if args.cycles is not None and args.cycles < 0:
        parser.error("--cycles must not be negative")
    system = CoffeeMachineSystem()
    try:
        system.run(args.cycles)
    except KeyboardInterrupt:
        pass
    return 0