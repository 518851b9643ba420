"""Actuator switching and the per-second state machine."""

from __future__ import annotations

import sys

from .model import TEMP_TOLERANCE, CoffeeMachine, ErrorCode, MachineState

GRINDING_TIME_DEFAULT = 10
BREWING_TIME_DEFAULT = 30
WARMING_TIME_MAX = 60

TICKS_PER_SECOND = 10

_LABELS = {
    "heater": "加热器",
    "grinder": "研磨器",
    "water_pump": "水泵",
    "water_valve": "水阀",
}


class Actuators:
    """Simulated heater, grinder, pump and valve that report each switch."""

    def __init__(self, stream=None):
        self._stream = stream
        self.states = dict.fromkeys(_LABELS, False)

    def _switch(self, name, on):
        on = bool(on)
        self.states[name] = on
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{_LABELS[name]}: {'开启' if on else '关闭'}", file=stream)

    def heater(self, on):
        self._switch("heater", on)

    def grinder(self, on):
        self._switch("grinder", on)

    def water_pump(self, on):
        self._switch("water_pump", on)

    def water_valve(self, on):
        self._switch("water_valve", on)

    def all_off(self):
        """Switch every actuator off."""
        self.heater(False)
        self.grinder(False)
        self.water_pump(False)
        self.water_valve(False)


# heater, grinder, pump, valve; None leaves the heater as it is
_OUTPUTS = {
    MachineState.IDLE: (False, False, False, False),
    MachineState.HEATING: (True, False, False, False),
    MachineState.GRINDING: (True, True, False, False),
    MachineState.BREWING: (True, False, True, True),
    MachineState.WARMING: (None, False, False, False),
    MachineState.ERROR: (False, False, False, False),
}


class Controller:
    """Advances the machine once per second and drives the actuators."""

    def __init__(self, actuators=None):
        self.actuators = actuators if actuators is not None else Actuators()
        self._ticks = 0

    def update_state(self, machine: CoffeeMachine, temp):
        """Count one tick; every tenth tick advance the state machine."""
        self._ticks += 1
        if self._ticks < TICKS_PER_SECOND:
            return
        self._ticks = 0

        state = machine.state
        if state is MachineState.HEATING:
            if temp >= machine.target_temp:
                machine.state = MachineState.IDLE
        elif state is MachineState.GRINDING:
            machine.coffee_beans_level = (machine.coffee_beans_level - 2) & 0xFF
            if machine.brewing_time >= GRINDING_TIME_DEFAULT:
                machine.state = MachineState.BREWING
                machine.brewing_time = 0
            else:
                machine.brewing_time += 1
            if machine.coffee_beans_level <= 5:
                machine.state = MachineState.ERROR
                machine.error_code = ErrorCode.NO_BEANS
        elif state is MachineState.BREWING:
            machine.water_level = (machine.water_level - 2) & 0xFF
            if machine.brewing_time >= BREWING_TIME_DEFAULT:
                machine.state = MachineState.WARMING
                machine.brewing_time = 0
                machine.warming_time = 0
            else:
                machine.brewing_time += 1
            if machine.water_level <= 5:
                machine.state = MachineState.ERROR
                machine.error_code = ErrorCode.NO_WATER
        elif state is MachineState.WARMING:
            if machine.warming_time >= WARMING_TIME_MAX:
                machine.state = MachineState.IDLE
            else:
                machine.warming_time += 1
            if temp < machine.target_temp - TEMP_TOLERANCE:
                self.actuators.heater(True)
            elif temp > machine.target_temp + TEMP_TOLERANCE:
                self.actuators.heater(False)
        elif state is MachineState.ERROR:
            self.actuators.all_off()

    def apply(self, machine: CoffeeMachine):
        """Set every actuator as the current state requires."""
        outputs = _OUTPUTS.get(machine.state)
        if outputs is None:
            return
        heater, grinder, pump, valve = outputs
        if heater is not None:
            self.actuators.heater(heater)
        self.actuators.grinder(grinder)
        self.actuators.water_pump(pump)
        self.actuators.water_valve(valve)