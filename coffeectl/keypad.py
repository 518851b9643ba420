"""Front-panel buttons and what each one does to the machine."""

from __future__ import annotations

from .model import TEMP_DEFAULT, TEMP_MAX, TEMP_MIN, CoffeeMachine, ErrorCode, Key, MachineState


class Keypad:
    """Button scanner; the simulated panel never reports a press."""

    def __init__(self):
        self._status = 0
        self._long_press_time = 0

    def scan(self):
        """Return the key currently pressed."""
        return Key.NONE


def process_key_input(key, machine: CoffeeMachine):
    """Apply one key press to ``machine``; unknown keys are ignored."""
    try:
        key = Key(key)
    except ValueError:
        return

    adjustable = machine.state in (MachineState.IDLE, MachineState.HEATING)

    if key is Key.POWER:
        if machine.state is MachineState.IDLE:
            machine.state = MachineState.HEATING
            machine.target_temp = TEMP_DEFAULT
        else:
            machine.state = MachineState.IDLE
    elif key is Key.START:
        if adjustable:
            if machine.coffee_beans_level > 10:
                machine.state = MachineState.GRINDING
            else:
                machine.state = MachineState.ERROR
                machine.error_code = ErrorCode.NO_BEANS
    elif key is Key.STOP:
        machine.state = MachineState.IDLE
    elif key is Key.UP:
        if adjustable and machine.target_temp < TEMP_MAX:
            machine.target_temp += 1.0
    elif key is Key.DOWN:
        if adjustable and machine.target_temp > TEMP_MIN:
            machine.target_temp -= 1.0
    elif key is Key.OK:
        if machine.state is MachineState.ERROR:
            machine.state = MachineState.IDLE
            machine.error_code = ErrorCode.NONE