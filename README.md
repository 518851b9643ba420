# coffeectl

coffeectl is a simulated coffee machine controller. It has these parts:

- A state machine that moves through idle, heating, grinding, brewing, warming and error.
- A bit-level model of the 1-Wire DS18B20 temperature sensor.
- Keypad handling.
- A console status display.
- Heater, grinder, water pump and water valve actuators. Each one prints a line every time it is switched on or off.

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
coffeectl [--cycles N]
```

The command prints an initialisation message and then runs the control loop. Each pass does the following, in this order:

1. Reads the sensor.
2. Scans the keypad.
3. Applies any key press.
4. Counts one tick of the state machine.
5. Drives the actuators.
6. Redraws the display.
7. Sleeps for 100 ms.

The state machine only advances on every tenth tick, so it moves once per simulated second.

Without `--cycles` the loop runs until it is interrupted with Ctrl-C. With `--cycles N` it stops after N passes. A negative value is rejected.

## Library use

```python
import io
from coffeectl.model import CoffeeMachine, Key, MachineState
from coffeectl.keypad import process_key_input
from coffeectl.control import Actuators, Controller

machine = CoffeeMachine()
process_key_input(Key.POWER, machine)      # idle -> heating
assert machine.state is MachineState.HEATING

out = io.StringIO()
controller = Controller(Actuators(out))
for _ in range(10):                        # one simulated second
    controller.update_state(machine, 90.0)
assert machine.state is MachineState.IDLE  # target temperature reached
```

### Modules

- **`coffeectl.model`**
  - The enums `MachineState`, `CoffeeType`, `ErrorCode` and `Key`.
  - The `CoffeeMachine` dataclass. It starts idle, with espresso selected, an 85 °C target and water and beans at 100 %.
  - `delay_ms(ms)`, which sleeps and rejects negative values.
- **`coffeectl.control`**
  - `Actuators`. It has `heater`, `grinder`, `water_pump`, `water_valve` and `all_off`. It keeps the current switch positions in `states`.
  - `Controller`.
    - `update_state(machine, temp)` counts ticks and advances the machine every tenth call.
    - `apply(machine)` sets the actuators for the current state. In the warming state the heater is left as it is.
- **`coffeectl.keypad`**
  - `Keypad.scan()`.
  - `process_key_input(key, machine)`:
    - POWER toggles between idle and heating. Going to heating resets the target to 85 °C.
    - START begins grinding from idle or heating when the beans are above 10 %. Otherwise it sets the error state with `NO_BEANS`.
    - STOP returns the machine to idle.
    - UP and DOWN change the target by 1 °C within 60–95 °C, in idle or heating only.
    - OK clears an error.
    - MENU and unknown keys do nothing.
- **`coffeectl.ds18b20`**
  - `DataLine`, the simulated DQ line.
  - `DS18B20`. It has reset, bit and byte I/O (least significant bit first), `start_convert` and `read_temp`. `read_temp` issues skip-ROM, convert, waits 750 ms, then reads the scratchpad.
  - `decode_temperature(lsb, msb)`. It converts the signed 16-bit value at 0.0625 °C per step.
- **`coffeectl.display`**
  - `Display`, which writes to a stream, stdout by default.
  - The label helpers `state_label`, `coffee_type_label` and `error_label`.
- **`coffeectl.app`**
  - `CoffeeMachineSystem`, which wires all the parts together. It has `step()`, which returns the temperature read, and `run(cycles)`.
  - `main`.

### State machine, per simulated second

- **Heating** returns to idle once the temperature reaches the target.
- **Grinding** uses 2 % of the beans each second. It moves to brewing once its counter has reached 10. It goes to the error state (`NO_BEANS`) when the beans fall to 5 % or below.
- **Brewing** uses 2 % of the water each second. It moves to warming once its counter has reached 30. It goes to the error state (`NO_WATER`) when the water falls to 5 % or below.
- **Warming** returns to idle once its counter has reached 60. While warming, the heater is switched on when the temperature drops more than 2 °C below the target. It is switched off when the temperature rises more than 2 °C above it.
- **Error** switches every actuator off.

## What it does not do

coffeectl drives no real hardware.

- **Keypad.** `Keypad.scan()` never reports a press, so the `coffeectl` command on its own stays idle. To drive the machine, call `process_key_input` yourself.
- **Sensor.** The simulated `DataLine` always reads high. With that line, `DS18B20.read_temp()` returns -0.0625 °C. To model other readings, supply your own line object.
- **Drink selection.** Nothing in the package changes the selected coffee type.