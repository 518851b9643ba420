"""DS18B20 one-wire temperature sensor, driven bit by bit over a data line."""

from __future__ import annotations

from .model import delay_ms

CMD_SEARCHROM = 0xF0
CMD_READROM = 0x33
CMD_MATCHROM = 0x55
CMD_SKIPROM = 0xCC
CMD_ALARMSEARCH = 0xEC

CMD_CONVERTTEMP = 0x44
CMD_READSCR = 0xBE
CMD_WRITESCR = 0x4E
CMD_COPYSCR = 0x48
CMD_RECALLE2 = 0xB8
CMD_READPWR = 0xB4

CONVERSION_TIME_MS = 750
RESOLUTION = 0.0625


class DataLine:
    """The sensor's DQ line; the simulated line idles high."""

    def __init__(self):
        self.output = False
        self.level = 1

    def set_output(self):
        """Drive the line from this side."""
        self.output = True

    def set_input(self):
        """Release the line so the sensor can drive it."""
        self.output = False

    def read(self):
        """Return the level seen on the line."""
        return 1

    def write(self, level):
        """Drive the line to ``level``."""
        self.level = 1 if level else 0


def decode_temperature(lsb, msb):
    """Convert the two scratchpad temperature bytes to degrees Celsius."""
    for name, value in (("lsb", lsb), ("msb", msb)):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"{name} must be a byte, got {value}")
    raw = (msb << 8) | lsb
    if raw & 0x8000:
        raw -= 0x10000
    return raw * RESOLUTION


class DS18B20:
    """Talks to one sensor on a data line, skipping ROM addressing."""

    def __init__(self, line=None, delay=None):
        self.line = line if line is not None else DataLine()
        self._delay = delay if delay is not None else delay_ms

    def reset(self):
        """Send a reset pulse; return 1 if the sensor pulled the line low."""
        line = self.line
        line.set_output()
        line.write(0)
        self._delay(1)
        line.write(1)
        self._delay(1)
        line.set_input()
        status = line.read()
        self._delay(1)
        return 0 if status else 1

    def write_bit(self, bit):
        """Send one bit in its own time slot."""
        line = self.line
        line.set_output()
        line.write(0)
        self._delay(1)
        line.write(1)
        if bit:
            self._delay(1)

    def read_bit(self):
        """Read one bit in its own time slot."""
        line = self.line
        line.set_output()
        line.write(0)
        self._delay(1)
        line.write(1)
        line.set_input()
        bit = line.read()
        self._delay(1)
        return 1 if bit else 0

    def write_byte(self, data):
        """Send a byte, least significant bit first."""
        if not 0 <= data <= 0xFF:
            raise ValueError(f"not a byte: {data}")
        for shift in range(8):
            self.write_bit((data >> shift) & 1)

    def read_byte(self):
        """Read a byte, least significant bit first."""
        return sum(self.read_bit() << shift for shift in range(8))

    def start_convert(self):
        """Ask the sensor to start a temperature conversion."""
        self.reset()
        self.write_byte(CMD_SKIPROM)
        self.write_byte(CMD_CONVERTTEMP)

    def read_temp(self):
        """Convert, wait for the result and return it in degrees Celsius."""
        self.start_convert()
        self._delay(CONVERSION_TIME_MS)
        self.reset()
        self.write_byte(CMD_SKIPROM)
        self.write_byte(CMD_READSCR)
        lsb = self.read_byte()
        msb = self.read_byte()
        return decode_temperature(lsb, msb)