import pytest

from coffeectl.ds18b20 import (
    CMD_CONVERTTEMP,
    CMD_SKIPROM,
    DS18B20,
    DataLine,
    decode_temperature,
)


class ScriptedLine(DataLine):
    def __init__(self, bits=()):
        super().__init__()
        self._bits = list(bits)
        self.writes = []

    def read(self):
        return self._bits.pop(0) if self._bits else 1

    def write(self, level):
        super().write(level)
        self.writes.append(level)


def byte_bits(value):
    return [(value >> i) & 1 for i in range(8)]


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, ms):
        self.calls.append(ms)


def make(bits=()):
    line = ScriptedLine(bits)
    delay = Recorder()
    return DS18B20(line, delay), line, delay


def test_decode_datasheet_values():
    assert decode_temperature(0x50, 0x05) == 85.0
    assert decode_temperature(0x91, 0x01) == 25.0625
    assert decode_temperature(0x5E, 0xFF) == -10.125


def test_decode_zero_and_sign():
    assert decode_temperature(0, 0) == 0.0
    assert decode_temperature(0xFF, 0xFF) < 0


@pytest.mark.parametrize("lsb,msb", [(256, 0), (0, 256), (-1, 0)])
def test_decode_rejects_non_bytes(lsb, msb):
    with pytest.raises(ValueError):
        decode_temperature(lsb, msb)


def test_reset_detects_presence():
    sensor, _, _ = make([0])
    assert sensor.reset() == 1


def test_reset_without_device():
    sensor, _, delay = make([1])
    assert sensor.reset() == 0
    assert delay.calls == [1, 1, 1]


def test_write_bit_slot_lengths():
    sensor, line, delay = make()
    sensor.write_bit(1)
    assert delay.calls == [1, 1]
    delay.calls.clear()
    sensor.write_bit(0)
    assert delay.calls == [1]
    assert line.writes == [0, 1, 0, 1]


def test_write_byte_sends_lsb_first():
    sensor, _, delay = make()
    sensor.write_byte(0b00000001)
    # one long slot for the set bit, seven short ones
    assert len(delay.calls) == 9


def test_write_byte_rejects_out_of_range():
    sensor, _, _ = make()
    with pytest.raises(ValueError):
        sensor.write_byte(0x100)


@pytest.mark.parametrize("value", [0x00, 0x01, 0x80, 0xA5, CMD_SKIPROM, 0xFF])
def test_read_byte_round_trip(value):
    sensor, _, _ = make(byte_bits(value))
    assert sensor.read_byte() == value


def test_read_bit_returns_line_level():
    sensor, line, _ = make([0, 1])
    assert sensor.read_bit() == 0
    assert sensor.read_bit() == 1
    assert line.output is False


def test_read_temp_scripted():
    bits = [0, 0] + byte_bits(0x50) + byte_bits(0x05)
    sensor, _, delay = make(bits)
    assert sensor.read_temp() == 85.0
    assert 750 in delay.calls


def test_read_temp_default_line_reads_all_ones():
    sensor = DS18B20(delay=lambda ms: None)
    assert sensor.read_temp() == decode_temperature(0xFF, 0xFF)


def test_start_convert_sends_commands():
    sensor, line, delay = make()
    sensor.start_convert()
    ones = bin(CMD_SKIPROM).count("1") + bin(CMD_CONVERTTEMP).count("1")
    # reset takes three 1 ms waits; each bit slot one, set bits one more
    assert len(delay.calls) == 3 + 16 + ones
    assert 750 not in delay.calls
    # reset pulls low then releases; every bit slot does the same
    assert line.writes == [0, 1] * 17