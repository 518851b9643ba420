"""Simulated coffee machine controller with a DS18B20 sensor model, keypad, display and actuators."""

__version__ = "0.1.0"
__all__ = ["__version__"]