[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coffeectl"
version = "0.1.0"
description = "Simulated coffee machine controller: heating, grinding, brewing and warming state machine with a DS18B20 sensor model"
requires-python = ">=3.10"
dependencies = []
keywords = ["coffee", "state-machine", "simulation", "ds18b20", "one-wire", "controller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coffeectl = "coffeectl.app:main"

[tool.hatch.build.targets.wheel]
packages = ["coffeectl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
