[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "microkit"
version = "0.1.0"
description = "Small math helpers and host-side drivers for common I2C, SPI and serial sensor chips"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "i2c",
    "spi",
    "serial",
    "sensor",
    "dac",
    "eeprom",
    "fram",
    "fraction",
    "complex",
    "angle",
    "histogram",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["microkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
