# microkit

microkit is a set of small, self-contained building blocks for code that works with
microcontroller-style hardware. It has two halves:

- **Arithmetic and data helpers**: angles held as degrees, minutes, seconds and
  ten-thousandths of a second (`Angle`), averaging of directions (`AverageAngle`),
  linear range mapping (`FastMap`), a triangular distance table (`DistanceTable`),
  a countdown timer (`CountDown`), fractions with a denominator capped at 10000
  (`Fraction`), complex numbers with trigonometric and hyperbolic functions (`Complex`),
  packed bit-field and boolean arrays (`BitArray`, `BoolArray`) and a bucketed
  histogram (`Histogram`).
- **Chip drivers**: the AM2320 family and DHT12 humidity/temperature sensors, the
  AD5241/AD5242 digital potentiometer, the DS28CM00 ID chip, the HT16K33 seven-segment
  driver, 24LC-series I2C EEPROMs, Fujitsu MB85RC FRAM, COZIR CO2 sensors, the DAC8551,
  DAC8552 and DAC8554 converters, plus an analog keypad and an analog pin reader.

It uses only the standard library and needs Python 3.10 or later.

## Installing

```
pip install microkit
```

To run the test suite:

```
pip install "microkit[test]"
pytest
```

## Helpers

### Angles

```python
from microkit.angle import Angle, AngleFormatMode

a = Angle.parse("45.5")
print(a)                              # 45.30'00"0000
print(a.format(AngleFormatMode.M))    # 45.30'
b = a + Angle(10, 15, 0, 0)
print(float(b))                       # about 55.75
```

`Angle` also offers `from_float`, `from_radians`, `to_radians`, comparison, negation,
multiplication and division by a number, and division by another angle (giving a ratio).

### Fractions

```python
from microkit.fraction import Fraction

f = Fraction(1, 3) + Fraction(1, 6)
print(f)                                   # 1/2
print(Fraction.from_float(3.14159265))     # a close fraction
print(Fraction.mediant(Fraction(1, 2), Fraction(2, 3)))   # 3/5
```

A zero denominator raises `ZeroDivisionError`.

### Complex numbers

```python
from microkit.complex_math import Complex

z = Complex(1, 1)
print(z.modulus())
print(z.exp().log())
print(z.sin(), z.acosh())
```

### Mapping a range

```python
from microkit.fast_map import FastMap

m = FastMap()
m.init(0, 1023, 0, 5)
volts = m.constrained_map(512)
raw = m.back(volts)
```

### Averaging directions

```python
from microkit.average_angle import AverageAngle, AngleType

avg = AverageAngle(AngleType.DEGREES)
avg.add(350)
avg.add(10)
print(avg.average())   # close to 0 (or 360)
```

### Histograms

```python
from microkit.histogram import Histogram

h = Histogram([10, 20, 30])
for v in (5, 15, 15, 25, 40):
    h.add(v)
print(h.bucket(1), h.cdf(20))   # 2 0.6
```

### Countdown

`CountDown` takes a `Resolution` (`MILLIS`, `MICROS` or `SECONDS`) and, optionally, a
clock: a callable returning seconds as a float (`time.monotonic` by default).
`start(ticks)` counts down ticks, `start_time(days, hours, minutes, seconds)` switches to
seconds resolution, `stop()` and `cont()` pause and resume, and `remaining()` reports
what is left.

## Drivers

The drivers do not open any hardware themselves. Each is given an object that does the
transfers, so the same driver works with a real adapter, a simulator or a test fake:

- **I2C drivers** (`AM232X`, `DHT12`, `AD524X`, `DS28CM00`, `HT16K33`, `I2CEeprom`,
  `FRAM`) take a bus with `write(address, data)` and, except `HT16K33`,
  `read(address, count)` returning bytes.
- **SPI DACs** (`DAC8551`, `DAC8552`, `DAC8554`) take an object with `write(data)`.
- **`Cozir`** takes a serial port with an `in_waiting` count, `write(data)` and
  `read(size)`.
- **`AnalogKeypad`** and **`AnalogPin`** take a callable that returns the raw ADC reading.

Faults are raised as exceptions: `AM232XError` (with the device's error byte in `code`),
`DHT12Error`, `AD524XError`, `DS28CM00Error` and `EepromError`. Invalid channels, values
or modes raise `ValueError`.

```python
from microkit.am232x import AM232X, AM232XError

sensor = AM232X(bus)
try:
    humidity, temperature = sensor.read()
except AM232XError as exc:
    print("sensor read failed:", exc)
```

```python
from microkit.dac8552 import DAC8552, PowerDown8552

dac = DAC8552(spi)
dac.begin()
dac.set_value(0, 32768)
dac.set_power_down(1, PowerDown8552.HIGH_IMPEDANCE)
```

## What it does not do

microkit contains no bus, SPI or serial implementations and no device discovery: you
supply the objects that move the bytes. It has no command-line program; everything is
used from Python code.

## Modules

| Module | Contents |
| --- | --- |
| `microkit.angle` | `Angle`, `AngleFormat`, `AngleFormatMode` |
| `microkit.average_angle` | `AverageAngle`, `AngleType` |
| `microkit.fast_map` | `FastMap` |
| `microkit.distance_table` | `DistanceTable` |
| `microkit.countdown` | `CountDown`, `Resolution` |
| `microkit.fraction` | `Fraction` |
| `microkit.complex_math` | `Complex` |
| `microkit.bit_array` | `BitArray` |
| `microkit.bool_array` | `BoolArray` |
| `microkit.histogram` | `Histogram` |
| `microkit.analog_keypad` | `AnalogKeypad`, `KeyEvent`, `key_from_adc` |
| `microkit.analog_pin` | `AnalogPin` |
| `microkit.am232x` | `AM232X`, `AM232XError`, `crc16` |
| `microkit.dht12` | `DHT12`, `DHT12Error` |
| `microkit.ad524x` | `AD524X`, `AD524XError` |
| `microkit.ds28cm00` | `DS28CM00`, `DS28CM00Error` |
| `microkit.ht16k33` | `HT16K33` |
| `microkit.i2c_eeprom` | `I2CEeprom`, `EepromError` |
| `microkit.fram` | `FRAM` |
| `microkit.cozir` | `Cozir`, `OperatingMode`, `OutputField` |
| `microkit.dac8551` | `DAC8551`, `PowerDown8551` |
| `microkit.dac8552` | `DAC8552`, `PowerDown8552` |
| `microkit.dac8554` | `DAC8554`, `PowerDown8554` |