"""Math helpers and host-side drivers for small I2C, SPI and serial devices."""

__version__ = "0.1.0"