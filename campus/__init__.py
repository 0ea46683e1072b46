"""Campus administration authorization core."""

__version__ = "0.1.0"
