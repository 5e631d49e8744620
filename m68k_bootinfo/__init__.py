"""Linux/m68k bootinfo decoder."""

__version__ = "0.1.0"
