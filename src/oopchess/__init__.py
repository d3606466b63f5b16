"""oopchess — a two-player chess rules engine with console and Qt front ends."""

__version__ = "0.1.0"
