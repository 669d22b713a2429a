"""Classic teaching algorithms: factorial, Towers of Hanoi and in-place sorting."""

__version__ = "0.1.0"