"""A console labyrinth adventure driven by CSV scenario files, with small container helpers."""

__version__ = "0.1.0"