"""jdi - a personal command-line todo tracker with nested subtasks."""

__version__ = "0.1.0"
