"""Dhrystone benchmark and CoreMark-style matrix and state-machine kernels."""

__version__ = "0.1.0"