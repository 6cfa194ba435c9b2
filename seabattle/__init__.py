"""Human vs. computer naval combat game engine."""

__version__ = "0.1.0"
