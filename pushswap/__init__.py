"""Two-stack integer sorting that reports the moves it makes."""

__version__ = "1.0.0"