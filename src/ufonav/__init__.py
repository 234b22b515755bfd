"""Fixed-bearing flight simulation driven by truncated Taylor-series trig."""

__version__ = "0.1.0"
