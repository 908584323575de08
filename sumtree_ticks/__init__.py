"""Tick-to-price conversion and 256-bit fixed-point decimal arithmetic for an order book."""

__version__ = "0.1.0"
__all__ = ["decimal256", "tick_math"]