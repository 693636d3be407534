"""
Points Conversion Engine

Projects how an internal reward-point balance converts into external value
types (fiat, token, gift card, voucher) over a simulated horizon, and quotes
one-off conversions against the same rate table.
"""

__version__ = "0.1.0"
