"""
Domain entity for a market quote row.
Zero external dependencies: pure Python dataclass only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Quote:
    ticker: str
    last_price: float
    bid_price: float
    bid_size: int
    ask_price: float
    ask_size: int
