"""
SQLAlchemy Core table definitions.
"""

from sqlalchemy import Column, Float, Integer, MetaData, String, Table

metadata = MetaData()

quote_table = Table(
    "quote",
    metadata,
    Column("ticker", String(16), primary_key=True),
    Column("last_price", Float, nullable=False),
    Column("bid_price", Float, nullable=False),
    Column("bid_size", Integer, nullable=False),
    Column("ask_price", Float, nullable=False),
    Column("ask_size", Integer, nullable=False),
)
