"""
Composition helpers: build each DAO from Settings.

Callers that need authentication pass their own configured httpx.Client.
"""

from typing import Optional

import httpx
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from daocore.config.logging_config import configure_logging
from daocore.config.settings import Settings
from daocore.infrastructure.codec.json_codec import JsonCodec
from daocore.infrastructure.http.httpx_helper import HttpxHelper
from daocore.infrastructure.persistence.quote_dao import QuoteDao
from daocore.infrastructure.persistence.schema import metadata, quote_table
from daocore.infrastructure.persistence.sqlalchemy_executor import SqlAlchemyTableExecutor
from daocore.infrastructure.twitter.status_dao import StatusDao


def build_status_dao(
    settings: Optional[Settings] = None,
    client: Optional[httpx.Client] = None,
) -> StatusDao:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    http_helper = HttpxHelper(client=client, timeout=settings.http_timeout_seconds)
    return StatusDao(http_helper, JsonCodec(), base_uri=settings.status_api_base_uri)


def build_quote_dao(
    settings: Optional[Settings] = None,
    engine: Optional[Engine] = None,
    create_tables: bool = False,
) -> QuoteDao:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)
    engine = engine or create_engine(settings.database_url)
    if create_tables:
        metadata.create_all(engine)
    return QuoteDao(SqlAlchemyTableExecutor(engine, quote_table))
