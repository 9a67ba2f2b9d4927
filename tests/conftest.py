"""Shared fixtures: in-memory SQLite engine and a scripted HTTP helper."""

from typing import Optional

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from daocore.domain.ports.http_port import HttpResponse, IHttpHelper
from daocore.infrastructure.codec.json_codec import JsonCodec
from daocore.infrastructure.persistence.quote_dao import QuoteDao
from daocore.infrastructure.persistence.schema import metadata, quote_table
from daocore.infrastructure.persistence.sqlalchemy_executor import SqlAlchemyTableExecutor


class ScriptedHttpHelper(IHttpHelper):
    """Returns a fixed response and records every (method, uri) call."""

    def __init__(self, response: Optional[HttpResponse] = None) -> None:
        self.response = response or HttpResponse(status_code=200, body=b"{}")
        self.calls: list[tuple[str, str]] = []

    def get(self, uri: str) -> HttpResponse:
        self.calls.append(("GET", uri))
        return self.response

    def post(self, uri: str) -> HttpResponse:
        self.calls.append(("POST", uri))
        return self.response


@pytest.fixture
def http_helper() -> ScriptedHttpHelper:
    return ScriptedHttpHelper()


@pytest.fixture
def codec() -> JsonCodec:
    return JsonCodec()


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def executor(engine) -> SqlAlchemyTableExecutor:
    return SqlAlchemyTableExecutor(engine, quote_table)


@pytest.fixture
def quote_dao(executor) -> QuoteDao:
    return QuoteDao(executor)
