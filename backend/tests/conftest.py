from __future__ import annotations

import os
import sys
import uuid
from collections.abc import Generator

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool
from sqlalchemy.orm import Session, sessionmaker
from structlog import contextvars

# Make `backend/` importable regardless of pytest import mode.
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from contractflow.core.db.base import Base
from contractflow.domain.contracts.models.contracts import Contract
from contractflow.domain.contracts.services.obligations import ObligationService

# Ensure model modules are imported so Base.metadata is complete.
from contractflow.core.db import models as _core_models  # noqa: F401
from contractflow.domain.contracts.models import obligations as _obligations  # noqa: F401


@pytest.fixture(autouse=True)
def _clean_log_context() -> Generator[None, None, None]:
    contextvars.clear_contextvars()
    yield
    contextvars.clear_contextvars()


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


@pytest.fixture()
def session_factory(db_engine) -> sessionmaker[Session]:
    return sessionmaker(bind=db_engine, autoflush=False, autocommit=False, class_=Session)


@pytest.fixture()
def db_session(session_factory) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def service(db_session: Session) -> ObligationService:
    return ObligationService(db_session)


def _add_contract(db: Session, title: str) -> uuid.UUID:
    contract_id = uuid.uuid4()
    db.add(Contract(id=contract_id, title=title, counterparty="Acme Corp"))
    db.commit()
    return contract_id


@pytest.fixture()
def seeded_contract(db_session: Session) -> uuid.UUID:
    return _add_contract(db_session, "Master Services Agreement")


@pytest.fixture()
def other_contract(db_session: Session) -> uuid.UUID:
    return _add_contract(db_session, "Non-Disclosure Agreement")
