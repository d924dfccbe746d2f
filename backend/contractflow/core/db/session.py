from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from functools import lru_cache
import importlib

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from contractflow.core.config import settings
from contractflow.core.db.base import Base
from contractflow.shared.exceptions import ConfigurationError


def _import_model_modules() -> None:
    module_names = [
        "contractflow.core.db.models",
        "contractflow.domain.contracts.models.contracts",
        "contractflow.domain.contracts.models.obligations",
    ]
    for module_name in module_names:
        importlib.import_module(module_name)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    if not settings.database_url:
        raise ConfigurationError("database_url is not configured")
    engine = create_engine(settings.database_url, echo=settings.database_echo, pool_pre_ping=True)
    _import_model_modules()
    Base.metadata.create_all(bind=engine)
    return engine


def get_session_local() -> sessionmaker[Session]:
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, class_=Session)


@contextmanager
def session_scope(factory: sessionmaker[Session] | None = None) -> Iterator[Session]:
    """
    One unit of work per block.

    Anything not committed when the block exits, normally or through an
    exception (including cancellation), is rolled back.
    """
    db = (factory or get_session_local())()
    try:
        yield db
    except BaseException:
        db.rollback()
        raise
    finally:
        db.close()
