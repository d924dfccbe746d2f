from __future__ import annotations

import uuid
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from sqlalchemy.orm import Session, sessionmaker
from structlog.contextvars import bound_contextvars

from contractflow.core.context import get_request_id
from contractflow.core.db.session import get_session_local, session_scope
from contractflow.core.logging import configure_logging
from contractflow.domain.contracts.services.obligations import ObligationService


def bootstrap() -> sessionmaker[Session]:
    """Process start-up: logging first, then the lazily created engine."""
    configure_logging()
    return get_session_local()


@contextmanager
def obligation_service(
    factory: sessionmaker[Session] | None = None,
    *,
    request_id: str | None = None,
    actor_id: str | None = None,
    roles: Iterable[str] = (),
) -> Iterator[ObligationService]:
    """
    Open one unit of work for an API-layer caller.

    An already bound request id is reused; a new one is generated only when
    none exists. Bindings made here are undone on exit and whatever the caller
    had bound before is left in place.
    """
    bindings: dict = {"request_id": request_id or get_request_id() or str(uuid.uuid4())}
    if actor_id is not None:
        bindings.update(actor_id=actor_id, actor_roles=list(roles))

    with bound_contextvars(**bindings):
        with session_scope(factory) as db:
            yield ObligationService(db)
