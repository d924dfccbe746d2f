from __future__ import annotations

from typing import Iterable

import structlog
from structlog import contextvars


def set_request_id(request_id: str) -> None:
    contextvars.bind_contextvars(request_id=request_id)


def set_actor(actor_id: str, roles: Iterable[str]) -> None:
    contextvars.bind_contextvars(actor_id=actor_id, actor_roles=list(roles))


def bind_request_context(request_id: str, actor_id: str | None = None, roles: Iterable[str] = ()) -> None:
    """Bind request/actor identity for log lines and audit events of the current unit of work."""
    set_request_id(request_id)
    if actor_id is not None:
        set_actor(actor_id, roles)


def get_request_id() -> str | None:
    ctx = contextvars.get_contextvars()
    v = ctx.get("request_id")
    return str(v) if v is not None else None


def get_actor_id() -> str | None:
    ctx = contextvars.get_contextvars()
    v = ctx.get("actor_id")
    return str(v) if v is not None else None


def get_actor_roles() -> list[str]:
    ctx = contextvars.get_contextvars()
    roles = ctx.get("actor_roles")
    if isinstance(roles, list):
        return [str(r) for r in roles]
    return []


def get_logger(*args, **initial_values):
    return structlog.get_logger(*args, **initial_values)
