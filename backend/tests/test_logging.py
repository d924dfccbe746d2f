from __future__ import annotations

import uuid

import pytest
import structlog
from structlog.testing import capture_logs

from contractflow.core.config import settings
from contractflow.core.logging import configure_logging
from contractflow.domain.contracts.schemas.obligations import ObligationCreate, ObligationUpdate
from contractflow.domain.contracts.services.obligations import ObligationService
from contractflow.shared.enums import Env


@pytest.fixture()
def reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.mark.parametrize(
    ("env", "renderer"),
    [
        (Env.prod, structlog.processors.JSONRenderer),
        (Env.test, structlog.processors.JSONRenderer),
        (Env.dev, structlog.dev.ConsoleRenderer),
    ],
)
def test_configure_logging_picks_renderer_from_env(monkeypatch, reset_structlog, env, renderer):
    monkeypatch.setattr(settings, "env", env)

    configure_logging()

    assert structlog.is_configured()
    processors = structlog.get_config()["processors"]
    assert isinstance(processors[-1], renderer)
    assert processors[0] is structlog.contextvars.merge_contextvars


def test_configure_logging_json_override(monkeypatch, reset_structlog):
    monkeypatch.setattr(settings, "env", Env.dev)

    configure_logging(json_logs=True)

    assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)


def test_service_logs_lifecycle_events(service: ObligationService, seeded_contract):
    missing = uuid.uuid4()
    with capture_logs() as logs:
        created = service.create(seeded_contract, ObligationCreate(clause_ref="2.1"))
        service.update(missing, ObligationUpdate(status="Completed"))
        service.create(missing, ObligationCreate())
        service.get_by_id(missing)

    assert [entry["event"] for entry in logs] == [
        "obligation.created",
        "obligation.not_found",
        "obligation.not_found",
        "obligation.not_found",
    ]
    assert logs[0]["obligation_id"] == str(created.id)
    assert logs[1]["operation"] == "update"
    assert logs[2]["operation"] == "create"
    assert logs[2]["contract_id"] == str(missing)
    assert logs[3]["operation"] == "get"
    assert logs[3]["obligation_id"] == str(missing)
