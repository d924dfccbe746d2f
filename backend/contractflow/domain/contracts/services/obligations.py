from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from contractflow.core.config import settings
from contractflow.core.context import get_actor_id, get_logger
from contractflow.core.db.audit import write_audit_event
from contractflow.domain.contracts.models.contracts import Contract
from contractflow.domain.contracts.models.obligations import Obligation
from contractflow.domain.contracts.schemas.obligations import (
    ObligationCreate,
    ObligationSummary,
    ObligationUpdate,
)
from contractflow.shared.enums import ObligationStatus
from contractflow.shared.utils import coalesce_blank, is_blank, sa_model_to_dict, utcnow

logger = get_logger(__name__)

DEFAULT_CLAUSE_REF = "N/A"
DEFAULT_DESCRIPTION = ""
DEFAULT_STATUS = ObligationStatus.pending.value

ENTITY_TYPE = "Obligation"


class ObligationService:
    """
    CRUD over obligations, always scoped to a parent contract.

    Absence is reported as ``None`` (reads, create) or ``False`` (update,
    delete). Storage errors propagate; each mutation is a single commit, so a
    failed or abandoned call leaves nothing behind once the session is
    rolled back or closed.

    Reads do not filter soft-deleted rows.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, contract_id: uuid.UUID, payload: ObligationCreate) -> ObligationSummary | None:
        contract = self.db.get(Contract, contract_id)
        if contract is None:
            logger.info("obligation.not_found", contract_id=str(contract_id), operation="create")
            return None

        actor_id = _current_actor()
        ob = Obligation(
            contract_id=contract.id,
            clause_ref=coalesce_blank(payload.clause_ref, DEFAULT_CLAUSE_REF),
            description=coalesce_blank(payload.description, DEFAULT_DESCRIPTION),
            due_date=payload.due_date,
            status=coalesce_blank(payload.status, DEFAULT_STATUS),
            is_deleted=False,
            created_by=actor_id,
            updated_by=actor_id,
        )
        self.db.add(ob)
        self.db.flush()

        write_audit_event(
            self.db,
            contract_id=contract.id,
            actor_id=actor_id,
            action="obligation.created",
            entity_type=ENTITY_TYPE,
            entity_id=ob.id,
            before=None,
            after=sa_model_to_dict(ob),
        )
        self.db.commit()
        self.db.refresh(ob)

        logger.info("obligation.created", obligation_id=str(ob.id), contract_id=str(contract.id))
        return ObligationSummary.model_validate(ob)

    def get_by_id(self, obligation_id: uuid.UUID) -> ObligationSummary | None:
        ob = self.db.get(Obligation, obligation_id)
        if ob is None:
            logger.info("obligation.not_found", obligation_id=str(obligation_id), operation="get")
            return None
        return ObligationSummary.model_validate(ob)

    def list_for_contract(self, contract_id: uuid.UUID) -> list[ObligationSummary]:
        stmt = (
            select(Obligation)
            .where(Obligation.contract_id == contract_id)
            .order_by(Obligation.clause_ref.asc())
        )
        return [ObligationSummary.model_validate(ob) for ob in self.db.execute(stmt).scalars().all()]

    def update(self, obligation_id: uuid.UUID, payload: ObligationUpdate) -> bool:
        ob = self.db.get(Obligation, obligation_id)
        if ob is None:
            logger.info("obligation.not_found", obligation_id=str(obligation_id), operation="update")
            return False

        before = sa_model_to_dict(ob)
        actor_id = _current_actor()

        if not is_blank(payload.clause_ref):
            ob.clause_ref = payload.clause_ref
        if not is_blank(payload.description):
            ob.description = payload.description
        ob.due_date = payload.due_date
        if not is_blank(payload.status):
            ob.status = payload.status
        ob.updated_at = utcnow()
        ob.updated_by = actor_id
        self.db.flush()

        write_audit_event(
            self.db,
            contract_id=ob.contract_id,
            actor_id=actor_id,
            action="obligation.updated",
            entity_type=ENTITY_TYPE,
            entity_id=ob.id,
            before=before,
            after=sa_model_to_dict(ob),
        )
        self.db.commit()

        logger.info("obligation.updated", obligation_id=str(obligation_id))
        return True

    def delete(self, obligation_id: uuid.UUID) -> bool:
        ob = self.db.get(Obligation, obligation_id)
        if ob is None:
            logger.info("obligation.not_found", obligation_id=str(obligation_id), operation="delete")
            return False

        before = sa_model_to_dict(ob)
        actor_id = _current_actor()

        ob.is_deleted = True
        ob.updated_at = utcnow()
        ob.updated_by = actor_id
        self.db.flush()

        write_audit_event(
            self.db,
            contract_id=ob.contract_id,
            actor_id=actor_id,
            action="obligation.deleted",
            entity_type=ENTITY_TYPE,
            entity_id=ob.id,
            before=before,
            after=sa_model_to_dict(ob),
        )
        self.db.commit()

        logger.info("obligation.deleted", obligation_id=str(obligation_id))
        return True


def _current_actor() -> str:
    return get_actor_id() or settings.default_actor_id
