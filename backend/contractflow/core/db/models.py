from __future__ import annotations

import uuid

from sqlalchemy import JSON, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from contractflow.core.db.base import AuditMetaMixin, Base, IdMixin


class AuditEvent(Base, IdMixin, AuditMetaMixin):
    __tablename__ = "audit_events"

    contract_id: Mapped[uuid.UUID] = mapped_column(Uuid(as_uuid=True), index=True)

    actor_id: Mapped[str] = mapped_column(String(200), index=True)
    actor_roles: Mapped[list[str]] = mapped_column(JSON, default=list)

    action: Mapped[str] = mapped_column(String(200), index=True)
    entity_type: Mapped[str] = mapped_column(String(100), index=True)
    entity_id: Mapped[str] = mapped_column(String(200), index=True)

    before: Mapped[dict | None] = mapped_column(JSON, nullable=True)
    after: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    request_id: Mapped[str] = mapped_column(Text, index=True)

    __table_args__ = (
        Index("ix_audit_events_contract_entity", "contract_id", "entity_type", "entity_id"),
    )
