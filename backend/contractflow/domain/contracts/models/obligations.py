from __future__ import annotations

import datetime as dt
import uuid

from sqlalchemy import DateTime, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from contractflow.core.db.base import AuditMetaMixin, Base, IdMixin, SoftDeleteMixin
from contractflow.shared.enums import ObligationStatus


class Obligation(Base, IdMixin, AuditMetaMixin, SoftDeleteMixin):
    """
    Clause-level duty or task tracked under a contract.

    Rows are never removed; delete sets ``is_deleted``. The contract
    reference is checked once, at creation.
    """

    __tablename__ = "obligations"

    contract_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("contracts.id"), index=True)

    clause_ref: Mapped[str] = mapped_column(Text, default="N/A", nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    due_date: Mapped[dt.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    status: Mapped[str] = mapped_column(Text, default=ObligationStatus.pending.value, nullable=False)

    __table_args__ = (Index("ix_obligations_contract_clause", "contract_id", "clause_ref"),)
