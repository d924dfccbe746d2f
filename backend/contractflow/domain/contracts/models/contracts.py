from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from contractflow.core.db.base import AuditMetaMixin, Base, IdMixin, SoftDeleteMixin


class Contract(Base, IdMixin, AuditMetaMixin, SoftDeleteMixin):
    """
    Parent of obligations.

    Owned by the contracts module; the obligations service only reads it to
    check that a contract exists before attaching an obligation.
    """

    __tablename__ = "contracts"

    title: Mapped[str] = mapped_column(String(300), index=True)
    counterparty: Mapped[str | None] = mapped_column(String(300), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
