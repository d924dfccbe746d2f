import sqlalchemy as sa
from alembic import op

revision = "0001_initial"
down_revision = None


def _audit_meta_columns() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("created_by", sa.String(length=128), nullable=True),
        sa.Column("updated_by", sa.String(length=128), nullable=True),
    ]


def upgrade():
    op.create_table(
        "contracts",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("title", sa.String(length=300), nullable=False),
        sa.Column("counterparty", sa.String(length=300), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_audit_meta_columns(),
    )
    op.create_index("ix_contracts_id", "contracts", ["id"])
    op.create_index("ix_contracts_title", "contracts", ["title"])
    op.create_index("ix_contracts_is_deleted", "contracts", ["is_deleted"])

    op.create_table(
        "obligations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("contract_id", sa.Uuid(), sa.ForeignKey("contracts.id"), nullable=False),
        sa.Column("clause_ref", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("status", sa.Text(), nullable=False),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_audit_meta_columns(),
    )
    op.create_index("ix_obligations_id", "obligations", ["id"])
    op.create_index("ix_obligations_contract_id", "obligations", ["contract_id"])
    op.create_index("ix_obligations_is_deleted", "obligations", ["is_deleted"])
    op.create_index("ix_obligations_contract_clause", "obligations", ["contract_id", "clause_ref"])

    op.create_table(
        "audit_events",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("contract_id", sa.Uuid(), nullable=False),
        sa.Column("actor_id", sa.String(length=200), nullable=False),
        sa.Column("actor_roles", sa.JSON(), nullable=False),
        sa.Column("action", sa.String(length=200), nullable=False),
        sa.Column("entity_type", sa.String(length=100), nullable=False),
        sa.Column("entity_id", sa.String(length=200), nullable=False),
        sa.Column("before", sa.JSON(), nullable=True),
        sa.Column("after", sa.JSON(), nullable=True),
        sa.Column("request_id", sa.Text(), nullable=False),
        *_audit_meta_columns(),
    )
    for column in ("id", "contract_id", "actor_id", "action", "entity_type", "entity_id", "request_id"):
        op.create_index(f"ix_audit_events_{column}", "audit_events", [column])
    op.create_index(
        "ix_audit_events_contract_entity",
        "audit_events",
        ["contract_id", "entity_type", "entity_id"],
    )


def downgrade():
    op.drop_table("audit_events")
    op.drop_table("obligations")
    op.drop_table("contracts")
