"""Initial schema — collection singleton, tokens, claims, roles, approvals, events, payouts.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "collections",
        sa.Column("id", sa.Integer, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("symbol", sa.String(20), nullable=False),
        sa.Column("owner", sa.String(42), nullable=False),
        sa.Column("cap", sa.Integer, nullable=False),
        sa.Column("issued_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("phase", sa.String(20), nullable=False, server_default="closed"),
        sa.Column("public_price", sa.String(78), nullable=False, server_default="0"),
        sa.Column("presale_price", sa.String(78), nullable=False, server_default="0"),
        sa.Column("allow_list_root", sa.String(66), nullable=True),
        sa.Column("revealed", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("placeholder_descriptor", sa.Text, nullable=False, server_default=""),
        sa.Column("base_descriptor_template", sa.Text, nullable=False, server_default=""),
        sa.Column("paused", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("royalty_receiver", sa.String(42), nullable=False),
        sa.Column("royalty_bps", sa.Integer, nullable=False, server_default="0"),
        sa.Column("balance", sa.String(78), nullable=False, server_default="0"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "tokens",
        sa.Column("token_id", sa.Integer, primary_key=True, autoincrement=False),
        sa.Column("owner", sa.String(42), nullable=False),
        sa.Column("locked", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("descriptor_override", sa.Text, nullable=True),
        sa.Column("approved", sa.String(42), nullable=True),
        sa.Column("rental_user", sa.String(42), nullable=True),
        sa.Column("rental_expires", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("minted_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_tokens_owner", "tokens", ["owner"])

    op.create_table(
        "presale_claims",
        sa.Column("account", sa.String(42), primary_key=True),
        sa.Column("amount", sa.Integer, nullable=False),
        sa.Column("claimed_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "role_assignments",
        sa.Column("role", sa.String(40), primary_key=True),
        sa.Column("account", sa.String(42), primary_key=True),
    )

    op.create_table(
        "operator_approvals",
        sa.Column("owner", sa.String(42), primary_key=True),
        sa.Column("operator", sa.String(42), primary_key=True),
    )

    op.create_table(
        "collection_events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(40), nullable=False),
        sa.Column("payload", sa.JSON, nullable=False),
        sa.Column("caller", sa.String(42), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_collection_events_name", "collection_events", ["name"])

    op.create_table(
        "payouts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("recipient", sa.String(42), nullable=False),
        sa.Column("amount", sa.String(78), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )


def downgrade() -> None:
    op.drop_table("payouts")
    op.drop_index("ix_collection_events_name", table_name="collection_events")
    op.drop_table("collection_events")
    op.drop_table("operator_approvals")
    op.drop_table("role_assignments")
    op.drop_table("presale_claims")
    op.drop_index("ix_tokens_owner", table_name="tokens")
    op.drop_table("tokens")
    op.drop_table("collections")
