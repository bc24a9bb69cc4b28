"""add addresses

Revision ID: c2d7a9e4f613
Revises: 8b41e6c0d2f5
Create Date: 2026-10-19

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "c2d7a9e4f613"
down_revision: Union[str, Sequence[str], None] = "8b41e6c0d2f5"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

address_type = postgresql.ENUM(
    "postal",
    "property",
    name="address_type",
    create_type=False,
)


def upgrade() -> None:
    address_type.create(op.get_bind(), checkfirst=True)
    op.create_table(
        "addresses",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("business_profile_id", sa.String(), nullable=False),
        sa.Column("address_type", address_type, nullable=False),
        sa.Column("line1", sa.String(), nullable=False),
        sa.Column("line2", sa.String(), nullable=True),
        sa.Column("suburb", sa.String(), nullable=False),
        sa.Column("state", sa.String(), nullable=False),
        sa.Column("postcode", sa.String(length=10), nullable=False),
        sa.Column("country", sa.String(), server_default="Australia", nullable=False),
        sa.Column("is_primary", sa.Boolean(), server_default="false", nullable=False),
        sa.ForeignKeyConstraint(
            ["business_profile_id"], ["business_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_addresses_business_profile_id"),
        "addresses",
        ["business_profile_id"],
    )
    op.create_index(
        "ix_addresses_business_profile_type",
        "addresses",
        ["business_profile_id", "address_type"],
    )


def downgrade() -> None:
    op.drop_index("ix_addresses_business_profile_type", table_name="addresses")
    op.drop_index(op.f("ix_addresses_business_profile_id"), table_name="addresses")
    op.drop_table("addresses")
    address_type.drop(op.get_bind(), checkfirst=True)
