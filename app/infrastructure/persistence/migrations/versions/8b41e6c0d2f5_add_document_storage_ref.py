"""add onboarding_documents.storage_ref

Revision ID: 8b41e6c0d2f5
Revises: 3f9c2a7d1b04
Create Date: 2026-10-19

Records the file store key next to the public URL so the orphaned-upload
sweep matches on keys, not on URLs that depend on the public base URL.
Existing rows are backfilled from the "{business_profile_id}/..." tail of
file_url.
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "8b41e6c0d2f5"
down_revision: Union[str, Sequence[str], None] = "3f9c2a7d1b04"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "onboarding_documents",
        sa.Column("storage_ref", sa.String(), nullable=True),
    )
    op.execute(
        """
        UPDATE onboarding_documents
        SET storage_ref = business_profile_id || '/'
            || split_part(file_url, '/' || business_profile_id || '/', 2)
        WHERE storage_ref IS NULL
        """
    )
    op.alter_column("onboarding_documents", "storage_ref", nullable=False)
    op.create_unique_constraint(
        "uq_onboarding_documents_storage_ref",
        "onboarding_documents",
        ["storage_ref"],
    )


def downgrade() -> None:
    op.drop_constraint(
        "uq_onboarding_documents_storage_ref", "onboarding_documents", type_="unique"
    )
    op.drop_column("onboarding_documents", "storage_ref")
