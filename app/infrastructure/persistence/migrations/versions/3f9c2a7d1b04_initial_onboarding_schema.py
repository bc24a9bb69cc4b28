"""initial_onboarding_schema

Revision ID: 3f9c2a7d1b04
Revises:
Create Date: 2026-10-18 09:12:44.120583

"""

from collections.abc import Sequence
from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

onboarding_section = postgresql.ENUM(
    "basic",
    "farm",
    "financial",
    "compliance",
    "storage",
    "communications",
    name="onboarding_section",
    create_type=False,
)
document_type = postgresql.ENUM(
    "abn_certificate",
    "acn_certificate",
    "gst_registration_notice",
    "chemical_handling_licence",
    "machinery_operator_licence",
    "food_safety_cert",
    "water_licence",
    "bank_feed_authority",
    "bas_statement",
    "public_liability_policy",
    "workers_comp_policy",
    "vehicle_insurance_policy",
    "crop_or_livestock_policy",
    "vehicle_registration_certificate",
    "equipment_lease_agreement",
    "land_lease_agreement",
    "service_agreement",
    "privacy_consent",
    "direct_debit_authority",
    name="document_type",
    create_type=False,
)
agreement_type = postgresql.ENUM(
    "service_agreement",
    "privacy_consent",
    "direct_debit",
    "terms_and_conditions",
    name="agreement_type",
    create_type=False,
)


def upgrade() -> None:
    """Upgrade schema."""
    bind = op.get_bind()
    onboarding_section.create(bind, checkfirst=True)
    document_type.create(bind, checkfirst=True)
    agreement_type.create(bind, checkfirst=True)

    op.create_table(
        "business_profiles",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("user_id", sa.String(), nullable=False),
        sa.Column("full_name", sa.String(), nullable=False),
        sa.Column("trading_name", sa.String(), nullable=False),
        sa.Column("abn", sa.String(length=11), nullable=False),
        sa.Column("acn", sa.String(length=9), nullable=True),
        sa.Column("gst_registered", sa.Boolean(), nullable=False),
        sa.Column("business_structure", sa.String(), nullable=True),
        sa.Column("main_contact", postgresql.JSONB(), nullable=False),
        sa.Column("contact_emails", postgresql.JSONB(), nullable=False),
        sa.Column("contact_phones", postgresql.JSONB(), nullable=False),
        sa.Column("onboarding_complete_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_business_profiles_user_id"),
        "business_profiles",
        ["user_id"],
        unique=True,
    )

    op.create_table(
        "business_onboarding_sections",
        sa.Column("business_profile_id", sa.String(), nullable=False),
        sa.Column("section_name", onboarding_section, nullable=False),
        sa.Column("data", postgresql.JSONB(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["business_profile_id"], ["business_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("business_profile_id", "section_name"),
    )

    op.create_table(
        "onboarding_documents",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("business_profile_id", sa.String(), nullable=False),
        sa.Column("section_name", onboarding_section, nullable=True),
        sa.Column("doc_type", document_type, nullable=False),
        sa.Column("file_url", sa.String(), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=True),
        sa.Column(
            "uploaded_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.ForeignKeyConstraint(
            ["business_profile_id"], ["business_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_onboarding_documents_business_profile_id"),
        "onboarding_documents",
        ["business_profile_id"],
    )
    op.create_index(
        "ix_onboarding_documents_business_profile_section",
        "onboarding_documents",
        ["business_profile_id", "section_name"],
    )

    op.create_table(
        "signed_agreements",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("business_profile_id", sa.String(), nullable=False),
        sa.Column("agreement", agreement_type, nullable=False),
        sa.Column("signed_by_user", sa.String(), nullable=False),
        sa.Column("signed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("file_url", sa.String(), nullable=True),
        sa.ForeignKeyConstraint(
            ["business_profile_id"], ["business_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "business_profile_id",
            "agreement",
            name="uq_signed_agreements_business_profile_agreement",
        ),
    )
    op.create_index(
        op.f("ix_signed_agreements_business_profile_id"),
        "signed_agreements",
        ["business_profile_id"],
    )

    op.create_table(
        "onboarding_progress",
        sa.Column("business_profile_id", sa.String(), nullable=False),
        sa.Column("current_step", onboarding_section, nullable=False),
        sa.Column("completed_steps", postgresql.ARRAY(onboarding_section), nullable=False),
        sa.ForeignKeyConstraint(
            ["business_profile_id"], ["business_profiles.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("business_profile_id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("onboarding_progress")
    op.drop_index(
        op.f("ix_signed_agreements_business_profile_id"), table_name="signed_agreements"
    )
    op.drop_table("signed_agreements")
    op.drop_index(
        "ix_onboarding_documents_business_profile_section",
        table_name="onboarding_documents",
    )
    op.drop_index(
        op.f("ix_onboarding_documents_business_profile_id"),
        table_name="onboarding_documents",
    )
    op.drop_table("onboarding_documents")
    op.drop_table("business_onboarding_sections")
    op.drop_index(op.f("ix_business_profiles_user_id"), table_name="business_profiles")
    op.drop_table("business_profiles")

    bind = op.get_bind()
    agreement_type.drop(bind, checkfirst=True)
    document_type.drop(bind, checkfirst=True)
    onboarding_section.drop(bind, checkfirst=True)
