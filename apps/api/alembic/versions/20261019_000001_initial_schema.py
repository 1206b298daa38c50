"""create initial schema

Revision ID: 20261019_000001
Revises:
Create Date: 2026-10-19 00:00:01.000000
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "20261019_000001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "organizations",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("plan_tier", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=True),
        sa.Column("org_id", sa.String(), nullable=True),
        sa.Column("role", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=False)
    op.create_index(op.f("ix_users_org_id"), "users", ["org_id"], unique=False)

    op.create_table(
        "credits_wallet",
        sa.Column("org_id", sa.String(), nullable=False),
        sa.Column("current_credits", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("credits_used", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("plan_allocation", sa.Integer(), nullable=True),
        sa.Column("last_topup", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_reset", sa.DateTime(timezone=True), nullable=True),
        sa.Column("stripe_customer_id", sa.String(), nullable=True),
        sa.CheckConstraint("current_credits >= 0", name="ck_credits_wallet_non_negative"),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("org_id"),
    )

    op.create_table(
        "usage_events",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("org_id", sa.String(), nullable=False),
        sa.Column("feature", sa.String(), nullable=False),
        sa.Column("credits_cost", sa.Integer(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_usage_events_org_id"), "usage_events", ["org_id"], unique=False)
    op.create_index(op.f("ix_usage_events_created_at"), "usage_events", ["created_at"], unique=False)

    op.create_table(
        "trends",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("platform", sa.String(), nullable=False),
        sa.Column("source_video_url", sa.String(), nullable=False),
        sa.Column("category", sa.String(), nullable=True),
        sa.Column("title", sa.String(), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("comments", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("engagement_score", sa.Float(), nullable=False, server_default="0"),
        sa.Column("thumbnail_url", sa.String(), nullable=True),
        sa.Column("brand_notes", sa.Text(), nullable=True),
        sa.Column("captured_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("platform", "source_video_url", name="uq_trends_platform_source_video_url"),
    )
    op.create_index(op.f("ix_trends_platform"), "trends", ["platform"], unique=False)
    op.create_index(op.f("ix_trends_category"), "trends", ["category"], unique=False)

    op.create_table(
        "brands",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("org_id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("brand_domain", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_brands_org_id"), "brands", ["org_id"], unique=False)

    op.create_table(
        "video_jobs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("org_id", sa.String(), nullable=False),
        sa.Column("brand_id", sa.String(), nullable=True),
        sa.Column("trend_id", sa.String(), nullable=True),
        sa.Column("status", sa.String(), nullable=False, server_default="queued"),
        sa.Column("compliance_status", sa.String(), nullable=False, server_default="unchecked"),
        sa.Column("script_approved", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("post_targets", sa.JSON(), nullable=False),
        sa.Column("target_vertical", sa.String(), nullable=True),
        sa.Column("brand_label", sa.String(), nullable=True),
        sa.Column("campaign_type", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("CURRENT_TIMESTAMP"), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.ForeignKeyConstraint(["org_id"], ["organizations.id"]),
        sa.ForeignKeyConstraint(["brand_id"], ["brands.id"]),
        sa.ForeignKeyConstraint(["trend_id"], ["trends.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_video_jobs_org_id"), "video_jobs", ["org_id"], unique=False)
    op.create_index(op.f("ix_video_jobs_brand_id"), "video_jobs", ["brand_id"], unique=False)
    op.create_index(op.f("ix_video_jobs_trend_id"), "video_jobs", ["trend_id"], unique=False)
    op.create_index(op.f("ix_video_jobs_status"), "video_jobs", ["status"], unique=False)
    op.create_index(op.f("ix_video_jobs_created_at"), "video_jobs", ["created_at"], unique=False)

    op.create_table(
        "platform_virality_profiles",
        sa.Column("platform", sa.String(), nullable=False),
        sa.Column("hook_window_seconds", sa.Integer(), nullable=True),
        sa.Column("ideal_length_seconds", sa.Integer(), nullable=True),
        sa.Column("hashtag_strategy", sa.JSON(), nullable=True),
        sa.Column("caption_style", sa.String(), nullable=True),
        sa.Column("engagement_triggers", sa.JSON(), nullable=True),
        sa.Column("audio_rules", sa.JSON(), nullable=True),
        sa.Column("visual_rules", sa.JSON(), nullable=True),
        sa.Column("update_frequency_days", sa.Integer(), nullable=True),
        sa.Column("last_synced", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("platform"),
    )


def downgrade() -> None:
    op.drop_table("platform_virality_profiles")
    op.drop_index(op.f("ix_video_jobs_created_at"), table_name="video_jobs")
    op.drop_index(op.f("ix_video_jobs_status"), table_name="video_jobs")
    op.drop_index(op.f("ix_video_jobs_trend_id"), table_name="video_jobs")
    op.drop_index(op.f("ix_video_jobs_brand_id"), table_name="video_jobs")
    op.drop_index(op.f("ix_video_jobs_org_id"), table_name="video_jobs")
    op.drop_table("video_jobs")
    op.drop_index(op.f("ix_brands_org_id"), table_name="brands")
    op.drop_table("brands")
    op.drop_index(op.f("ix_trends_category"), table_name="trends")
    op.drop_index(op.f("ix_trends_platform"), table_name="trends")
    op.drop_table("trends")
    op.drop_index(op.f("ix_usage_events_created_at"), table_name="usage_events")
    op.drop_index(op.f("ix_usage_events_org_id"), table_name="usage_events")
    op.drop_table("usage_events")
    op.drop_table("credits_wallet")
    op.drop_index(op.f("ix_users_org_id"), table_name="users")
    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
    op.drop_table("organizations")
