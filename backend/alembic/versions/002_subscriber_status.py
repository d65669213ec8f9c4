"""Subscriber status — ACTIVE / UNSUBSCRIBED lifecycle for newsletter subscribers.

Revision ID: 002_subscriber_status
Revises: 001_initial
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_subscriber_status"
down_revision: Union[str, None] = "001_initial"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        "newsletter_subscribers",
        sa.Column("status", sa.String(20), nullable=False, server_default="ACTIVE"),
    )
    op.create_index(
        "ix_newsletter_subscribers_status", "newsletter_subscribers", ["status"],
    )


def downgrade() -> None:
    op.drop_index("ix_newsletter_subscribers_status", "newsletter_subscribers")
    op.drop_column("newsletter_subscribers", "status")
