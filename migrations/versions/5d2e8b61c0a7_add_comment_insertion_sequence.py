"""add comment insertion sequence

Comments created in the same instant share a created_at value; listings
break those ties by insertion order using this identity column.

Revision ID: 5d2e8b61c0a7
Revises: 3f1c2a9d7b40
Create Date: 2026-10-17 09:41:12.803114

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5d2e8b61c0a7"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Existing rows are numbered as the column is added
    op.add_column(
        "comments",
        sa.Column("seq", sa.BigInteger(), sa.Identity(always=True), nullable=False),
    )
    op.create_unique_constraint("uq_comments_seq", "comments", ["seq"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_constraint("uq_comments_seq", "comments", type_="unique")
    op.drop_column("comments", "seq")
