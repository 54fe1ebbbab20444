"""communities

Add communities and their memberships, and tighten vote state:
- Communities (unique lowercase name, member count kept with memberships)
- Community members (one row per user per community)
- Posts reference an existing community by name; communities already used
  by posts are backfilled, owned by the author of their oldest post
- Upvoter and downvoter arrays on posts and comments may not overlap

Revision ID: 8d4e6b1f0c27
Revises: 3f1c2a9d7b40
Create Date: 2026-10-18 15:41:07.529813

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "8d4e6b1f0c27"
down_revision: Union[str, Sequence[str], None] = "3f1c2a9d7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COMMUNITIES table
    # ========================================================================
    op.create_table(
        "communities",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("created_by", sa.UUID(), nullable=False),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name", name="uq_communities_name"),
        sa.CheckConstraint("member_count >= 0", name="member_count_non_negative"),
        sa.CheckConstraint("name ~ '^[a-z0-9_]+$'", name="community_name_format"),
    )
    op.create_index(
        "idx_communities_created_at", "communities", [sa.text("created_at DESC")]
    )
    op.create_index(
        "idx_communities_member_count", "communities", [sa.text("member_count DESC")]
    )

    # ========================================================================
    # COMMUNITY_MEMBERS table
    # ========================================================================
    op.create_table(
        "community_members",
        sa.Column("community_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "joined_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["community_id"], ["communities.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("community_id", "user_id"),
    )
    op.create_index("idx_community_members_user_id", "community_members", ["user_id"])

    # Backfill communities referenced by existing posts
    op.execute(
        """
        INSERT INTO communities (id, name, display_name, created_by, member_count)
        SELECT gen_random_uuid(), community, community,
               (array_agg(author_id ORDER BY created_at))[1], 1
        FROM posts
        GROUP BY community
        """
    )
    op.execute(
        """
        INSERT INTO community_members (community_id, user_id)
        SELECT id, created_by FROM communities
        """
    )

    op.create_foreign_key(
        "fk_posts_community",
        "posts",
        "communities",
        ["community"],
        ["name"],
        onupdate="CASCADE",
    )

    # ========================================================================
    # Vote sets are disjoint
    # ========================================================================
    op.create_check_constraint(
        "posts_votes_disjoint", "posts", "NOT (upvoters && downvoters)"
    )
    op.create_check_constraint(
        "comments_votes_disjoint", "comments", "NOT (upvoters && downvoters)"
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_constraint("comments_votes_disjoint", "comments", type_="check")
    op.drop_constraint("posts_votes_disjoint", "posts", type_="check")
    op.drop_constraint("fk_posts_community", "posts", type_="foreignkey")
    op.drop_table("community_members")
    op.drop_table("communities")
