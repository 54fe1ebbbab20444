"""SQLAlchemy table definitions for Agora.

Core tables only; rows are mapped to the immutable domain models by hand
in ``mappers``. They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _vote_columns() -> list[Column]:
    """Vote state shared by every votable table."""
    return [
        Column(
            "upvoters",
            postgresql.ARRAY(UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        Column(
            "downvoters",
            postgresql.ARRAY(UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        Column("score", Integer, nullable=False, server_default="0"),
        # Bumped on every vote write; guards the compare-and-set
        Column("version", Integer, nullable=False, server_default="0"),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("handle", String(255), nullable=False, unique=True),
    Column("avatar_url", Text, nullable=True),
    Column("email", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("karma", Integer, nullable=False, server_default="0"),  # Can go negative
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_handle", users_table.c.handle)

# ============================================================================
# COMMUNITIES TABLE
# ============================================================================
communities_table = Table(
    "communities",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(50), nullable=False, unique=True),
    Column("display_name", String(100), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column(
        "created_by",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("member_count", Integer, nullable=False, server_default="0"),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("member_count >= 0", name="member_count_non_negative"),
    CheckConstraint("name ~ '^[a-z0-9_]+$'", name="community_name_format"),
)

Index("idx_communities_created_at", communities_table.c.created_at.desc())
Index("idx_communities_member_count", communities_table.c.member_count.desc())

community_members_table = Table(
    "community_members",
    metadata,
    Column(
        "community_id",
        UUID(as_uuid=True),
        ForeignKey("communities.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "user_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "joined_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_community_members_user_id", community_members_table.c.user_id)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", String(300), nullable=False),
    Column("text", Text, nullable=False),
    Column("url", Text, nullable=True),
    Column(
        "community",
        String(50),
        ForeignKey("communities.name", onupdate="CASCADE", name="fk_posts_community"),
        nullable=False,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_handle", String(255), nullable=False),  # Denormalized from users
    *_vote_columns(),
    Column("comment_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "score = cardinality(upvoters) - cardinality(downvoters)",
        name="posts_score_matches_votes",
    ),
    CheckConstraint("NOT (upvoters && downvoters)", name="posts_votes_disjoint"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_score", posts_table.c.score.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_community", posts_table.c.community)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "parent_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "author_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_handle", String(255), nullable=False),  # Denormalized from users
    Column("text", Text, nullable=False),
    Column("depth", Integer, nullable=False, server_default="0"),
    *_vote_columns(),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("depth >= 0", name="depth_non_negative"),
    CheckConstraint(
        "score = cardinality(upvoters) - cardinality(downvoters)",
        name="comments_score_matches_votes",
    ),
    CheckConstraint("NOT (upvoters && downvoters)", name="comments_votes_disjoint"),
)

Index("idx_comments_post_id", comments_table.c.post_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "recipient_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("kind", String(20), nullable=False),
    Column(
        "actor_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("actor_handle", String(255), nullable=False),  # Denormalized from users
    Column(
        "post_id",
        UUID(as_uuid=True),
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "comment_id",
        UUID(as_uuid=True),
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("post_title", String(300), nullable=True),
    Column("comment_excerpt", String(200), nullable=True),
    Column("message", Text, nullable=False),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "kind IN ('upvote', 'downvote', 'post_reply', 'comment_reply')",
        name="notification_kind_valid",
    ),
)

Index(
    "idx_notifications_recipient_created",
    notifications_table.c.recipient_id,
    notifications_table.c.created_at.desc(),
)
# Supports the duplicate check before insert
Index(
    "idx_notifications_dedup",
    notifications_table.c.recipient_id,
    notifications_table.c.kind,
    notifications_table.c.actor_id,
    notifications_table.c.post_id,
    notifications_table.c.created_at,
)
Index(
    "idx_notifications_unread",
    notifications_table.c.recipient_id,
    postgresql_where=notifications_table.c.is_read.is_(False),
)
