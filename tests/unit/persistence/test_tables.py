"""Unit tests for the table definitions."""

import pytest
from sqlalchemy import CheckConstraint

from agora.persistence.tables import comments_table, posts_table


def check_constraints(table) -> dict[str, str]:
    return {
        c.name: str(c.sqltext)
        for c in table.constraints
        if isinstance(c, CheckConstraint)
    }


class TestVoteStateConstraints:
    """The database enforces the vote set invariants on its own."""

    @pytest.mark.parametrize(
        "table, prefix", [(posts_table, "posts"), (comments_table, "comments")]
    )
    def test_vote_sets_are_disjoint(self, table, prefix):
        checks = check_constraints(table)

        assert checks[f"{prefix}_votes_disjoint"] == "NOT (upvoters && downvoters)"
        assert f"{prefix}_score_matches_votes" in checks

    def test_posts_reference_communities(self):
        [fk] = posts_table.c.community.foreign_keys

        assert fk.target_fullname == "communities.name"
