"""Vote toggle engine.

Pure state machine for one user's vote on one item. It never touches
storage; ``VoteService`` loads the item, runs the transition and writes
the result back.

    prior      | requested up           | requested down
    -----------+------------------------+-----------------------
    neutral    | add to upvoters        | add to downvoters
    upvoted    | remove (toggle off)    | move to downvoters
    downvoted  | move to upvoters       | remove (toggle off)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from agora.domain.error import SelfVoteError
from agora.domain.model.votable import Votable
from agora.domain.value import UserId, VoteDirection

V = TypeVar("V", bound=Votable)


def contribution(direction: VoteDirection | None) -> int:
    """Score and karma contribution of a held vote (0 for no vote)."""
    return direction.contribution if direction is not None else 0


@dataclass(frozen=True)
class VoteTransition(Generic[V]):
    """Result of applying a vote.

    Attributes:
        content: The item with its new vote sets, score and version
        previous: Vote the actor held before
        current: Vote the actor holds now
        delta: Change in the author's karma
    """

    content: V
    previous: VoteDirection | None
    current: VoteDirection | None
    delta: int


def apply_vote(content: V, actor_id: UserId, direction: VoteDirection) -> VoteTransition[V]:
    """Apply a vote request to an item.

    Requesting the direction already held retracts the vote. Requesting the
    opposite direction switches it. The actor is removed from both sets before
    the new membership is added, so they can never end up in both.

    Args:
        content: The item as loaded from storage
        actor_id: User casting the vote
        direction: Requested direction

    Returns:
        The transition, with ``delta = contribution(current) - contribution(previous)``

    Raises:
        SelfVoteError: If the actor authored the item
    """
    if actor_id == content.author_id:
        raise SelfVoteError(content.votable_type.value, str(content.id))

    previous = content.vote_of(actor_id)
    current = None if previous is direction else direction

    upvoters = content.upvoters - {actor_id}
    downvoters = content.downvoters - {actor_id}
    if current is VoteDirection.UP:
        upvoters = upvoters | {actor_id}
    elif current is VoteDirection.DOWN:
        downvoters = downvoters | {actor_id}

    return VoteTransition(
        content=content.with_votes(frozenset(upvoters), frozenset(downvoters)),
        previous=previous,
        current=current,
        delta=contribution(current) - contribution(previous),
    )
