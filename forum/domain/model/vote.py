"""Vote entity and vote ledger.

A vote is a single user's up or down opinion on a votable node (a thread
or a reply). Each node owns its own vote set, holding at most one vote
per user. The ledger functions here are pure: they never mutate the vote
set they are given.
"""

from typing import Sequence

from pydantic import Field

from forum.domain.error import InvalidVoteTypeError
from forum.domain.model.common import AggregateModel, DomainModel
from forum.domain.value import UserId, VoteType


class Vote(DomainModel):
    """A user's vote on a thread or reply."""

    user_id: UserId
    type: VoteType


def net_score(votes: Sequence[Vote]) -> int:
    """Upvote count minus downvote count."""
    score = 0
    for vote in votes:
        if vote.type == VoteType.UPVOTE:
            score += 1
        elif vote.type == VoteType.DOWNVOTE:
            score -= 1
    return score


def apply_vote(
    votes: Sequence[Vote], user_id: UserId, desired_type: VoteType
) -> tuple[list[Vote], VoteType | None]:
    """Apply a user's vote request to a vote set.

    - No existing vote: the vote is added.
    - Existing vote of the same type: the vote is removed (toggled off).
    - Existing vote of the other type: the vote is switched in place.

    Args:
        votes: Current vote set of the node
        user_id: Voting user
        desired_type: Requested vote direction

    Returns:
        Tuple of (new vote set, user's resulting vote or None)

    Raises:
        InvalidVoteTypeError: If desired_type is not a VoteType
    """
    if not isinstance(desired_type, VoteType):
        raise InvalidVoteTypeError(desired_type)

    updated: list[Vote] = []
    resulting: VoteType | None = desired_type
    existing = False

    for vote in votes:
        if vote.user_id != user_id:
            updated.append(vote)
            continue

        existing = True
        if vote.type == desired_type:
            resulting = None
        else:
            updated.append(Vote(user_id=user_id, type=desired_type))

    if not existing:
        updated.append(Vote(user_id=user_id, type=desired_type))

    return updated, resulting


class Votable(AggregateModel):
    """Anything that owns a vote set: a thread or a reply."""

    votes: list[Vote] = Field(default_factory=list)

    @property
    def net_score(self) -> int:
        """Net score of this node's own votes."""
        return net_score(self.votes)

    def user_vote(self, user_id: UserId) -> VoteType | None:
        """Return the given user's current vote on this node, if any."""
        for vote in self.votes:
            if vote.user_id == user_id:
                return vote.type
        return None
