"""Thread aggregate root.

A thread owns its own vote set and the tree of replies posted under it.
It is always loaded, mutated and persisted as a whole.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from forum.domain.model.reply import Reply, count_replies
from forum.domain.model.vote import Votable
from forum.domain.value import CategoryId, TagId, ThreadId, UserId

DEFAULT_REPUTATION_PER_VOTE = 10


def reputation_from_score(
    score: int, points_per_vote: int = DEFAULT_REPUTATION_PER_VOTE
) -> int:
    """Map a thread's net score to its author's reputation (floored at 0)."""
    return max(0, score * points_per_vote)


class Thread(Votable):
    """Thread aggregate root.

    Business rules:
    - Title 5-200 characters, content 10-10000 characters
    - At most 5 tags
    - Only the thread's own votes feed its author's reputation;
      reply votes stay on the replies
    """

    id: ThreadId
    author_id: UserId
    title: str = Field(min_length=5, max_length=200)
    content: str = Field(min_length=10, max_length=10000)
    category_id: CategoryId
    tag_ids: set[TagId] = Field(default_factory=set, max_length=5)
    replies: list[Reply] = Field(default_factory=list)
    views: int = Field(default=0, ge=0)
    is_pinned: bool = False
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def reply_count(self) -> int:
        """Number of replies at every depth."""
        return count_replies(self.replies)

    def author_reputation(
        self, points_per_vote: int = DEFAULT_REPUTATION_PER_VOTE
    ) -> int:
        """Reputation this thread's votes give its author.

        Recomputed from the full vote set every time, never adjusted
        incrementally.
        """
        return reputation_from_score(self.net_score, points_per_vote)
