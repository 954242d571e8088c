"""Reply entity and reply tree traversal.

Replies form a tree of unlimited depth below a thread. Each reply owns
its children exclusively; there are no parent back-references, so a
reply is found by walking the tree from the thread's top-level replies.

Traversal uses an explicit stack instead of recursion so that very deep
discussions cannot exhaust the interpreter's call stack.
"""

from datetime import datetime
from typing import Iterator, Optional, Sequence

from pydantic import Field

from forum.domain.model.vote import Votable
from forum.domain.value import ReplyId, UserId


class Reply(Votable):
    """A reply to a thread or to another reply.

    Threading is structural: `children` holds direct replies in the order
    they were posted. Top-level replies of a thread have depth 0.
    """

    id: ReplyId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    children: list["Reply"] = Field(default_factory=list)
    is_edited: bool = False
    created_at: datetime = Field(default_factory=datetime.now)


def walk_replies(
    replies: Sequence[Reply], max_depth: Optional[int] = None
) -> Iterator[tuple[int, Optional[Reply], Reply]]:
    """Walk a reply tree depth-first in pre-order.

    Each reply is yielded before its children, and a reply's whole subtree
    is yielded before its next sibling.

    Args:
        replies: Top-level replies to walk
        max_depth: Deepest level to visit (None for unbounded)

    Yields:
        (depth, parent, reply) triples; parent is None at the top level
    """
    stack: list[tuple[int, Optional[Reply], Reply]] = [
        (0, None, reply) for reply in reversed(replies)
    ]
    while stack:
        depth, parent, reply = stack.pop()
        yield depth, parent, reply
        if max_depth is not None and depth >= max_depth:
            continue
        # Reversed so the first child is popped next
        stack.extend(
            (depth + 1, reply, child) for child in reversed(reply.children)
        )


def iter_replies(
    replies: Sequence[Reply], max_depth: Optional[int] = None
) -> Iterator[tuple[int, Reply]]:
    """Walk a reply tree in pre-order, yielding (depth, reply) pairs."""
    for depth, _, reply in walk_replies(replies, max_depth):
        yield depth, reply


def locate_reply_with_depth(
    replies: Sequence[Reply], reply_id: ReplyId, max_depth: Optional[int] = None
) -> Optional[tuple[Reply, int]]:
    """Find a reply and its depth in the tree.

    Args:
        replies: Top-level replies to search
        reply_id: Reply to find
        max_depth: Deepest level to search (None for unbounded)

    Returns:
        (reply, depth) for the first match in pre-order, None if absent
    """
    for depth, reply in iter_replies(replies, max_depth):
        if reply.id == reply_id:
            return reply, depth
    return None


def locate_reply(
    replies: Sequence[Reply], reply_id: ReplyId, max_depth: Optional[int] = None
) -> Optional[Reply]:
    """Find a reply anywhere in the tree.

    The returned reply is the live node inside the tree, so mutating it
    mutates the owning thread.

    Args:
        replies: Top-level replies to search
        reply_id: Reply to find
        max_depth: Deepest level to search (None for unbounded)

    Returns:
        The reply if found, None otherwise
    """
    found = locate_reply_with_depth(replies, reply_id, max_depth)
    return found[0] if found else None


def count_replies(replies: Sequence[Reply]) -> int:
    """Count every reply in the tree."""
    return sum(1 for _ in iter_replies(replies))
