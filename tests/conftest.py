"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire
import pytest

from forum.domain.model import Reply, Thread, User, Vote
from forum.domain.value import (
    CategoryId,
    ReplyId,
    ThreadId,
    UserId,
    Username,
    VoteType,
)

# Keep telemetry local; spans still run so instrumented code paths are exercised
logfire.configure(send_to_logfire=False, console=False)


def make_user(username: str = "alice", reputation: int = 0, **kwargs) -> User:
    """Build a user with sensible defaults."""
    return User(
        id=kwargs.pop("id", UserId(uuid4())),
        username=Username(username),
        reputation=reputation,
        **kwargs,
    )


def make_reply(
    content: str = "Interesting point",
    children: list[Reply] | None = None,
    votes: list[Vote] | None = None,
    **kwargs,
) -> Reply:
    """Build a reply with sensible defaults."""
    return Reply(
        id=kwargs.pop("id", ReplyId(uuid4())),
        author_id=kwargs.pop("author_id", UserId(uuid4())),
        content=content,
        children=children or [],
        votes=votes or [],
        **kwargs,
    )


def make_thread(
    author_id: UserId | None = None,
    replies: list[Reply] | None = None,
    votes: list[Vote] | None = None,
    **kwargs,
) -> Thread:
    """Build a thread with sensible defaults."""
    now = datetime.now()
    return Thread(
        id=kwargs.pop("id", ThreadId(uuid4())),
        author_id=author_id or UserId(uuid4()),
        title=kwargs.pop("title", "Thoughts on nested replies"),
        content=kwargs.pop("content", "How deep should a discussion go?"),
        category_id=kwargs.pop("category_id", CategoryId(uuid4())),
        replies=replies or [],
        votes=votes or [],
        created_at=kwargs.pop("created_at", now),
        updated_at=kwargs.pop("updated_at", now),
        **kwargs,
    )


def up(user_id: UserId) -> Vote:
    """Upvote by the given user."""
    return Vote(user_id=user_id, type=VoteType.UPVOTE)


def down(user_id: UserId) -> Vote:
    """Downvote by the given user."""
    return Vote(user_id=user_id, type=VoteType.DOWNVOTE)


@pytest.fixture
def reply_tree() -> tuple[list[Reply], dict[str, Reply]]:
    """Reply tree A -> [B, C], C -> [D].

    Returns the top-level replies and the nodes by letter.
    """
    d = make_reply("D")
    b = make_reply("B")
    c = make_reply("C", children=[d])
    a = make_reply("A", children=[b, c])
    return [a], {"A": a, "B": b, "C": c, "D": d}


def new_thread_payload(**overrides) -> dict:
    """Request body for POST /threads."""
    payload = {
        "title": "Nested replies in practice",
        "content": "How deep do your discussions usually go?",
        "category_id": str(uuid4()),
        "tag_ids": [str(uuid4())],
    }
    payload.update(overrides)
    return payload
