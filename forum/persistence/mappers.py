"""Mappers for converting between database rows and domain models.

Votes and replies live in JSONB columns. They are dumped with
`model_dump(mode="json")` so ids and timestamps become JSON strings, and
validated back through the domain models on the way out.
"""

from typing import Any, Dict
from uuid import UUID

from pydantic import TypeAdapter

from forum.domain.model import Reply, Thread, User, Vote
from forum.domain.value import CategoryId, TagId, ThreadId, UserId, UserRole, Username

_votes_adapter = TypeAdapter(list[Vote])
_replies_adapter = TypeAdapter(list[Reply])


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        username=Username(row["username"]),
        email=row.get("email"),
        avatar_url=row.get("avatar_url"),
        bio=row.get("bio"),
        role=UserRole(row["role"]),
        reputation=row["reputation"],
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model with its votes and reply tree
    """
    return Thread(
        id=ThreadId(_as_uuid(row["id"])),
        author_id=UserId(_as_uuid(row["author_id"])),
        title=row["title"],
        content=row["content"],
        category_id=CategoryId(_as_uuid(row["category_id"])),
        tag_ids={TagId(_as_uuid(tag_id)) for tag_id in row.get("tag_ids") or []},
        votes=_votes_adapter.validate_python(row.get("votes") or []),
        replies=_replies_adapter.validate_python(row.get("replies") or []),
        views=row["views"],
        is_pinned=row["is_pinned"],
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict.

    Args:
        thread: Thread domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": thread.id,
        "author_id": thread.author_id,
        "title": thread.title,
        "content": thread.content,
        "category_id": thread.category_id,
        "tag_ids": sorted(str(tag_id) for tag_id in thread.tag_ids),
        "votes": _votes_adapter.dump_python(thread.votes, mode="json"),
        "replies": _replies_adapter.dump_python(thread.replies, mode="json"),
        "views": thread.views,
        "is_pinned": thread.is_pinned,
        "is_edited": thread.is_edited,
        "edited_at": thread.edited_at,
        "created_at": thread.created_at,
        "updated_at": thread.updated_at,
    }
