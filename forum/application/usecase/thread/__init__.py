"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .delete_thread import (
    DeleteThreadRequest,
    DeleteThreadResponse,
    DeleteThreadUseCase,
)
from .get_thread import GetThreadRequest, GetThreadResponse, GetThreadUseCase, ReplyItem
from .update_thread import (
    UpdateThreadRequest,
    UpdateThreadResponse,
    UpdateThreadUseCase,
)

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "DeleteThreadRequest",
    "DeleteThreadResponse",
    "DeleteThreadUseCase",
    "GetThreadRequest",
    "GetThreadResponse",
    "GetThreadUseCase",
    "ReplyItem",
    "UpdateThreadRequest",
    "UpdateThreadResponse",
    "UpdateThreadUseCase",
]
