"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyResponse, CreateReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyResponse",
    "CreateReplyUseCase",
]
