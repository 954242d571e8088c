"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .reputation_service import ReputationService
from .thread_lock import ThreadLockRegistry
from .thread_service import ThreadService
from .user_service import UserService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "JWTService",
    "ReputationService",
    "Service",
    "ThreadLockRegistry",
    "ThreadService",
    "UserService",
    "VoteOutcome",
    "VoteService",
]
