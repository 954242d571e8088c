"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, VotingSettings
from forum.domain.repository import ThreadRepository, UserRepository
from forum.domain.service import (
    JWTService,
    ReputationService,
    ThreadLockRegistry,
    ThreadService,
    UserService,
    VoteService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    The thread lock registry is the exception: it must be shared by every
    request, so it lives for the whole application.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_thread_locks(self, voting_settings: VotingSettings) -> ThreadLockRegistry:
        """Provide the application-wide per-thread lock registry."""
        return ThreadLockRegistry(enabled=voting_settings.serialize_thread_writes)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_reputation_service(
        self, user_repository: UserRepository, voting_settings: VotingSettings
    ) -> ReputationService:
        """Provide reputation domain service."""
        return ReputationService(
            user_repository=user_repository, voting_settings=voting_settings
        )

    @provide
    def get_thread_service(
        self,
        thread_repository: ThreadRepository,
        thread_locks: ThreadLockRegistry,
        voting_settings: VotingSettings,
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(
            thread_repository=thread_repository,
            thread_locks=thread_locks,
            voting_settings=voting_settings,
        )

    @provide
    def get_vote_service(
        self,
        thread_repository: ThreadRepository,
        reputation_service: ReputationService,
        thread_locks: ThreadLockRegistry,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            thread_repository=thread_repository,
            reputation_service=reputation_service,
            thread_locks=thread_locks,
            voting_settings=voting_settings,
        )
