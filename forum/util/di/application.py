"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.reply import CreateReplyUseCase
from forum.application.usecase.thread import (
    CreateThreadUseCase,
    DeleteThreadUseCase,
    GetThreadUseCase,
    UpdateThreadUseCase,
)
from forum.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from forum.application.usecase.vote import CastVoteUseCase
from forum.domain.service import ThreadService, UserService, VoteService
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(
        self, thread_service: ThreadService
    ) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_update_thread_use_case(
        self, thread_service: ThreadService
    ) -> UpdateThreadUseCase:
        """Provide update thread use case."""
        return UpdateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_thread_use_case(
        self, thread_service: ThreadService, user_service: UserService
    ) -> DeleteThreadUseCase:
        """Provide delete thread use case."""
        return DeleteThreadUseCase(
            thread_service=thread_service, user_service=user_service
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self, thread_service: ThreadService
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(thread_service=thread_service)

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_profile_use_case(
        self, user_service: UserService, thread_service: ThreadService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service, thread_service=thread_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(user_service=user_service)
