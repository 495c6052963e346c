"""Domain layer DI providers."""

from dishka import Scope, provide

from juicebox.config import AuthSettings
from juicebox.domain.repository import PostRepository, TagRepository, UserRepository
from juicebox.domain.service import (
    AuthService,
    JWTService,
    PostService,
    TagService,
    UserService,
)
from juicebox.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_tag_service(self, tag_repository: TagRepository) -> TagService:
        """Provide tag domain service."""
        return TagService(tag_repository=tag_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        tag_service: TagService,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            user_repository=user_repository,
            tag_service=tag_service,
        )

    @provide
    def get_user_service(
        self,
        user_repository: UserRepository,
        post_service: PostService,
        auth_settings: AuthSettings,
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository,
            post_service=post_service,
            auth_settings=auth_settings,
        )

    @provide
    def get_auth_service(self, user_service: UserService) -> AuthService:
        """Provide password authentication domain service."""
        return AuthService(user_service=user_service)
