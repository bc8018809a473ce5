"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

In Clean Architecture, the composition root:
1. Lives in the outermost layer (presentation/infrastructure)
2. Creates concrete implementations
3. Injects them into abstractions
4. Never imported by inner layers

Nothing is held in module globals. ``build_user_service`` is called once
by ``create_app`` and the result is kept on ``app.state``; endpoints reach
it through ``get_user_service``.
"""

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from user_management.application.services.user_service import UserService
from user_management.infrastructure.repositories.user_repository_impl import UserRepository


def build_user_service(session_factory: async_sessionmaker[AsyncSession]) -> UserService:
    """
    Wire the SQLAlchemy repository into a UserService.

    Dependency Graph:
        create_app()
            → create_database_engine(settings) → create_session_factory(engine)
                → UserRepository(session_factory)
                    → UserService(repository)

    Args:
        session_factory: Session factory bound to the application's engine

    Returns:
        UserService instance with all dependencies injected
    """
    return UserService(UserRepository(session_factory))


def get_user_service(request: Request) -> UserService:
    """
    Dependency that provides the application's UserService.

    Usage:
        @router.post("/users")
        async def create_user(
            dto: CreateUserDTO,
            service: UserService = Depends(get_user_service)
        ):
            ...

    Note:
        In tests, override it with a service built on a fake repository:

        app.dependency_overrides[get_user_service] = lambda: UserService(FakeUserRepository())
    """
    return request.app.state.user_service
