"""
Unit tests for the DI container wiring.
"""
import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from users_api.application.use_cases.user import (
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersUseCase,
)
from users_api.di.base_container import BaseContainer
from users_api.di.container import DIContainer
from users_api.domain.repositories.user_repository import UserRepository
from users_api.infrastructure.db.sqlalchemy_user_repository import SqlAlchemyUserRepository


@pytest.fixture
def container():
    return DIContainer(create_async_engine("sqlite+aiosqlite:///:memory:"))


class TestDIContainer:
    """Tests for DIContainer"""

    def test_repository_is_relational_singleton(self, container):
        repo = container.get(UserRepository)
        assert isinstance(repo, SqlAlchemyUserRepository)
        assert container.get(UserRepository) is repo
        assert repo.engine is container.get("engine")

    @pytest.mark.parametrize(
        "use_case_class",
        [CreateUserUseCase, GetUserUseCase, ListUsersUseCase, DeleteUserUseCase],
    )
    def test_use_cases_share_repository(self, container, use_case_class):
        first = container.get(use_case_class)
        second = container.get(use_case_class)
        assert isinstance(first, use_case_class)
        assert first is not second
        assert first.user_repository is container.get(UserRepository)


class TestBaseContainer:
    """Tests for BaseContainer"""

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError, match="No dependency registered"):
            BaseContainer().get(UserRepository)

    def test_factory_called_per_lookup(self):
        container = BaseContainer()
        container.register_factory("counter", lambda: object())
        assert container.get("counter") is not container.get("counter")
