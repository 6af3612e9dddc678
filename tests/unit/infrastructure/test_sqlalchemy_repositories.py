"""
Tests des repositories SQLAlchemy sur une base SQLite fichier.
"""

import asyncio
from datetime import datetime
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from src.domain.entities import Task, User
from src.infrastructure.persistence import (
    DatabaseManager,
    PersistenceError,
    SqlAlchemyTaskRepository,
    SqlAlchemyUserRepository,
)


@pytest.fixture
def db(sqlite_url):
    manager = DatabaseManager(sqlite_url)
    manager.create_tables()
    yield manager
    manager.dispose()


class TestDatabaseManager:

    def test_session_rolls_back_on_error(self, db):
        from src.infrastructure.persistence.models import UserModel

        with pytest.raises(RuntimeError):
            with db.get_session() as session:
                session.add(
                    UserModel(
                        id="u1", position=1, name="Alice", email="a@b.co",
                        password="password1", role="User", created=datetime.now(),
                    )
                )
                raise RuntimeError("boom")

        with db.get_session() as session:
            assert session.query(UserModel).count() == 0


class TestSqlAlchemyUserRepository:
    """Tests pour SqlAlchemyUserRepository."""

    @pytest.mark.asyncio
    async def test_empty(self, db):
        assert await SqlAlchemyUserRepository(db).list() == []

    @pytest.mark.asyncio
    async def test_roundtrip_preserves_fields(self, db):
        repo = SqlAlchemyUserRepository(db)
        user = User("Alice", "alice@test.com", "password1", "Admin")

        await repo.save(user)
        [loaded] = await repo.list()

        assert loaded == user
        assert loaded.name == "Alice"
        assert loaded.password == "password1"
        assert loaded.role == "Admin"
        assert loaded.created == user.created
        assert loaded.updated is None

    @pytest.mark.asyncio
    async def test_storage_order_and_upsert(self, db):
        repo = SqlAlchemyUserRepository(db)
        alice = User("Alice", "alice@test.com", "password1", "User")
        bob = User("Bob", "bob@test.com", "password2", "User")
        await repo.save(alice)
        await repo.save(bob)

        alice.name = "Alicia"
        await repo.save(alice)

        users = await repo.list()
        assert [u.name for u in users] == ["Alicia", "Bob"]
        assert users[0].updated is not None

    @pytest.mark.asyncio
    async def test_data_survives_new_manager(self, db, sqlite_url):
        await SqlAlchemyUserRepository(db).save(
            User("Alice", "alice@test.com", "password1", "User")
        )

        other = DatabaseManager(sqlite_url)
        try:
            users = await SqlAlchemyUserRepository(other).list()
        finally:
            other.dispose()
        assert len(users) == 1

    @pytest.mark.asyncio
    async def test_sqlalchemy_error_wrapped(self, db):
        repo = SqlAlchemyUserRepository(db)
        error = OperationalError("SELECT 1", {}, Exception("database is locked"))

        with patch.object(repo, "_list_sync", side_effect=error):
            with pytest.raises(PersistenceError) as exc_info:
                await repo.list()

        assert exc_info.value.operation == "list users"
        assert exc_info.value.cause is error

    @pytest.mark.asyncio
    async def test_missing_table_wrapped(self, sqlite_url):
        """Sans create_tables(), l'erreur driver devient PersistenceError."""
        db = DatabaseManager(sqlite_url)
        try:
            with pytest.raises(PersistenceError):
                await SqlAlchemyUserRepository(db).save(
                    User("Alice", "alice@test.com", "password1", "User")
                )
        finally:
            db.dispose()


class TestSqlAlchemyTaskRepository:
    """Tests pour SqlAlchemyTaskRepository."""

    @pytest.mark.asyncio
    async def test_roundtrip(self, db):
        repo = SqlAlchemyTaskRepository(db)
        task = Task(
            "Design", "Maquettes", "TODO", "u1",
            assignee_id="u2",
            start_date=datetime(2024, 1, 1),
            end_date=datetime(2024, 1, 31),
        )

        await repo.save(task)
        [loaded] = await repo.list()

        assert loaded.id == task.id
        assert loaded.status == "TODO"
        assert loaded.assignee_id == "u2"
        assert loaded.end_date == datetime(2024, 1, 31)

    @pytest.mark.asyncio
    async def test_upsert_keeps_position(self, db):
        repo = SqlAlchemyTaskRepository(db)
        first = Task("A", "d", "TODO", "u1")
        second = Task("B", "d", "TODO", "u1")
        await repo.save(first)
        await repo.save(second)

        first.status = "DONE"
        await repo.save(first)

        tasks = await repo.list()
        assert [t.title for t in tasks] == ["A", "B"]
        assert tasks[0].status == "DONE"


class TestInMemorySqlite:
    """Base SQLite en memoire partagee entre les threads des adapters."""

    @pytest.mark.asyncio
    async def test_save_then_list(self):
        db = DatabaseManager("sqlite://")
        db.create_tables()
        try:
            users = SqlAlchemyUserRepository(db)
            tasks = SqlAlchemyTaskRepository(db)
            alice = User("Alice", "alice@test.com", "password1", "User")
            task = Task("Design", "Maquettes", "TODO", alice.id)

            await users.save(alice)
            await tasks.save(task)

            assert await users.list() == [alice]
            assert await tasks.list() == [task]
        finally:
            db.dispose()

    @pytest.mark.asyncio
    async def test_container_with_memory_url(self):
        from src.application.use_cases.users import CreateUserInput
        from src.infrastructure.config import Settings
        from src.infrastructure.container import Container

        settings = Settings(
            _env_file=None, repository_backend="sqlalchemy", database_url="sqlite://"
        )
        container = Container.create(settings)
        try:
            output = await container.create_user.execute(
                CreateUserInput("John Doe", "email@test.com", "12345678", "Admin")
            )
            listed = await container.list_users.execute()
        finally:
            container.shutdown()

        assert [u.id for u in listed.users] == [output.id]


class TestConcurrentSaves:
    """Sauvegardes concurrentes: positions distinctes, upsert sans doublon."""

    @pytest.mark.asyncio
    async def test_concurrent_new_users_get_distinct_positions(self, db):
        from src.infrastructure.persistence.models import UserModel

        repo = SqlAlchemyUserRepository(db)
        users = [
            User(f"User {i}", f"user{i}@test.com", "password1", "User")
            for i in range(10)
        ]

        await asyncio.gather(*(repo.save(u) for u in users))

        with db.get_session() as session:
            positions = [p for (p,) in session.query(UserModel.position).all()]
        assert sorted(positions) == list(range(1, 11))
        assert len(await repo.list()) == 10

    @pytest.mark.asyncio
    async def test_concurrent_saves_of_same_new_task(self, db):
        repo = SqlAlchemyTaskRepository(db)
        task = Task("Design", "Maquettes", "TODO", "u1")

        await asyncio.gather(repo.save(task), repo.save(task), repo.save(task))

        assert [t.id for t in await repo.list()] == [task.id]
