"""
Tests unitaires pour les Entites du domaine.
"""

from datetime import datetime

import pytest

from src.domain.entities import DEFAULT_STATUS, Project, Task, User
from src.domain.exceptions import (
    DuplicateTaskError,
    FieldValidationError,
    InvalidDescriptionError,
    InvalidEmailError,
    InvalidIdError,
    InvalidNameError,
    InvalidOwnerIdError,
    InvalidPasswordError,
    InvalidRoleError,
    InvalidStatusError,
    InvalidTitleError,
    TaskNotFoundError,
)


def _task(title="Task", status="TODO", owner_id="u1", **kwargs) -> Task:
    return Task(title, "description", status, owner_id, **kwargs)


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - User
# ═══════════════════════════════════════════════════════════════════════════════

class TestUser:
    """Tests pour l'entite User."""

    def test_create_user(self, sample_user):
        """Test creation d'un User."""
        assert sample_user.id
        assert sample_user.name == "John Doe"
        assert sample_user.email == "email@test.com"
        assert sample_user.password == "12345678"
        assert sample_user.role == "Admin"
        assert sample_user.is_admin
        assert sample_user.updated is None

    def test_generated_ids_are_unique(self):
        """Deux users sans id recoivent des ids differents."""
        a = User("Alice", "a@b.co", "password1", "User")
        b = User("Alice", "a@b.co", "password1", "User")
        assert a.id != b.id
        assert a != b

    def test_explicit_id_and_timestamps(self):
        """id, created et updated fournis sont conserves."""
        created = datetime(2024, 1, 1)
        user = User("Alice", "a@b.co", "password1", "User", id="u1", created=created)
        assert user.id == "u1"
        assert user.created == created
        assert not user.is_admin

    def test_rehydrated_updated_never_precedes_created(self):
        """Un updated anterieur a created est ramene a created."""
        user = User(
            "Alice", "a@b.co", "password1", "User",
            created=datetime(2024, 1, 2),
            updated=datetime(2024, 1, 1),
        )
        assert user.updated == user.created

    def test_rehydrated_updated_kept_when_later(self):
        updated = datetime(2024, 1, 3)
        user = User(
            "Alice", "a@b.co", "password1", "User",
            created=datetime(2024, 1, 2),
            updated=updated,
        )
        assert user.updated == updated

    def test_empty_id_rejected(self):
        with pytest.raises(InvalidIdError):
            User("Alice", "a@b.co", "password1", "User", id="")

    @pytest.mark.parametrize("email", ["a@b.co", "john.doe@mail.example.org"])
    def test_valid_emails(self, email):
        assert User.is_valid_email(email)

    @pytest.mark.parametrize("email", ["a@b", "plainstring", "a@b.", "a b@c.de", ""])
    def test_invalid_emails(self, email):
        assert not User.is_valid_email(email)
        with pytest.raises(InvalidEmailError) as exc_info:
            User("Alice", email, "password1", "User")
        assert exc_info.value.field == "email"

    def test_password_length(self):
        """8 caracteres minimum."""
        assert User.is_valid_password("12345678")
        assert not User.is_valid_password("1234567")
        with pytest.raises(InvalidPasswordError) as exc_info:
            User("Alice", "a@b.co", "short", "User")
        assert "short" not in exc_info.value.message

    def test_name_length(self):
        """3 caracteres minimum."""
        assert User.is_valid_name("Bob")
        assert not User.is_valid_name("Bo")
        with pytest.raises(InvalidNameError):
            User("Bo", "a@b.co", "password1", "User")

    def test_role_is_case_sensitive(self):
        assert User.is_valid_role("Admin")
        assert User.is_valid_role("User")
        assert not User.is_valid_role("admin")
        assert not User.is_valid_role("Guest")
        with pytest.raises(InvalidRoleError):
            User("Alice", "a@b.co", "password1", "admin")

    def test_validation_order_reports_first_invalid_field(self):
        """Nom et email invalides: c'est le nom qui est signale."""
        with pytest.raises(FieldValidationError) as exc_info:
            User("x", "bad", "short", "nope")
        assert exc_info.value.field == "name"

    def test_setter_updates_and_touches(self, sample_user):
        sample_user.name = "Jane Doe"
        assert sample_user.name == "Jane Doe"
        assert sample_user.updated is not None
        assert sample_user.updated >= sample_user.created

    def test_invalid_setter_leaves_user_untouched(self, sample_user):
        """Une mutation rejetee ne modifie ni le champ ni updated."""
        with pytest.raises(InvalidEmailError):
            sample_user.email = "not-an-email"
        assert sample_user.email == "email@test.com"
        assert sample_user.updated is None

    def test_update_is_all_or_nothing(self, sample_user):
        """Un champ invalide dans update() annule toute la mise a jour."""
        with pytest.raises(InvalidRoleError):
            sample_user.update(name="Jane Doe", role="root")
        assert sample_user.name == "John Doe"
        assert sample_user.role == "Admin"
        assert sample_user.updated is None

    def test_update_applies_all_fields(self, sample_user):
        sample_user.update(name="Jane Doe", email="jane@test.com", role="User")
        assert sample_user.name == "Jane Doe"
        assert sample_user.email == "jane@test.com"
        assert sample_user.role == "User"
        assert sample_user.password == "12345678"
        assert sample_user.updated >= sample_user.created

    def test_equality_by_id(self):
        a = User("Alice", "a@b.co", "password1", "User", id="same")
        b = User("Alicia", "c@d.ef", "password2", "Admin", id="same")
        assert a == b
        assert hash(a) == hash(b)

    def test_str(self, sample_user):
        assert str(sample_user) == "John Doe (Admin)"


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Task
# ═══════════════════════════════════════════════════════════════════════════════

class TestTask:
    """Tests pour l'entite Task."""

    def test_create_task(self, sample_task):
        assert sample_task.id
        assert sample_task.status == DEFAULT_STATUS
        assert sample_task.assignee_id is None
        assert sample_task.start_date is None
        assert sample_task.updated is None

    @pytest.mark.parametrize(
        "kwargs, error",
        [
            ({"title": ""}, InvalidTitleError),
            ({"status": ""}, InvalidStatusError),
            ({"owner_id": ""}, InvalidOwnerIdError),
        ],
    )
    def test_invalid_fields(self, kwargs, error):
        with pytest.raises(error):
            _task(**kwargs)

    def test_empty_description_rejected(self):
        with pytest.raises(InvalidDescriptionError) as exc_info:
            Task("Title", "", "TODO", "u1")
        assert exc_info.value.field == "description"

    def test_status_is_free_token(self):
        task = _task(status="IN_REVIEW")
        task.status = "DONE"
        assert task.status == "DONE"
        assert task.updated is not None

    def test_invalid_status_setter_is_rejected(self, sample_task):
        with pytest.raises(InvalidStatusError):
            sample_task.status = ""
        assert sample_task.status == "TODO"
        assert sample_task.updated is None

    def test_assign_and_unassign(self, sample_task):
        sample_task.assignee_id = "u2"
        assert sample_task.assignee_id == "u2"
        sample_task.assignee_id = None
        assert sample_task.assignee_id is None

    def test_dates(self, sample_task):
        start = datetime(2024, 3, 1)
        sample_task.start_date = start
        sample_task.end_date = datetime(2024, 3, 15)
        assert sample_task.start_date == start
        assert sample_task.end_date.day == 15

    def test_update_is_all_or_nothing(self, sample_task):
        with pytest.raises(InvalidOwnerIdError):
            sample_task.update(title="New", owner_id="")
        assert sample_task.title == "Design"
        assert sample_task.updated is None

    def test_update(self, sample_task):
        sample_task.update(title="New", status="IN_PROGRESS")
        assert sample_task.title == "New"
        assert sample_task.status == "IN_PROGRESS"
        assert sample_task.updated >= sample_task.created


# ═══════════════════════════════════════════════════════════════════════════════
# TESTS - Project
# ═══════════════════════════════════════════════════════════════════════════════

class TestProject:
    """Tests pour l'agregat Project."""

    def test_create_project(self, sample_project):
        assert sample_project.id
        assert sample_project.name == "Website"
        assert sample_project.tasks == []
        assert len(sample_project) == 0
        assert sample_project.end_date is None

    def test_empty_project_is_truthy(self, sample_project):
        """Un projet sans tache reste vrai dans un test booleen."""
        assert len(sample_project) == 0
        assert bool(sample_project)

    def test_invalid_name(self):
        with pytest.raises(InvalidNameError):
            Project("", "desc", "u1")

    def test_invalid_owner(self):
        with pytest.raises(InvalidOwnerIdError):
            Project("Name", "desc", "")

    def test_add_and_query_by_status(self, sample_project):
        """Une tache TODO ajoutee est retrouvee par statut."""
        task1 = _task(status="TODO")
        sample_project.add_task(task1)

        assert sample_project.get_tasks_by_status("TODO") == [task1]
        assert sample_project.get_tasks_by_status("DONE") == []
        assert sample_project.get_task_by_id(task1.id) is task1
        assert task1 in sample_project
        assert sample_project.updated is not None

    def test_add_duplicate_rejected(self, sample_project, sample_task):
        sample_project.add_task(sample_task)
        with pytest.raises(DuplicateTaskError):
            sample_project.add_task(sample_task)
        assert len(sample_project) == 1

    def test_duplicate_in_constructor_rejected(self):
        task = _task()
        with pytest.raises(DuplicateTaskError):
            Project("Name", "desc", "u1", tasks=[task, task])

    def test_remove_task(self, sample_project, sample_task):
        sample_project.add_task(sample_task)
        removed = sample_project.remove_task(sample_task)
        assert removed is sample_task
        assert sample_project.get_task_by_id(sample_task.id) is None

    def test_remove_task_by_id(self, sample_project, sample_task):
        sample_project.add_task(sample_task)
        sample_project.remove_task(sample_task.id)
        assert len(sample_project) == 0

    def test_remove_missing_task_raises(self, sample_project):
        with pytest.raises(TaskNotFoundError) as exc_info:
            sample_project.remove_task("missing")
        assert exc_info.value.task_id == "missing"
        assert exc_info.value.project_id == sample_project.id
        assert sample_project.updated is None

    def test_update_task_keeps_order(self, sample_project):
        """update_task remplace sur place sans changer l'ordre."""
        first, second, third = _task("A"), _task("B"), _task("C")
        for task in (first, second, third):
            sample_project.add_task(task)

        replacement = Task("B2", "autre", "DONE", "u1", id=second.id)
        sample_project.update_task(replacement)

        assert [t.title for t in sample_project.tasks] == ["A", "B2", "C"]
        assert sample_project.get_task_by_id(second.id) is replacement

    def test_update_missing_task_raises(self, sample_project, sample_task):
        with pytest.raises(TaskNotFoundError):
            sample_project.update_task(sample_task)

    def test_queries_by_assignee_and_owner(self, sample_project):
        mine = _task("Mine", owner_id="u1", assignee_id="u2")
        other = _task("Other", owner_id="u3")
        sample_project.add_task(mine)
        sample_project.add_task(other)

        assert sample_project.get_tasks_by_assignee("u2") == [mine]
        assert sample_project.get_tasks_by_owner("u3") == [other]
        assert sample_project.get_tasks_by_owner("nobody") == []

    def test_tasks_returns_copy(self, sample_project, sample_task):
        sample_project.add_task(sample_task)
        sample_project.tasks.clear()
        assert len(sample_project) == 1

    def test_update_fields(self, sample_project):
        end = datetime(2024, 12, 31)
        sample_project.update(name="Website v2", end_date=end)
        assert sample_project.name == "Website v2"
        assert sample_project.end_date == end
        assert sample_project.updated >= sample_project.created

    def test_update_is_all_or_nothing(self, sample_project):
        with pytest.raises(InvalidDescriptionError):
            sample_project.update(name="Other", description="")
        assert sample_project.name == "Website"
