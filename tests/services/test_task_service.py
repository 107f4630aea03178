"""Unit tests for the task service layer.

These tests verify create, list, get, update and delete against an
in-memory store, including title validation and not-found handling.
"""

import logging
import uuid
from typing import Dict, Any

import pytest

from task_tracker_svc.schemas.task import TaskCreate, TaskUpdate
from task_tracker_svc.services.task_service import (
    create_task,
    list_tasks,
    get_task_by_id,
    update_task,
    delete_task,
    TaskNotFoundError,
    TaskValidationError,
    TITLE_REQUIRED_MESSAGE
)
from task_tracker_svc.store import TaskStore


@pytest.fixture
def created_task(store: TaskStore) -> Dict[str, Any]:
    """Create a sample task for testing."""
    payload = TaskCreate(title="Buy groceries", description="Milk, Bread, Eggs", isCompleted=False)
    return create_task(payload, store)


class TestCreateTask:
    """Test cases for the create_task service function."""

    def test_create_task_success(self, store: TaskStore):
        """Test successful creation with all fields."""
        payload = TaskCreate(title="Buy groceries", description="Milk, Bread, Eggs", isCompleted=True)

        result = create_task(payload, store)

        assert isinstance(result, dict)
        assert result['title'] == "Buy groceries"
        assert result['description'] == "Milk, Bread, Eggs"
        assert result['isCompleted'] is True
        assert uuid.UUID(result['id']).version == 4
        assert len(store) == 1

    def test_create_task_defaults(self, store: TaskStore):
        """Test that optional fields default when omitted."""
        result = create_task(TaskCreate(title="Minimal"), store)

        assert result['description'] is None
        assert result['isCompleted'] is False

    def test_create_task_ids_are_unique(self, store: TaskStore):
        """Test that every created task gets a new ID."""
        ids = {create_task(TaskCreate(title=f"Task {i}"), store)['id'] for i in range(20)}
        assert len(ids) == 20

    def test_create_task_ignores_client_id(self, store: TaskStore):
        """Test that an ID in the request body is not used."""
        client_id = str(uuid.uuid4())
        payload = TaskCreate.model_validate({"id": client_id, "title": "Sneaky"})

        result = create_task(payload, store)

        assert result['id'] != client_id

    @pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
    def test_create_task_rejects_blank_title(self, store: TaskStore, title):
        """Test that blank titles are rejected and nothing is stored."""
        with pytest.raises(TaskValidationError, match=TITLE_REQUIRED_MESSAGE):
            create_task(TaskCreate(title=title), store)

        assert len(store) == 0

    def test_create_task_keeps_title_verbatim(self, store: TaskStore):
        """Test that surrounding whitespace in a valid title is preserved."""
        result = create_task(TaskCreate(title="  padded  "), store)
        assert result['title'] == "  padded  "


class TestListTasks:
    """Test cases for the list_tasks service function."""

    def test_list_tasks_empty(self, store: TaskStore):
        """Test listing an empty store."""
        assert list_tasks(store) == []

    def test_list_tasks_after_creates_and_deletes(self, store: TaskStore):
        """Test that N creates and M deletes leave exactly N-M tasks."""
        created = [create_task(TaskCreate(title=f"Task {i}"), store) for i in range(5)]
        for task in created[:2]:
            delete_task(uuid.UUID(task['id']), store)

        result = list_tasks(store)

        assert result == created[2:]


class TestGetTaskById:
    """Test cases for the get_task_by_id service function."""

    def test_get_task_by_id_success(self, store: TaskStore, created_task: Dict[str, Any]):
        """Test that a created task is returned unchanged."""
        result = get_task_by_id(store, uuid.UUID(created_task['id']))
        assert result == created_task

    def test_get_task_by_id_not_found(self, store: TaskStore):
        """Test retrieval of non-existent task returns None."""
        assert get_task_by_id(store, uuid.uuid4()) is None

    def test_get_task_by_id_store_error(self, store: TaskStore, monkeypatch):
        """Test that store errors are logged and re-raised."""
        def mock_get(task_id):
            raise RuntimeError("Simulated store error")

        monkeypatch.setattr(store, 'get', mock_get)

        with pytest.raises(RuntimeError, match="Simulated store error"):
            get_task_by_id(store, uuid.uuid4())


class TestUpdateTask:
    """Test cases for the update_task service function."""

    def test_update_task_replaces_fields(self, store: TaskStore, created_task: Dict[str, Any]):
        """Test that all mutable fields take the request values."""
        task_id = uuid.UUID(created_task['id'])
        payload = TaskUpdate(title="Buy milk", description=None, isCompleted=True)

        result = update_task(task_id, payload, store)

        assert result == {
            'id': created_task['id'],
            'title': "Buy milk",
            'description': None,
            'isCompleted': True
        }
        assert get_task_by_id(store, task_id) == result

    def test_update_task_omitted_fields_reset(self, store: TaskStore):
        """Test that omitted fields are replaced by their defaults."""
        created = create_task(
            TaskCreate(title="Full", description="details", isCompleted=True), store
        )

        result = update_task(uuid.UUID(created['id']), TaskUpdate(title="Bare"), store)

        assert result['description'] is None
        assert result['isCompleted'] is False

    @pytest.mark.parametrize("title", ["", "  ", None])
    def test_update_task_blank_title_leaves_task_unchanged(
        self, store: TaskStore, created_task: Dict[str, Any], title
    ):
        """Test that a rejected update does not touch the stored task."""
        task_id = uuid.UUID(created_task['id'])
        before = get_task_by_id(store, task_id)

        with pytest.raises(TaskValidationError, match=TITLE_REQUIRED_MESSAGE):
            update_task(task_id, TaskUpdate(title=title, isCompleted=True), store)

        assert get_task_by_id(store, task_id) == before

    def test_update_task_not_found(self, store: TaskStore):
        """Test updating a task that does not exist."""
        with pytest.raises(TaskNotFoundError):
            update_task(uuid.uuid4(), TaskUpdate(title="Anything"), store)

    def test_update_task_not_found_takes_precedence(self, store: TaskStore):
        """Test that an unknown ID is reported before a blank title."""
        with pytest.raises(TaskNotFoundError):
            update_task(uuid.uuid4(), TaskUpdate(title=""), store)

    def test_update_task_lookup_error_is_logged(self, store: TaskStore, caplog, monkeypatch):
        """Test that a failing existence check is logged and re-raised."""
        def mock_get(task_id):
            raise RuntimeError("Simulated lookup error")

        monkeypatch.setattr(store, 'get', mock_get)

        with caplog.at_level(logging.ERROR, logger="task_tracker_svc.services.task_service"):
            with pytest.raises(RuntimeError, match="Simulated lookup error"):
                update_task(uuid.uuid4(), TaskUpdate(title="Anything"), store)

        assert any(
            record.levelno == logging.ERROR and record.exc_info
            for record in caplog.records
        )

    def test_update_task_removed_concurrently(self, store: TaskStore, created_task: Dict[str, Any], monkeypatch):
        """Test that a task vanishing between lookup and write is not found."""
        monkeypatch.setattr(store, 'update', lambda *args, **kwargs: None)

        with pytest.raises(TaskNotFoundError):
            update_task(uuid.UUID(created_task['id']), TaskUpdate(title="Late"), store)


class TestDeleteTask:
    """Test cases for the delete_task service function."""

    def test_delete_task_success(self, store: TaskStore, created_task: Dict[str, Any]):
        """Test that a deleted task can no longer be retrieved."""
        task_id = uuid.UUID(created_task['id'])

        result = delete_task(task_id, store)

        assert result is None
        assert get_task_by_id(store, task_id) is None

    def test_delete_task_not_found(self, store: TaskStore):
        """Test deleting a task that does not exist."""
        with pytest.raises(TaskNotFoundError):
            delete_task(uuid.uuid4(), store)

    def test_delete_task_twice(self, store: TaskStore, created_task: Dict[str, Any]):
        """Test that a second delete of the same task is not found."""
        task_id = uuid.UUID(created_task['id'])
        delete_task(task_id, store)

        with pytest.raises(TaskNotFoundError):
            delete_task(task_id, store)
