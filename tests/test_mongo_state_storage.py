from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import ServerSelectionTimeoutError

from lms_store.application.exceptions.base import StateStorageError
from lms_store.application.initial_dataset import load_initial_state
from lms_store.domain.course import CourseStatus
from lms_store.domain.state import PersistedSnapshot
from lms_store.infrastructure.serialization import build_retort
from lms_store.infrastructure.storage.mongo_state_storage import MongoStateStorage

STORAGE_KEY = "lms-canonical-store"

# ============= Fixtures =============


@pytest.fixture
def retort():
    return build_retort()


@pytest.fixture
def mock_collection():
    """Mock Motor collection"""
    collection = MagicMock(spec=AsyncIOMotorCollection)
    collection.find_one = AsyncMock(return_value=None)
    collection.replace_one = AsyncMock()
    return collection


@pytest.fixture
def storage(mock_collection, retort):
    return MongoStateStorage(
        collection=mock_collection,
        retort=retort,
        storage_key=STORAGE_KEY,
    )


# ============= Tests: load =============

@pytest.mark.asyncio
async def test_load_without_document_returns_none(storage, mock_collection):
    """Test nothing persisted yet"""
    assert await storage.load() is None
    mock_collection.find_one.assert_awaited_once_with({"_id": STORAGE_KEY})


@pytest.mark.asyncio
async def test_load_partial_document(storage, mock_collection):
    """Test camelCase blob with only some sections loads"""
    mock_collection.find_one.return_value = {
        "_id": STORAGE_KEY,
        "state": {
            "courses": [
                {
                    "id": "c1",
                    "title": "Local course",
                    "backendId": "42",
                    "status": "published",
                    "pathSlug": "qa",
                    "lastUpdated": "2026-02-01",
                    "createdAt": "2026-01-01",
                    "legacyField": "ignored",
                },
            ],
        },
    }

    snapshot = await storage.load()

    assert isinstance(snapshot, PersistedSnapshot)
    assert snapshot.assignments is None
    assert snapshot.quiz_configs is None
    course = snapshot.courses[0]
    assert course.backend_id == "42"
    assert course.status is CourseStatus.PUBLISHED
    assert course.path_slug == "qa"
    assert course.last_updated == date(2026, 2, 1)
    assert course.modules == []


@pytest.mark.asyncio
async def test_load_invalid_state_raises(storage, mock_collection):
    """Test undecodable blob is reported as storage error"""
    mock_collection.find_one.return_value = {
        "_id": STORAGE_KEY,
        "state": {"courses": [{"title": "no id"}]},
    }

    with pytest.raises(StateStorageError):
        await storage.load()


@pytest.mark.asyncio
async def test_load_missing_state_section_raises(storage, mock_collection):
    """Test document without a state dict"""
    mock_collection.find_one.return_value = {"_id": STORAGE_KEY, "state": "oops"}

    with pytest.raises(StateStorageError):
        await storage.load()


@pytest.mark.asyncio
async def test_load_connection_error_raises(storage, mock_collection):
    """Test driver errors are wrapped"""
    mock_collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StateStorageError) as exc_info:
        await storage.load()

    assert exc_info.value.storage_key == STORAGE_KEY


# ============= Tests: save =============

@pytest.mark.asyncio
async def test_save_upserts_single_document(storage, mock_collection):
    """Test whole state is written under the storage key"""
    state = load_initial_state()

    await storage.save(state)

    mock_collection.replace_one.assert_awaited_once()
    args, kwargs = mock_collection.replace_one.call_args
    assert args[0] == {"_id": STORAGE_KEY}
    document = args[1]
    assert document["_id"] == STORAGE_KEY
    assert set(document["state"]) == {"courses", "assignments", "quizConfigs"}
    assert document["state"]["courses"][0]["id"] == "prog-basics"
    assert document["state"]["courses"][0]["pathSlug"] == "fullstack"
    assert kwargs == {"upsert": True}


@pytest.mark.asyncio
async def test_saved_document_loads_back(storage, mock_collection):
    """Test the written blob is readable by load"""
    state = load_initial_state()
    await storage.save(state)
    mock_collection.find_one.return_value = mock_collection.replace_one.call_args.args[1]

    snapshot = await storage.load()

    assert snapshot.courses == state.courses
    assert snapshot.assignments == state.assignments
    assert snapshot.quiz_configs == state.quiz_configs


@pytest.mark.asyncio
async def test_save_connection_error_raises(storage, mock_collection):
    """Test write failures are wrapped"""
    mock_collection.replace_one.side_effect = ServerSelectionTimeoutError("no servers")

    with pytest.raises(StateStorageError):
        await storage.save(load_initial_state())
