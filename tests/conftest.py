from datetime import datetime, timedelta
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage

from training.catalog import ExerciseCatalog
from training.entry_form import EntryForm
from training.manager import SessionManager
from training.session_store import SessionStore

T0 = datetime(2025, 9, 6, 10, 0, 0)


class FakeClock:
    def __init__(self, now: datetime = T0):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float):
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> ExerciseCatalog:
    return ExerciseCatalog(["Bench Press", "Leg Press", "Squats", "Deadlift"])


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def form(catalog, store, clock) -> EntryForm:
    return EntryForm(catalog, store, clock=clock)


@pytest.fixture
def sessions() -> SessionManager:
    return SessionManager(favorites=["Bench Press", "Leg Press", "Squats"], suggestion_delay=0.01)


@pytest.fixture
def state() -> FSMContext:
    return FSMContext(storage=MemoryStorage(), key=StorageKey(bot_id=1, chat_id=1, user_id=1))


def make_message(text: str = "", user_id: int = 1):
    message = AsyncMock()
    message.text = text
    message.from_user = SimpleNamespace(id=user_id, first_name="Test")
    return message


def make_callback(data: str, user_id: int = 1):
    callback = AsyncMock()
    callback.data = data
    callback.from_user = SimpleNamespace(id=user_id, first_name="Test")
    callback.message = make_message(user_id=user_id)
    return callback
