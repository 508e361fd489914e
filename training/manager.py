import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from training.catalog import MAX_RECENT_EXERCISES, ExerciseCatalog
from training.entry_form import REPS_RANGE, WEIGHT_RANGE, EntryForm
from training.session_store import SessionStore
from utils.debounce import Debouncer

logger = logging.getLogger(__name__)


@dataclass
class TrainingSession:
    """Все состояние одного пользователя: каталог, подходы и черновик"""
    catalog: ExerciseCatalog
    store: SessionStore
    form: EntryForm


class SessionManager:
    """Сессии пользователей бота. Хранятся только в памяти процесса"""

    def __init__(self, favorites: Optional[Iterable[str]] = None,
                 max_recent: int = MAX_RECENT_EXERCISES,
                 suggestion_delay: float = 0.3,
                 weight_range=WEIGHT_RANGE, reps_range=REPS_RANGE):
        self.favorites = list(favorites or [])
        self.max_recent = max_recent
        self.suggestion_delay = suggestion_delay
        self.weight_range = weight_range
        self.reps_range = reps_range
        self._sessions: Dict[int, TrainingSession] = {}

    def get(self, user_id: int) -> TrainingSession:
        """Получить сессию пользователя, создав ее при первом обращении"""
        session = self._sessions.get(user_id)
        if session is None:
            session = self._create(user_id)
            self._sessions[user_id] = session
        return session

    def drop(self, user_id: int):
        session = self._sessions.pop(user_id, None)
        if session is not None:
            session.form.reset_draft()
            logger.info("Session dropped for user %s", user_id)

    def __contains__(self, user_id: int) -> bool:
        return user_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)

    def _create(self, user_id: int) -> TrainingSession:
        catalog = ExerciseCatalog(self.favorites, max_recent=self.max_recent)
        store = SessionStore()
        form = EntryForm(
            catalog, store,
            debouncer=Debouncer(self.suggestion_delay),
            weight_range=self.weight_range,
            reps_range=self.reps_range,
        )

        store.changed.connect(
            lambda field: logger.debug("User %s: %d set(s) in session", user_id, len(store))
        )
        catalog.changed.connect(
            lambda field: logger.debug("User %s: catalog %s changed", user_id, field)
        )

        logger.info("Session created for user %s", user_id)
        return TrainingSession(catalog=catalog, store=store, form=form)
