import logging
from typing import Iterable, List, Optional

from training.exceptions import IndexOutOfRange
from training.signals import ChangeSignal

logger = logging.getLogger(__name__)

MAX_RECENT_EXERCISES = 5


def _same_name(a: str, b: str) -> bool:
    return a.lower() == b.lower()


class ExerciseCatalog:
    """Избранные и недавние упражнения для автодополнения"""

    def __init__(self, favorites: Optional[Iterable[str]] = None,
                 max_recent: int = MAX_RECENT_EXERCISES):
        self.max_recent = max_recent
        self.changed = ChangeSignal()
        self._favorites: List[str] = []
        self._recents: List[str] = []

        for name in favorites or []:
            if not any(_same_name(f, name) for f in self._favorites):
                self._favorites.append(name)
        self._favorites.sort(key=str.lower)

    @property
    def favorites(self) -> List[str]:
        return list(self._favorites)

    @property
    def recents(self) -> List[str]:
        return list(self._recents)

    # ========== RECENTS ==========

    def add_recent(self, name: str):
        """Поднять упражнение в начало недавних (без дубликатов)"""
        # Убираем дубликаты
        self._recents = [r for r in self._recents if not _same_name(r, name)]

        # Добавляем в начало
        self._recents.insert(0, name)

        # Ограничиваем количество
        del self._recents[self.max_recent:]

        self.changed.emit("recents")

    # ========== FAVORITES ==========

    def add_favorite(self, name: str) -> bool:
        """
        Добавить упражнение в избранное

        Returns:
            bool - False, если такое упражнение уже есть (без учета регистра)
        """
        if any(_same_name(f, name) for f in self._favorites):
            return False

        self._favorites.append(name)
        self._favorites.sort(key=str.lower)
        logger.debug("Favorite added: %s", name)

        self.changed.emit("favorites")
        return True

    def remove_favorite(self, position: int) -> str:
        """Удалить избранное упражнение по позиции"""
        if not 0 <= position < len(self._favorites):
            raise IndexOutOfRange(position, len(self._favorites))

        name = self._favorites.pop(position)
        logger.debug("Favorite removed: %s", name)

        self.changed.emit("favorites")
        return name
