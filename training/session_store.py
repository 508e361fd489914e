import logging
from typing import Iterable, Iterator, List, Tuple

from training.exceptions import IndexOutOfRange
from training.models import TrainingSet
from training.signals import ChangeSignal

logger = logging.getLogger(__name__)


class SessionStore:
    """Подходы текущей сессии, новые в начале списка"""

    def __init__(self):
        self.changed = ChangeSignal()
        self._sets: List[TrainingSet] = []

    @property
    def sets(self) -> Tuple[TrainingSet, ...]:
        return tuple(self._sets)

    def __len__(self) -> int:
        return len(self._sets)

    def __iter__(self) -> Iterator[TrainingSet]:
        return iter(tuple(self._sets))

    def __getitem__(self, position: int) -> TrainingSet:
        return self._sets[position]

    def insert_front(self, training_set: TrainingSet):
        self._sets.insert(0, training_set)
        self.changed.emit("sets")

    def delete_at(self, positions: Iterable[int]) -> List[TrainingSet]:
        """
        Удалить подходы по позициям за одно обновление

        Позиции считаются по списку на момент вызова. Если хотя бы одна
        позиция вне диапазона, список не меняется.

        Returns:
            List[TrainingSet] - удаленные подходы в порядке списка
        """
        targets = set(positions)
        size = len(self._sets)

        for position in sorted(targets):
            if not 0 <= position < size:
                raise IndexOutOfRange(position, size)

        if not targets:
            return []

        removed = [s for i, s in enumerate(self._sets) if i in targets]
        self._sets = [s for i, s in enumerate(self._sets) if i not in targets]
        logger.debug("Deleted %d set(s), %d left", len(removed), len(self._sets))

        self.changed.emit("sets")
        return removed

    def clear(self):
        self._sets = []
        self.changed.emit("sets")
