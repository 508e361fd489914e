import logging
from datetime import datetime
from typing import Callable, List, Optional

from training.catalog import ExerciseCatalog
from training.models import TrainingSet
from training.session_store import SessionStore
from training.signals import ChangeSignal
from utils.debounce import Debouncer
from utils.parsers import (
    clamp, coerce_numeric, parse_set_input, parse_weight_modifier, step_value
)

logger = logging.getLogger(__name__)

WEIGHT_RANGE = (0.0, 500.0)
REPS_RANGE = (1.0, 100.0)


class EntryForm:
    """
    Черновик нового подхода: поля формы, проверка и подсказки упражнений.

    Сохраненный подход попадает в начало SessionStore, а упражнение в недавние
    ExerciseCatalog. Черновик после сохранения не сбрасывается сам, для этого
    есть reset_draft().

    Если передан debouncer, каждое изменение названия упражнения откладывает
    показ подсказок до паузы во вводе. Вне event loop подсказки не планируются.
    """

    def __init__(self, catalog: ExerciseCatalog, store: SessionStore,
                 debouncer: Optional[Debouncer] = None,
                 clock: Callable[[], datetime] = datetime.now,
                 weight_range=WEIGHT_RANGE, reps_range=REPS_RANGE):
        self.catalog = catalog
        self.store = store
        self.debouncer = debouncer
        self.clock = clock
        self.weight_range = weight_range
        self.reps_range = reps_range
        self.changed = ChangeSignal()

        now = clock()
        self._exercise = ""
        self._weight = 0.0
        self._reps = 0.0
        self._start_time = now
        self._end_time = now
        self._suggestions_visible = False

    # ========== FIELDS ==========

    @property
    def exercise(self) -> str:
        return self._exercise

    @exercise.setter
    def exercise(self, value: str):
        self._exercise = value
        self.changed.emit("exercise")

        if self.debouncer is not None:
            self.debouncer.schedule(self._reveal_suggestions)

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float):
        self._weight = max(0.0, float(value))
        self.changed.emit("weight")

    @property
    def reps(self) -> float:
        return self._reps

    @reps.setter
    def reps(self, value: float):
        self._reps = float(value)
        self.changed.emit("reps")

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @start_time.setter
    def start_time(self, value: datetime):
        self._start_time = value
        self.changed.emit("start_time")

    @property
    def end_time(self) -> datetime:
        return self._end_time

    @end_time.setter
    def end_time(self, value: datetime):
        # Окончание не может быть раньше начала
        if value < self._start_time:
            value = self._start_time
        self._end_time = value
        self.changed.emit("end_time")

    @property
    def suggestions_visible(self) -> bool:
        return self._suggestions_visible

    @suggestions_visible.setter
    def suggestions_visible(self, value: bool):
        if self._suggestions_visible != value:
            self._suggestions_visible = value
            self.changed.emit("suggestions_visible")

    # ========== NUMERIC INPUT ==========

    def set_weight_text(self, text: str):
        self.weight = coerce_numeric(text, self._weight, bounds=self.weight_range)

    def set_reps_text(self, text: str):
        self.reps = coerce_numeric(text, self._reps, bounds=self.reps_range)

    def step_weight(self, steps: int, step: float = 1.0):
        self.weight = step_value(self._weight, steps, step, bounds=self.weight_range)

    def step_reps(self, steps: int):
        self.reps = step_value(self._reps, steps, bounds=self.reps_range)

    def apply_quick_input(self, text: str) -> bool:
        """
        Быстрый ввод: "60x10" задает вес и повторения, "+5"/"-5" меняет вес

        Returns:
            bool - True, если текст распознан
        """
        modifier = parse_weight_modifier(text)
        if modifier is not None:
            self.weight = clamp(self._weight + modifier, self.weight_range)
            return True

        parsed = parse_set_input(text)
        if parsed:
            weight, reps = parsed
            self.weight = clamp(weight, self.weight_range)
            self.reps = clamp(reps, self.reps_range)
            return True

        return False

    # ========== VALIDATION & SUGGESTIONS ==========

    @property
    def can_save(self) -> bool:
        # Вес не проверяем: 0 кг допустим для упражнений с собственным весом
        return (
            bool(self._exercise)
            and int(self._reps) > 0
            and self._end_time >= self._start_time
        )

    @property
    def filtered_suggestions(self) -> List[str]:
        suggestions = self.catalog.recents + self.catalog.favorites
        if not self._exercise:
            return suggestions

        query = self._exercise.lower()
        return [name for name in suggestions if query in name.lower()]

    def _reveal_suggestions(self):
        if self._exercise:
            self.suggestions_visible = True

    async def wait_for_suggestions(self) -> bool:
        """
        Дождаться окончания паузы после последнего ввода упражнения

        Returns:
            bool - True, если подсказки показаны; False, если ввод был перебит
            более новым или подсказки скрыты
        """
        if self.debouncer is None:
            return self._suggestions_visible

        fired = await self.debouncer.wait()
        return fired and self._suggestions_visible

    def select_exercise(self, name: str):
        self._exercise = name
        self.changed.emit("exercise")
        self._hide_suggestions()

    def _hide_suggestions(self):
        if self.debouncer is not None:
            self.debouncer.cancel()
        self.suggestions_visible = False

    # ========== COMMANDS ==========

    def save(self) -> Optional[TrainingSet]:
        """
        Сохранить черновик как подход

        Returns:
            TrainingSet - новый подход или None, если черновик невалиден
        """
        if not self.can_save:
            return None

        training_set = TrainingSet(
            exercise=self._exercise,
            weight=int(self._weight),
            reps=int(self._reps),
            start_time=self._start_time,
            end_time=self._end_time,
        )

        # Добавляем в историю упражнений
        self.catalog.add_recent(self._exercise)
        self.store.insert_front(training_set)
        logger.info("Set saved: %s %skg x %s", training_set.exercise,
                    training_set.weight, training_set.reps)

        return training_set

    def reset_draft(self):
        now = self.clock()
        self._exercise = ""
        self._weight = 0.0
        self._reps = 0.0
        self._start_time = now
        self._end_time = now
        self._hide_suggestions()
        self.changed.emit("draft")
