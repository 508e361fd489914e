import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """
    Отложенный вызов, который отменяется каждым новым вызовом schedule()

    Выполняется только последний запланированный вызов, после паузы delay секунд.
    Без запущенного event loop ничего не планируется: предыдущий вызов
    отменяется, новый пропускается.
    """

    def __init__(self, delay: float = 0.3):
        self.delay = delay
        self._task: Optional[asyncio.Task] = None

    @property
    def pending(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._task

    def schedule(self, callback: Callable[..., Any], *args) -> Optional[asyncio.Task]:
        """Запланировать callback, отменив предыдущий"""
        self.cancel()

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # Синхронный вызов вне event loop
            self._task = None
            return None

        self._task = loop.create_task(self._run(callback, *args))
        self._task.add_done_callback(self._log_failure)
        return self._task

    def cancel(self):
        if self.pending:
            self._task.cancel()

    async def wait(self) -> bool:
        """
        Дождаться текущего отложенного вызова

        Returns:
            bool - True, если вызов выполнился, False если его отменили
        """
        task = self._task
        if task is None:
            return False

        await asyncio.wait({task})
        if task.cancelled():
            return False

        # Пробрасываем исключение из callback, если оно было
        task.result()
        return True

    async def _run(self, callback: Callable[..., Any], *args):
        await asyncio.sleep(self.delay)
        result = callback(*args)
        if inspect.isawaitable(result):
            await result

    @staticmethod
    def _log_failure(task: asyncio.Task):
        if task.cancelled():
            return

        error = task.exception()
        if error is not None:
            logger.error("Debounced callback failed: %s", error, exc_info=error)
