from typing import Callable, List

Listener = Callable[[str], None]


class ChangeSignal:
    """
    Список обработчиков, вызываемых после каждого изменения состояния.

    Обработчик получает имя изменившегося поля ("favorites", "sets", "exercise"...).
    """

    def __init__(self):
        self._listeners: List[Listener] = []

    def connect(self, listener: Listener) -> Callable[[], None]:
        """Подписаться на изменения. Возвращает функцию для отписки"""
        self._listeners.append(listener)

        def disconnect():
            self.disconnect(listener)

        return disconnect

    def disconnect(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, field: str):
        for listener in list(self._listeners):
            listener(field)
