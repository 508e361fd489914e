import html
import re
from datetime import timedelta
from typing import Iterable, Optional, Tuple, Union

Bounds = Optional[Tuple[float, float]]


def parse_set_input(text: str) -> Optional[Tuple[float, int]]:
    """
    Парсит быстрый ввод подхода в различных форматах

    Поддерживаемые форматы:
    - "80x10" -> (80.0, 10)
    - "80 x 10" -> (80.0, 10)
    - "80*10" -> (80.0, 10)
    - "80/10" -> (80.0, 10)
    - "80кг 10" -> (80.0, 10)
    - "80 10" -> (80.0, 10)

    Returns:
        Tuple[float, int] - (вес, повторения) или None если не распознано
    """
    # Убираем лишние пробелы
    text = text.strip().lower()

    # Убираем единицы измерения
    text = text.replace('кг', '').replace('kg', '')

    # Паттерны для разных форматов
    patterns = [
        r'^(\d+(?:[.,]\d+)?)\s*[x*×х/]\s*(\d+)$',  # 80x10, 80*10, 80/10
        r'^(\d+(?:[.,]\d+)?)\s+(\d+)$',  # 80 10
    ]

    for pattern in patterns:
        match = re.match(pattern, text)
        if match:
            weight = float(match.group(1).replace(',', '.'))
            reps = int(match.group(2))
            return (weight, reps)

    return None


def parse_weight_modifier(text: str) -> Optional[float]:
    """
    Парсит модификатор веса (+5, -2.5)

    Returns:
        float - значение модификатора или None
    """
    text = text.strip().replace(',', '.')

    match = re.match(r'^([+-])(\d+(?:\.\d+)?)$', text)
    if match:
        sign = 1 if match.group(1) == '+' else -1
        value = float(match.group(2))
        return sign * value

    return None


def clamp(value: float, bounds: Bounds) -> float:
    if bounds is None:
        return value
    low, high = bounds
    return max(low, min(high, value))


def coerce_numeric(text: str, current: float = 0, integer: bool = True,
                   bounds: Bounds = None) -> float:
    """
    Превращает текст из поля ввода в число

    - разделители тысяч убираются, запятая считается десятичной точкой
    - все нецифровые символы выбрасываются (для дробных остается одна точка)
    - пустой ввод дает 0
    - если после очистки число не читается, остается текущее значение
    - значение прижимается к границам диапазона, целые округляются

    Args:
        text: введенный текст
        current: текущее значение поля
        integer: целочисленное поле
        bounds: (min, max) или None
    """
    cleaned = text.replace(' ', '').replace('\u00a0', '')

    if integer:
        cleaned = ''.join(ch for ch in cleaned if ch.isdigit())
    else:
        # "1,5" -> "1.5", но "1,000.5" -> "1000.5"
        if '.' in cleaned:
            cleaned = cleaned.replace(',', '')
        else:
            cleaned = cleaned.replace(',', '.')
        cleaned = ''.join(ch for ch in cleaned if ch.isdigit() or ch == '.')
        # Только одна десятичная точка
        if cleaned.count('.') > 1:
            head, _, tail = cleaned.partition('.')
            cleaned = head + '.' + tail.replace('.', '')

    if not cleaned:
        return 0

    try:
        value = float(cleaned)
    except ValueError:
        return current

    value = clamp(value, bounds)

    if integer:
        value = float(round(value))

    return value


def step_value(value: float, steps: int, step: float = 1.0, integer: bool = True,
               bounds: Bounds = None) -> float:
    """
    Сдвигает значение на steps шагов (отрицательные - вниз)

    Шаги применяются по одному, движение останавливается на границе диапазона.
    """
    direction = 1 if steps > 0 else -1
    new_value = value

    for _ in range(abs(steps)):
        candidate = new_value + direction * step

        if bounds is not None:
            low, high = bounds
            # Шаг за границу прижимает значение к самой границе
            if candidate > high:
                new_value = high
                break
            if candidate < low:
                new_value = low
                break

        new_value = candidate

        if integer:
            new_value = float(round(new_value))

    return new_value


def format_duration(duration: Union[timedelta, float]) -> str:
    """Длительность в виде "м:сс" """
    if isinstance(duration, timedelta):
        duration = duration.total_seconds()

    total = int(duration)
    minutes = total // 60
    seconds = total % 60
    return f"{minutes}:{seconds:02d}"


def format_weight(weight: float) -> str:
    # Убираем .0 если вес целое число
    return f"{weight:.1f}".rstrip('0').rstrip('.')


def format_set_display(training_set, set_number: int = None) -> str:
    """
    Форматирует отображение подхода

    Args:
        training_set: TrainingSet
        set_number: номер в списке (опционально)

    Returns:
        str - отформатированная строка
    """
    text = (
        f"{training_set.exercise}: {format_weight(training_set.weight)}кг × "
        f"{training_set.reps} повт. · {format_duration(training_set.duration)}"
    )

    if set_number:
        return f"{set_number}. {text}"
    return text


def format_draft(form) -> str:
    """Карточка черновика подхода"""
    lines = [
        f"💪 <b>{html.escape(form.exercise) or '—'}</b>",
        f"🏋️ Вес: {format_weight(form.weight)} кг",
        f"🔁 Повторения: {int(form.reps)}",
        f"⏱ Начало: {form.start_time:%H:%M:%S}",
        f"⏹ Окончание: {form.end_time:%H:%M:%S}",
    ]

    if form.end_time > form.start_time:
        lines.append(f"⌛ Длительность: {format_duration(form.end_time - form.start_time)}")

    return '\n'.join(lines)


def calculate_volume(sets: Iterable) -> float:
    """
    Рассчитывает общий объем нагрузки (тоннаж)

    Args:
        sets: подходы с полями weight и reps

    Returns:
        float - общий тоннаж в кг
    """
    return sum(s.weight * s.reps for s in sets)
