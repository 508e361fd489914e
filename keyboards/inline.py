from aiogram.types import InlineKeyboardMarkup, InlineKeyboardButton
from typing import Collection, List, Sequence

from utils.parsers import format_set_display


def main_menu_kb() -> InlineKeyboardMarkup:
    """Главное меню"""
    keyboard = [
        [InlineKeyboardButton(text="🏋️ Новый подход", callback_data="workout_new")],
        [InlineKeyboardButton(text="📋 Подходы", callback_data="sets_list")],
        [InlineKeyboardButton(text="💪 Упражнения", callback_data="exercises_list")],
    ]
    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def suggestions_kb(suggestions: List[str], typed: str = "") -> InlineKeyboardMarkup:
    """
    Подсказки упражнений
    typed: введенный текст, который можно оставить как есть
    """
    keyboard = []

    for index, name in enumerate(suggestions):
        keyboard.append([
            InlineKeyboardButton(text=f"↖️ {name}", callback_data=f"suggest_{index}")
        ])

    if typed:
        keyboard.append([
            InlineKeyboardButton(text=f"✅ Оставить «{typed}»", callback_data="suggest_typed")
        ])

    keyboard.append([InlineKeyboardButton(text="◀️ Назад", callback_data="menu_main")])

    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def draft_kb(can_save: bool) -> InlineKeyboardMarkup:
    """Редактирование черновика подхода"""
    keyboard = [
        [
            InlineKeyboardButton(text="➖", callback_data="weight_dec"),
            InlineKeyboardButton(text="✏️ Вес", callback_data="weight_edit"),
            InlineKeyboardButton(text="➕", callback_data="weight_inc"),
        ],
        [
            InlineKeyboardButton(text="➖", callback_data="reps_dec"),
            InlineKeyboardButton(text="✏️ Повторы", callback_data="reps_edit"),
            InlineKeyboardButton(text="➕", callback_data="reps_inc"),
        ],
        [
            InlineKeyboardButton(text="⏱ Старт", callback_data="time_start"),
            InlineKeyboardButton(text="⏹ Стоп", callback_data="time_stop"),
        ],
    ]

    # Кнопка сохранения только для валидного черновика
    if can_save:
        keyboard.append([InlineKeyboardButton(text="✅ Добавить подход", callback_data="set_save")])

    keyboard.append([InlineKeyboardButton(text="🔄 Сменить упражнение", callback_data="exercise_change")])
    keyboard.append([
        InlineKeyboardButton(text="📋 Подходы", callback_data="sets_list"),
        InlineKeyboardButton(text="◀️ Меню", callback_data="menu_main"),
    ])

    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def after_save_kb(last_exercise: str = None) -> InlineKeyboardMarkup:
    """Быстрые действия после подхода"""
    keyboard = []

    if last_exercise:
        keyboard.append([
            InlineKeyboardButton(text=f"🔁 Еще подход: {last_exercise}", callback_data="set_repeat")
        ])

    keyboard.append([InlineKeyboardButton(text="➕ Новый подход", callback_data="workout_new")])
    keyboard.append([InlineKeyboardButton(text="📋 Подходы", callback_data="sets_list")])
    keyboard.append([InlineKeyboardButton(text="◀️ Меню", callback_data="menu_main")])

    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def sets_list_kb(sets: Sequence, selected: Collection[int] = ()) -> InlineKeyboardMarkup:
    """Список подходов, нажатие отмечает подход для удаления"""
    keyboard = []

    for index, training_set in enumerate(sets):
        mark = "☑️" if index in selected else "⬜"
        keyboard.append([
            InlineKeyboardButton(
                text=f"{mark} {format_set_display(training_set, index + 1)}",
                callback_data=f"set_toggle_{index}"
            )
        ])

    if selected:
        keyboard.append([
            InlineKeyboardButton(text=f"🗑 Удалить выбранные ({len(selected)})", callback_data="sets_delete")
        ])

    if sets:
        keyboard.append([InlineKeyboardButton(text="🧹 Очистить", callback_data="sets_clear")])

    keyboard.append([InlineKeyboardButton(text="➕ Новый подход", callback_data="workout_new")])
    keyboard.append([InlineKeyboardButton(text="◀️ Назад", callback_data="menu_main")])

    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def favorites_kb(favorites: List[str]) -> InlineKeyboardMarkup:
    """Избранные упражнения, нажатие удаляет упражнение"""
    keyboard = []

    for index, name in enumerate(favorites):
        keyboard.append([
            InlineKeyboardButton(text=f"❌ {name}", callback_data=f"fav_delete_{index}")
        ])

    keyboard.append([InlineKeyboardButton(text="➕ Добавить упражнение", callback_data="exercise_add")])
    keyboard.append([InlineKeyboardButton(text="◀️ Назад", callback_data="menu_main")])

    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def confirm_kb(action: str) -> InlineKeyboardMarkup:
    """Подтверждение действия"""
    keyboard = [
        [
            InlineKeyboardButton(text="✅ Да", callback_data=f"confirm_{action}"),
            InlineKeyboardButton(text="❌ Нет", callback_data=f"cancel_{action}")
        ]
    ]
    return InlineKeyboardMarkup(inline_keyboard=keyboard)


def back_kb(callback: str = "menu_main") -> InlineKeyboardMarkup:
    """Простая кнопка назад"""
    keyboard = [[InlineKeyboardButton(text="◀️ Назад", callback_data=callback)]]
    return InlineKeyboardMarkup(inline_keyboard=keyboard)
