import html

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from keyboards.inline import (
    suggestions_kb, draft_kb, after_save_kb, sets_list_kb, confirm_kb, back_kb
)
from states.workout_states import WorkoutStates
from training.entry_form import EntryForm
from training.exceptions import IndexOutOfRange
from training.manager import SessionManager, TrainingSession
from utils.messages import send_or_edit
from utils.parsers import calculate_volume, format_draft, format_set_display, format_weight

router = Router()


def _position(callback: CallbackQuery) -> int:
    return int(callback.data.rsplit("_", 1)[1])


def _draft_text(form: EntryForm) -> str:
    text = format_draft(form) + "\n\n"

    # Подсказываем, чего не хватает для сохранения
    if not form.exercise:
        text += "⚠️ Выбери упражнение\n"
    if int(form.reps) <= 0:
        text += "⚠️ Укажи количество повторений\n"
    if form.end_time < form.start_time:
        text += "⚠️ Нажми ⏹, когда закончишь подход\n"

    text += "Можно написать вес и повторения: <code>60x10</code>, или изменить вес: <code>+5</code>"
    return text


async def _show_draft(message: Message, form: EntryForm, edit: bool = False):
    await send_or_edit(message, _draft_text(form), draft_kb(form.can_save), edit=edit)


async def _offer_suggestions(message: Message, state: FSMContext, form: EntryForm,
                             typed: str = "", edit: bool = False):
    suggestions = form.filtered_suggestions
    await state.update_data(suggestions=suggestions)

    if typed and suggestions:
        text = f"🔎 Подходящие упражнения для «{html.escape(typed)}»:"
    elif typed:
        text = f"🤷 Нет совпадений для «{html.escape(typed)}».\nМожно оставить название как есть:"
    else:
        text = (
            "🏋️ <b>Новый подход</b>\n\n"
            "Введи название упражнения или выбери из списка:"
        )

    await send_or_edit(message, text, suggestions_kb(suggestions, typed), edit=edit)


# ========== EXERCISE SELECTION ==========

@router.message(Command("new"))
async def cmd_new(message: Message, state: FSMContext, sessions: SessionManager):
    """Команда /new"""
    form = sessions.get(message.from_user.id).form
    form.reset_draft()

    await _offer_suggestions(message, state, form)
    await state.set_state(WorkoutStates.entering_exercise)


@router.callback_query(F.data == "workout_new")
async def workout_new(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Начать новый подход"""
    form = sessions.get(callback.from_user.id).form
    form.reset_draft()

    await _offer_suggestions(callback.message, state, form, edit=True)
    await state.set_state(WorkoutStates.entering_exercise)
    await callback.answer()


@router.callback_query(F.data == "exercise_change")
async def exercise_change(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Сменить упражнение, сохранив вес и повторения"""
    form = sessions.get(callback.from_user.id).form
    form.exercise = ""

    await _offer_suggestions(callback.message, state, form, edit=True)
    await state.set_state(WorkoutStates.entering_exercise)
    await callback.answer()


@router.message(WorkoutStates.entering_exercise)
async def process_exercise_input(message: Message, state: FSMContext, sessions: SessionManager):
    """Ввод названия упражнения, подсказки показываются после паузы во вводе"""
    text = (message.text or "").strip()

    if not text:
        await message.answer("❌ Название упражнения не может быть пустым. Попробуй еще раз:")
        return

    form = sessions.get(message.from_user.id).form
    form.exercise = text

    # Более новый ввод отменяет показ подсказок для этого
    if not await form.wait_for_suggestions():
        return

    await _offer_suggestions(message, state, form, typed=text)


@router.callback_query(WorkoutStates.entering_exercise, F.data.startswith("suggest_"))
async def select_suggestion(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Выбор упражнения из подсказок"""
    form = sessions.get(callback.from_user.id).form

    if callback.data == "suggest_typed":
        name = form.exercise
    else:
        data = await state.get_data()
        suggestions = data.get('suggestions', [])
        index = _position(callback)
        name = suggestions[index] if 0 <= index < len(suggestions) else ""

    if not name:
        await callback.answer("❌ Упражнение не найдено", show_alert=True)
        return

    form.select_exercise(name)

    await _show_draft(callback.message, form, edit=True)
    await state.set_state(WorkoutStates.editing_set)
    await callback.answer()


# ========== DRAFT EDITING ==========

@router.callback_query(F.data.in_({"weight_dec", "weight_inc", "reps_dec", "reps_inc"}))
async def step_draft(callback: CallbackQuery, sessions: SessionManager):
    """Кнопки ➖/➕ для веса и повторений"""
    form = sessions.get(callback.from_user.id).form
    field, direction = callback.data.split("_")
    steps = 1 if direction == "inc" else -1

    if field == "weight":
        form.step_weight(steps)
    else:
        form.step_reps(steps)

    await _show_draft(callback.message, form, edit=True)
    await callback.answer()


@router.callback_query(F.data.in_({"weight_edit", "reps_edit"}))
async def edit_number(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Ручной ввод веса или повторений"""
    form = sessions.get(callback.from_user.id).form

    if callback.data == "weight_edit":
        low, high = form.weight_range
        text = f"🏋️ Введи вес в кг ({format_weight(low)}–{format_weight(high)}):"
        await state.set_state(WorkoutStates.entering_weight)
    else:
        low, high = form.reps_range
        text = f"🔁 Введи количество повторений ({int(low)}–{int(high)}):"
        await state.set_state(WorkoutStates.entering_reps)

    await send_or_edit(callback.message, text, back_kb("draft_show"), edit=True)
    await callback.answer()


@router.message(WorkoutStates.entering_weight)
async def process_weight_input(message: Message, state: FSMContext, sessions: SessionManager):
    form = sessions.get(message.from_user.id).form
    form.set_weight_text(message.text or "")

    await state.set_state(WorkoutStates.editing_set)
    await _show_draft(message, form)


@router.message(WorkoutStates.entering_reps)
async def process_reps_input(message: Message, state: FSMContext, sessions: SessionManager):
    form = sessions.get(message.from_user.id).form
    form.set_reps_text(message.text or "")

    await state.set_state(WorkoutStates.editing_set)
    await _show_draft(message, form)


@router.callback_query(F.data == "draft_show")
async def show_draft(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Вернуться к черновику"""
    form = sessions.get(callback.from_user.id).form

    await state.set_state(WorkoutStates.editing_set)
    await _show_draft(callback.message, form, edit=True)
    await callback.answer()


@router.message(WorkoutStates.editing_set)
async def process_quick_input(message: Message, sessions: SessionManager):
    """Быстрый ввод подхода текстом"""
    form = sessions.get(message.from_user.id).form

    if not form.apply_quick_input(message.text or ""):
        await message.answer(
            "❌ Не могу распознать формат.\n\n"
            "Попробуй так:\n"
            "• <code>80×10</code>\n"
            "• <code>80 10</code>\n"
            "• <code>+5</code> (добавить 5кг)",
            parse_mode="HTML"
        )
        return

    await _show_draft(message, form)


@router.callback_query(F.data.in_({"time_start", "time_stop"}))
async def mark_time(callback: CallbackQuery, sessions: SessionManager):
    """Отметить начало или окончание подхода"""
    form = sessions.get(callback.from_user.id).form
    now = form.clock()

    if callback.data == "time_start":
        form.start_time = now
    else:
        form.end_time = now

    await _show_draft(callback.message, form, edit=True)
    await callback.answer("⏱ Время отмечено")


# ========== SAVING ==========

@router.callback_query(F.data == "set_save")
async def save_set(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Сохранить подход"""
    session = sessions.get(callback.from_user.id)
    training_set = session.form.save()

    if training_set is None:
        await callback.answer("❌ Подход заполнен не полностью", show_alert=True)
        return

    session.form.reset_draft()
    await state.clear()

    text = (
        f"✅ Записано!\n\n"
        f"{html.escape(format_set_display(training_set))}\n\n"
        "Что дальше?"
    )
    await send_or_edit(callback.message, text, after_save_kb(training_set.exercise), edit=True)
    await callback.answer("✅ Подход записан!")


@router.callback_query(F.data == "set_repeat")
async def repeat_set(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Еще один подход последнего упражнения с теми же весом и повторениями"""
    session = sessions.get(callback.from_user.id)
    recents = session.catalog.recents

    if not recents:
        await callback.answer("❌ Нет предыдущего подхода", show_alert=True)
        return

    form = session.form
    form.reset_draft()
    form.select_exercise(recents[0])

    if len(session.store) and session.store[0].exercise == recents[0]:
        last_set = session.store[0]
        form.weight = last_set.weight
        form.reps = last_set.reps

    await _show_draft(callback.message, form, edit=True)
    await state.set_state(WorkoutStates.editing_set)
    await callback.answer()


# ========== SETS LIST ==========

def _sets_text(session: TrainingSession) -> str:
    store = session.store

    if not len(store):
        return (
            "📋 <b>Нет подходов</b>\n\n"
            "Добавь первый подход через «Новый подход»"
        )

    volume = calculate_volume(store)
    return (
        f"📋 <b>Подходы</b> ({len(store)})\n"
        f"📦 Тоннаж: {format_weight(volume)} кг\n\n"
        "Нажми на подход, чтобы отметить его для удаления:"
    )


async def _show_sets(message: Message, state: FSMContext, session: TrainingSession,
                     selected=(), edit: bool = False):
    await state.set_state(WorkoutStates.reviewing_sets)
    await state.update_data(selected=sorted(selected))

    await send_or_edit(message, _sets_text(session), sets_list_kb(session.store.sets, set(selected)), edit=edit)


@router.message(Command("sets"))
async def cmd_sets(message: Message, state: FSMContext, sessions: SessionManager):
    """Команда /sets"""
    await _show_sets(message, state, sessions.get(message.from_user.id))


@router.callback_query(F.data == "sets_list")
async def show_sets(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Показать подходы сессии"""
    await _show_sets(callback.message, state, sessions.get(callback.from_user.id), edit=True)
    await callback.answer()


@router.callback_query(WorkoutStates.reviewing_sets, F.data.startswith("set_toggle_"))
async def toggle_set(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Отметить подход для удаления"""
    session = sessions.get(callback.from_user.id)
    position = _position(callback)

    if not 0 <= position < len(session.store):
        await callback.answer("❌ Подход не найден", show_alert=True)
        return

    data = await state.get_data()
    selected = set(data.get('selected', []))
    selected ^= {position}

    await _show_sets(callback.message, state, session, selected, edit=True)
    await callback.answer()


@router.callback_query(WorkoutStates.reviewing_sets, F.data == "sets_delete")
async def delete_selected(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Удалить отмеченные подходы"""
    session = sessions.get(callback.from_user.id)
    data = await state.get_data()

    try:
        removed = session.store.delete_at(data.get('selected', []))
    except IndexOutOfRange:
        await _show_sets(callback.message, state, session, edit=True)
        await callback.answer("❌ Список подходов изменился, отметь подходы заново", show_alert=True)
        return

    await _show_sets(callback.message, state, session, edit=True)
    await callback.answer(f"🗑 Удалено подходов: {len(removed)}")


@router.callback_query(F.data == "sets_clear")
async def clear_sets_confirm(callback: CallbackQuery):
    await send_or_edit(
        callback.message,
        "⚠️ Удалить <b>все</b> подходы сессии?",
        confirm_kb("clear"),
        edit=True
    )
    await callback.answer()


@router.callback_query(F.data.in_({"confirm_clear", "cancel_clear"}))
async def clear_sets(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Очистить сессию после подтверждения"""
    session = sessions.get(callback.from_user.id)

    if callback.data == "confirm_clear":
        session.store.clear()
        await callback.answer("🧹 Подходы удалены")
    else:
        await callback.answer()

    await _show_sets(callback.message, state, session, edit=True)
