import html

from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext

from keyboards.inline import favorites_kb, back_kb
from states.workout_states import ExerciseStates
from training.catalog import ExerciseCatalog
from training.exceptions import IndexOutOfRange
from training.manager import SessionManager
from utils.messages import send_or_edit

router = Router()


def _catalog_text(catalog: ExerciseCatalog) -> str:
    text = "🕑 <b>Недавние упражнения</b>\n"

    recents = catalog.recents
    if recents:
        text += "\n".join(f"• {html.escape(name)}" for name in recents)
    else:
        text += "<i>Нет недавних упражнений</i>"

    text += f"\n\n⭐ <b>Избранные упражнения</b> ({len(catalog.favorites)})\n"
    text += "Нажми на упражнение, чтобы удалить его из избранного:"
    return text


async def _show_catalog(message: Message, catalog: ExerciseCatalog, edit: bool = False):
    await send_or_edit(message, _catalog_text(catalog), favorites_kb(catalog.favorites), edit=edit)


@router.message(Command("exercises"))
async def cmd_exercises(message: Message, state: FSMContext, sessions: SessionManager):
    """Команда /exercises"""
    await state.clear()
    await _show_catalog(message, sessions.get(message.from_user.id).catalog)


@router.callback_query(F.data == "exercises_list")
async def show_exercises_list(callback: CallbackQuery, state: FSMContext, sessions: SessionManager):
    """Показать недавние и избранные упражнения"""
    await state.clear()
    await _show_catalog(callback.message, sessions.get(callback.from_user.id).catalog, edit=True)
    await callback.answer()


@router.callback_query(F.data == "exercise_add")
async def add_exercise_start(callback: CallbackQuery, state: FSMContext):
    """Начало добавления упражнения"""
    await callback.message.edit_text(
        "✏️ <b>Добавление упражнения</b>\n\n"
        "Введи название упражнения:\n"
        "<i>Например: Жим лежа, Приседания, Тяга штанги</i>",
        reply_markup=back_kb("exercises_list"),
        parse_mode="HTML"
    )

    await state.set_state(ExerciseStates.entering_name)
    await callback.answer()


@router.message(ExerciseStates.entering_name)
async def add_exercise_name(message: Message, state: FSMContext, sessions: SessionManager):
    """Получение названия упражнения"""
    exercise_name = (message.text or "").strip()

    if not exercise_name:
        await message.answer(
            "❌ Название не может быть пустым. Попробуй еще раз:"
        )
        return

    catalog = sessions.get(message.from_user.id).catalog

    if not catalog.add_favorite(exercise_name):
        await message.answer(
            f"❌ Упражнение <b>{html.escape(exercise_name)}</b> уже есть в избранном.\n\n"
            "Введи другое название:",
            reply_markup=back_kb("exercises_list"),
            parse_mode="HTML"
        )
        return

    await state.clear()
    await message.answer(f"✅ Упражнение <b>{html.escape(exercise_name)}</b> добавлено!", parse_mode="HTML")
    await _show_catalog(message, catalog)


@router.callback_query(F.data.startswith("fav_delete_"))
async def delete_favorite(callback: CallbackQuery, sessions: SessionManager):
    """Удалить упражнение из избранного"""
    catalog = sessions.get(callback.from_user.id).catalog
    position = int(callback.data.rsplit("_", 1)[1])

    try:
        name = catalog.remove_favorite(position)
    except IndexOutOfRange:
        await _show_catalog(callback.message, catalog, edit=True)
        await callback.answer("❌ Упражнение не найдено", show_alert=True)
        return

    await _show_catalog(callback.message, catalog, edit=True)
    await callback.answer(f"🗑 {name} удалено из избранного")
