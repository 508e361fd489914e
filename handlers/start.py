from aiogram import Router, F
from aiogram.types import Message, CallbackQuery
from aiogram.filters import CommandStart, Command
from aiogram.fsm.context import FSMContext

from keyboards.inline import main_menu_kb
from training.manager import SessionManager

router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext, sessions: SessionManager):
    """Команда /start"""
    # Очищаем состояние
    await state.clear()

    # Создаем сессию пользователя
    sessions.get(message.from_user.id)

    await message.answer(
        f"👋 Привет, {message.from_user.first_name}!\n\n"
        "🏋️ Я помогу записывать подходы во время тренировки.\n\n"
        "Что умею:\n"
        "• Записывать подходы: упражнение, вес, повторения, время\n"
        "• Подсказывать упражнения из избранного и недавних\n"
        "• Показывать и удалять подходы текущей сессии\n\n"
        "⚠️ Данные хранятся только до перезапуска бота.\n\n"
        "Выбери действие:",
        reply_markup=main_menu_kb()
    )


@router.message(Command("help"))
async def cmd_help(message: Message):
    """Команда /help"""
    help_text = """
📖 <b>Справка по боту</b>

<b>Основные команды:</b>
/start - Главное меню
/new - Записать новый подход
/sets - Подходы текущей сессии
/exercises - Избранные упражнения
/end - Завершить сессию
/help - Эта справка

<b>Как записывать подходы:</b>
Начни вводить название упражнения, бот подскажет подходящие из избранного и недавних.
Вес и повторения меняй кнопками ➖/➕ или просто напиши:
• <code>80x10</code> - 80кг на 10 повторений
• <code>80 10</code> - то же самое
• <code>+5</code> / <code>-5</code> - изменить вес

<b>Время:</b>
Нажми ⏱ перед подходом и ⏹ после, бот посчитает длительность.

Вес 0 допустим - для упражнений с собственным весом 💪
    """
    await message.answer(help_text, parse_mode="HTML")


@router.callback_query(F.data == "menu_main")
async def show_main_menu(callback: CallbackQuery, state: FSMContext):
    """Показать главное меню"""
    await state.clear()

    await callback.message.edit_text(
        "🏋️ <b>Главное меню</b>\n\n"
        "Выбери действие:",
        reply_markup=main_menu_kb(),
        parse_mode="HTML"
    )
    await callback.answer()


@router.message(Command("end"))
async def cmd_end(message: Message, state: FSMContext, sessions: SessionManager):
    """Команда /end - завершить сессию и забыть ее подходы"""
    await state.clear()
    sessions.drop(message.from_user.id)

    await message.answer(
        "🏁 Сессия завершена, подходы и черновик удалены.\n\n"
        "Нажми «Новый подход», чтобы начать заново.",
        reply_markup=main_menu_kb()
    )
