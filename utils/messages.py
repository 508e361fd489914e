from contextlib import suppress

from aiogram.exceptions import TelegramBadRequest
from aiogram.types import InlineKeyboardMarkup, Message


async def send_or_edit(message: Message, text: str, reply_markup: InlineKeyboardMarkup = None,
                       edit: bool = False):
    """Отредактировать сообщение с кнопками или отправить новое"""
    if edit:
        # Telegram ругается, если текст и кнопки не изменились
        with suppress(TelegramBadRequest):
            await message.edit_text(text, reply_markup=reply_markup, parse_mode="HTML")
    else:
        await message.answer(text, reply_markup=reply_markup, parse_mode="HTML")
