import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.fsm.storage.memory import MemoryStorage

import config
from training.manager import SessionManager

# Импортируем роутеры
from handlers import start, exercises, workout

# Настройка логирования
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)


def create_dispatcher() -> Dispatcher:
    """Диспетчер с роутерами и сессиями пользователей в памяти"""
    dp = Dispatcher(storage=MemoryStorage())

    dp["sessions"] = SessionManager(
        favorites=config.DEFAULT_FAVORITES,
        max_recent=config.MAX_RECENT,
        suggestion_delay=config.SUGGESTION_DELAY,
        weight_range=(config.WEIGHT_MIN, config.WEIGHT_MAX),
        reps_range=(config.REPS_MIN, config.REPS_MAX),
    )

    # Регистрируем роутеры
    dp.include_router(start.router)
    dp.include_router(exercises.router)
    dp.include_router(workout.router)

    return dp


async def main():
    """Главная функция запуска бота"""

    # Проверяем наличие токена
    if not config.BOT_TOKEN:
        logger.error("BOT_TOKEN не найден! Создай файл .env с токеном бота.")
        return

    # Инициализируем бота
    bot = Bot(
        token=config.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML)
    )

    dp = create_dispatcher()

    logger.info("Бот запущен!")

    try:
        # Запускаем polling
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        await bot.session.close()
        logger.info("Бот остановлен")


if __name__ == '__main__':
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Бот остановлен пользователем")
