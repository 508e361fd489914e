import os
from dotenv import load_dotenv

load_dotenv()

# Токен бота из .env файла
BOT_TOKEN = os.getenv('BOT_TOKEN')

# Уровень логирования
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

# Пауза после ввода текста, после которой показываются подсказки (сек)
SUGGESTION_DELAY = float(os.getenv('SUGGESTION_DELAY', '0.3'))

# Сколько недавних упражнений помнить
MAX_RECENT = int(os.getenv('MAX_RECENT', '5'))

# Допустимые диапазоны для степперов
WEIGHT_MIN = float(os.getenv('WEIGHT_MIN', '0'))
WEIGHT_MAX = float(os.getenv('WEIGHT_MAX', '500'))
REPS_MIN = float(os.getenv('REPS_MIN', '1'))
REPS_MAX = float(os.getenv('REPS_MAX', '100'))

# Избранные упражнения по умолчанию
DEFAULT_FAVORITES = [
    "Жим лёжа",
    "Приседания",
    "Становая тяга",
    "Подтягивания",
    "Отжимания",
    "Жим штанги стоя",
    "Тяга штанги в наклоне",
    "Бицепс со штангой",
    "Трицепс на блоке",
    "Жим ногами",
    "Выпады",
    "Планка",
]

_favorites_env = os.getenv('DEFAULT_FAVORITES')
if _favorites_env:
    DEFAULT_FAVORITES = [name.strip() for name in _favorites_env.split(',') if name.strip()]
