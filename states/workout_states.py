from aiogram.fsm.state import State, StatesGroup


class WorkoutStates(StatesGroup):
    """Состояния для записи подхода"""
    entering_exercise = State()   # Ввод названия упражнения
    editing_set = State()         # Редактирование черновика подхода
    entering_weight = State()     # Ручной ввод веса
    entering_reps = State()       # Ручной ввод повторений
    reviewing_sets = State()      # Список подходов с выбором для удаления


class ExerciseStates(StatesGroup):
    """Состояния для управления упражнениями"""
    entering_name = State()       # Ввод названия избранного упражнения
