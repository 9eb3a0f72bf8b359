from workout_bot.store import Store
from workout_bot.models.exercise import Exercise
from workout_bot.schemas.workout import ExerciseCreate

def get_exercise(store: Store, exercise_id: int):
    return store.find_by_id(Exercise, exercise_id)

def list_exercises(store: Store):
    return store.find_all(Exercise)

def count_exercises(store: Store) -> int:
    return store.count(Exercise)

def create_exercises(store: Store, items):
    return store.create_many(Exercise(**item.model_dump()) for item in items)

def create_exercise(store: Store, item: ExerciseCreate):
    return store.create(Exercise(**item.model_dump()))
