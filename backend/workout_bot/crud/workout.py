"""
Workout CRUD
------------
Data access for workouts and their logged exercise entries.
"""
from workout_bot.store import Store
from workout_bot.models.workout import Workout, WorkoutExercise
from workout_bot.schemas.workout import WorkoutCreate, WorkoutExerciseCreate

def create_workout(store: Store, obj_in: WorkoutCreate):
    return store.create(Workout(**obj_in.model_dump()))

def list_workouts(store: Store):
    return store.find_all(Workout)

def add_workout_exercise(store: Store, obj_in: WorkoutExerciseCreate):
    return store.create(WorkoutExercise(**obj_in.model_dump()))

def list_workout_entries(store: Store, workout_id: int):
    """Entries of one workout in insertion order."""
    return store.find_where(WorkoutExercise, WorkoutExercise.workout_id == workout_id)

def count_workouts(store: Store) -> int:
    return store.count(Workout)

def count_workout_entries(store: Store) -> int:
    return store.count(WorkoutExercise)
