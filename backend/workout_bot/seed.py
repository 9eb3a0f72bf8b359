import logging

from workout_bot.store import Store
from workout_bot.crud import exercise as crud_exercise
from workout_bot.schemas.workout import ExerciseCreate

logger = logging.getLogger(__name__)

DEFAULT_EXERCISES = [
    ExerciseCreate(name="Push-ups", description="Bodyweight chest exercise", category="strength"),
    ExerciseCreate(name="Squats", description="Compound leg exercise", category="strength"),
    ExerciseCreate(name="Plank", description="Core stability", category="flexibility"),
    ExerciseCreate(name="Running - 5km", description="Cardio 5 kilometers run", category="cardio"),
    ExerciseCreate(name="Burpees", description="Full body high-intensity", category="cardio"),
]


def seed_exercises(store: Store, items=DEFAULT_EXERCISES) -> int:
    """Populate the catalog once. Returns how many rows were inserted."""
    if crud_exercise.count_exercises(store) > 0:
        logger.debug("Exercise catalog already seeded.")
        return 0

    created = crud_exercise.create_exercises(store, items)
    logger.info(f"Seeded {len(created)} exercises.")
    return len(created)
