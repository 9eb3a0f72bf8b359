# Import all models here
from workout_bot.models.user import User
from workout_bot.models.exercise import Exercise
from workout_bot.models.workout import Workout, WorkoutExercise
