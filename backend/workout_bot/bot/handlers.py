"""
Command handlers.

One class per bot command. Every handler gets the Store in its constructor and
turns the command arguments into a reply string. Argument-count checks happen
in the dispatcher using `min_args` and `usage`.
"""
import logging
import math
import re
from datetime import datetime
from typing import Dict, List

from pydantic import ValidationError as SchemaError

from workout_bot.bot import messages
from workout_bot.crud import exercise as crud_exercise
from workout_bot.crud import user as crud_user
from workout_bot.crud import workout as crud_workout
from workout_bot.errors import ConflictError, HashingError, NotFoundError, StorageError, ValidationError
from workout_bot.schemas.user import UserCreate
from workout_bot.schemas.workout import WorkoutCreate, WorkoutExerciseCreate
from workout_bot.security import create_access_token, verify_password
from workout_bot.store import Store

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")


def to_int(value: str) -> int:
    if not _INT_RE.fullmatch(value):
        raise ValidationError(f"{value!r} is not an integer")
    return int(value)


def to_float(value: str) -> float:
    try:
        number = float(value) if "_" not in value else math.nan
    except ValueError:
        number = math.nan
    if not math.isfinite(number):
        raise ValidationError(f"{value!r} is not a number")
    return number


def parse_int(value: str) -> int:
    """Lenient integer parse: anything that is not a plain integer becomes 0."""
    try:
        return to_int(value)
    except ValidationError as e:
        logger.warning(f"{e}; using 0")
        return 0


def parse_float(value: str) -> float:
    """Lenient float parse: unparsable or non-finite values become 0.0."""
    try:
        return to_float(value)
    except ValidationError as e:
        logger.warning(f"{e}; using 0.0")
        return 0.0


class Handler:
    command: str = ""
    aliases: tuple = ()
    usage: str = ""
    min_args: int = 0

    def __init__(self, store: Store):
        self.store = store

    def handle(self, args: List[str]) -> str:
        raise NotImplementedError


class HelpHandler(Handler):
    command = "/start"
    aliases = ("/help",)

    def handle(self, args):
        return messages.HELP


class SignupHandler(Handler):
    command = "/signup"
    usage = "Usage: /signup username password"
    min_args = 2

    def handle(self, args):
        try:
            user_in = UserCreate(username=args[0], password=args[1])
        except SchemaError:
            return messages.SIGNUP_FAILED

        try:
            user = crud_user.create_user(self.store, user_in)
        except HashingError as e:
            logger.error(f"[Signup] Password hashing failed: {e}")
            return messages.SIGNUP_HASH_FAILED
        except (ConflictError, StorageError) as e:
            logger.info(f"[Signup] Could not create user: {e}")
            return messages.SIGNUP_FAILED

        logger.info(f"[Signup] Registered user {user.id}")
        return messages.SIGNUP_OK.format(token=create_access_token(user.id))


class LoginHandler(Handler):
    command = "/login"
    usage = "Usage: /login username password"
    min_args = 2

    def handle(self, args):
        username, password = args[0], args[1]
        user = crud_user.get_user_by_username(self.store, username)
        if user is None:
            return messages.USER_NOT_FOUND
        if not verify_password(password, user.password):
            return messages.WRONG_PASSWORD
        return messages.LOGIN_OK.format(token=create_access_token(user.id))


class ExercisesHandler(Handler):
    command = "/exercises"

    def handle(self, args):
        exercises = crud_exercise.list_exercises(self.store)
        if not exercises:
            return messages.NO_EXERCISES

        lines = [messages.EXERCISES_HEADER]
        for e in exercises:
            lines.append(messages.EXERCISE_LINE.format(
                id=e.id, name=e.name, description=e.description, category=e.category
            ))
        return "".join(lines)


class CreateWorkoutHandler(Handler):
    command = "/createworkout"
    usage = "Usage: /createworkout title"
    min_args = 1

    def handle(self, args):
        title = " ".join(args)
        try:
            workout_in = WorkoutCreate(title=title, date=datetime.utcnow())
            workout = crud_workout.create_workout(self.store, workout_in)
        except (SchemaError, ConflictError, StorageError) as e:
            logger.warning(f"[CreateWorkout] Failed: {e}")
            return messages.WORKOUT_CREATE_FAILED
        return messages.WORKOUT_CREATED.format(title=title, id=workout.id)


class AddExerciseHandler(Handler):
    command = "/addexercise"
    usage = "Usage: /addexercise workout_id exercise_id sets reps weight"
    min_args = 5

    def handle(self, args):
        entry = WorkoutExerciseCreate(
            workout_id=parse_int(args[0]),
            exercise_id=parse_int(args[1]),
            sets=parse_int(args[2]),
            reps=parse_int(args[3]),
            weight=parse_float(args[4]),
        )
        try:
            crud_workout.add_workout_exercise(self.store, entry)
        except (ConflictError, StorageError) as e:
            logger.warning(f"[AddExercise] Store rejected entry: {e}")
            return messages.EXERCISE_ADD_FAILED
        return messages.EXERCISE_ADDED


class MyWorkoutsHandler(Handler):
    command = "/myworkouts"

    def handle(self, args):
        workouts = crud_workout.list_workouts(self.store)
        if not workouts:
            return messages.NO_WORKOUTS

        names: Dict[int, str] = {}
        parts = []
        for w in workouts:
            parts.append(messages.WORKOUT_HEADER.format(id=w.id, title=w.title))
            for item in crud_workout.list_workout_entries(self.store, w.id):
                if item.exercise_id not in names:
                    names[item.exercise_id] = self._exercise_name(item.exercise_id)
                parts.append(messages.WORKOUT_ENTRY.format(
                    name=names[item.exercise_id],
                    sets=item.sets,
                    reps=item.reps,
                    weight=item.weight,
                ))
            parts.append("\n")
        return "".join(parts)

    def _exercise_name(self, exercise_id: int) -> str:
        try:
            return crud_exercise.get_exercise(self.store, exercise_id).name
        except NotFoundError:
            logger.warning(f"[MyWorkouts] Exercise {exercise_id} referenced by a workout is missing")
            return messages.MISSING_EXERCISE.format(id=exercise_id)


class StatsHandler(Handler):
    command = "/stats"

    def handle(self, args):
        return messages.STATS.format(
            workouts=crud_workout.count_workouts(self.store),
            entries=crud_workout.count_workout_entries(self.store),
        )


class LogoutHandler(Handler):
    command = "/logout"

    def handle(self, args):
        # Tokens are never tracked server-side, so there is nothing to invalidate
        return messages.LOGOUT


HANDLER_CLASSES = (
    HelpHandler,
    SignupHandler,
    LoginHandler,
    ExercisesHandler,
    CreateWorkoutHandler,
    AddExerciseHandler,
    MyWorkoutsHandler,
    StatsHandler,
    LogoutHandler,
)


def build_handlers(store: Store) -> List[Handler]:
    return [cls(store) for cls in HANDLER_CLASSES]
