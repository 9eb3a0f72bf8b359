import unittest

from workout_bot.models import Exercise
from workout_bot.seed import DEFAULT_EXERCISES, seed_exercises
from workout_bot.schemas.workout import ExerciseCreate
from workout_bot.crud import exercise as crud_exercise
from tests.helpers import make_store


class TestSeedExercises(unittest.TestCase):
    def setUp(self):
        self.store, self.engine = make_store()

    def tearDown(self):
        self.engine.dispose()

    def test_seeds_catalog_when_empty(self):
        self.assertEqual(seed_exercises(self.store), 5)
        names = [e.name for e in self.store.find_all(Exercise)]
        self.assertEqual(names, [item.name for item in DEFAULT_EXERCISES])

    def test_seeding_is_idempotent(self):
        seed_exercises(self.store)
        self.assertEqual(seed_exercises(self.store), 0)
        self.assertEqual(self.store.count(Exercise), 5)

    def test_existing_catalog_is_left_alone(self):
        crud_exercise.create_exercise(self.store, ExerciseCreate(name="Deadlift", category="strength"))
        self.assertEqual(seed_exercises(self.store), 0)
        self.assertEqual(self.store.count(Exercise), 1)


if __name__ == '__main__':
    unittest.main()
