import unittest

from workout_bot.errors import ConflictError, NotFoundError, StorageError
from workout_bot.models import Exercise, User, Workout, WorkoutExercise
from workout_bot.store import Store
from tests.helpers import make_store


class TestStore(unittest.TestCase):
    def setUp(self):
        self.store, self.engine = make_store()

    def tearDown(self):
        self.engine.dispose()

    def test_create_assigns_identity_and_timestamp(self):
        first = self.store.create(Exercise(name="Squats", description="Legs", category="strength"))
        second = self.store.create(Exercise(name="Plank", description="Core", category="flexibility"))

        self.assertIsNotNone(first.id)
        self.assertNotEqual(first.id, second.id)
        self.assertIsNotNone(first.created_at)
        # Detached objects stay readable
        self.assertEqual(first.name, "Squats")

    def test_find_by_id(self):
        created = self.store.create(Workout(title="Leg Day"))
        found = self.store.find_by_id(Workout, created.id)
        self.assertEqual(found.title, "Leg Day")

    def test_find_by_id_missing_raises_not_found(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.store.find_by_id(Exercise, 999)
        self.assertEqual(ctx.exception.kind, "Exercise")
        self.assertEqual(ctx.exception.key, 999)

    def test_find_all_in_insertion_order(self):
        for title in ["A", "B", "C"]:
            self.store.create(Workout(title=title))
        self.assertEqual([w.title for w in self.store.find_all(Workout)], ["A", "B", "C"])

    def test_find_where_and_first_where(self):
        self.store.create(User(username="alice", password="x"))
        self.store.create(User(username="bob", password="y"))

        self.assertEqual(len(self.store.find_where(User, User.username == "bob")), 1)
        self.assertEqual(self.store.first_where(User, User.username == "alice").password, "x")
        self.assertIsNone(self.store.first_where(User, User.username == "Alice"))

    def test_count(self):
        self.assertEqual(self.store.count(Workout), 0)
        self.store.create(Workout(title="A"))
        self.store.create(Workout(title="B"))
        self.assertEqual(self.store.count(Workout), 2)

    def test_duplicate_username_is_a_conflict(self):
        self.store.create(User(username="alice", password="x"))
        with self.assertRaises(ConflictError):
            self.store.create(User(username="alice", password="y"))
        self.assertEqual(self.store.count(User), 1)

    def test_driver_overflow_becomes_storage_error(self):
        workout = self.store.create(Workout(title="Leg Day"))
        exercise = self.store.create(Exercise(name="Squats", description="", category="strength"))
        with self.assertRaises(StorageError):
            self.store.create(WorkoutExercise(
                workout_id=workout.id, exercise_id=exercise.id, sets=10 ** 20, reps=1, weight=1.0
            ))
        self.assertEqual(self.store.count(WorkoutExercise), 0)

    def test_dangling_foreign_key_is_rejected(self):
        with self.assertRaises(ConflictError):
            self.store.create(WorkoutExercise(workout_id=10, exercise_id=20, sets=1, reps=1, weight=1.0))
        self.assertEqual(self.store.count(WorkoutExercise), 0)

    def test_create_many_is_all_or_nothing(self):
        self.store.create(User(username="taken", password="x"))
        with self.assertRaises(ConflictError):
            self.store.create_many([
                User(username="fresh", password="x"),
                User(username="taken", password="y"),
            ])
        self.assertIsNone(self.store.first_where(User, User.username == "fresh"))

    def test_transaction_rolls_back_on_error(self):
        with self.assertRaises(RuntimeError):
            with self.store.transaction() as db:
                db.add(Workout(title="never saved"))
                db.flush()
                raise RuntimeError("abort")
        self.assertEqual(self.store.count(Workout), 0)

    def test_store_is_independent_of_other_stores(self):
        other, engine = make_store()
        try:
            other.create(Workout(title="elsewhere"))
            self.assertEqual(self.store.count(Workout), 0)
            self.assertIsInstance(other, Store)
        finally:
            engine.dispose()


if __name__ == '__main__':
    unittest.main()
