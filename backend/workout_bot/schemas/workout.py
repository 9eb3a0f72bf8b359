from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class ExerciseCreate(BaseModel):
    name: str = Field(..., max_length=100)
    description: str = ""
    category: str = Field("", max_length=50)


class WorkoutCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=150)
    date: Optional[datetime] = None
    comment: str = ""
    user_id: Optional[int] = None


class WorkoutExerciseCreate(BaseModel):
    # sets/reps are expected to be >= 0 but that is not enforced
    workout_id: int
    exercise_id: int
    sets: int = 0
    reps: int = 0
    weight: float = 0.0
