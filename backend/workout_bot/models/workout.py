from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from workout_bot.database import Base

class Workout(Base):
    __tablename__ = "workouts"

    id = Column(Integer, primary_key=True, index=True)
    # Nullable: workouts created from the bot are not tied to a user
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True, index=True)
    title = Column(String(150), nullable=False)
    date = Column(DateTime, nullable=True)
    comment = Column(Text, default="")

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships (no cascade: deleting a workout leaves its entries behind)
    user = relationship("User", back_populates="workouts")
    exercises = relationship(
        "WorkoutExercise",
        back_populates="workout",
        order_by="WorkoutExercise.id",
    )


class WorkoutExercise(Base):
    """One logged block of sets for an exercise inside a workout."""
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True, index=True)
    workout_id = Column(Integer, ForeignKey("workouts.id"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False, index=True)

    sets = Column(Integer, default=0)
    reps = Column(Integer, default=0)
    weight = Column(Float, default=0.0)  # unit-less

    workout = relationship("Workout", back_populates="exercises")
    exercise = relationship("Exercise")
