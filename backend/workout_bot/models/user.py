from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from workout_bot.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(100), unique=True, index=True, nullable=False)  # case-sensitive
    password = Column(String(255), nullable=False)  # argon2 hash, never plaintext

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    workouts = relationship("Workout", back_populates="user")

    def __repr__(self):
        return f"<User id={self.id} username={self.username!r}>"
