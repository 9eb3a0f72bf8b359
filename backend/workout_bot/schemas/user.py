from pydantic import BaseModel, Field

# Schema for creating user
class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1)
