from workout_bot.store import Store
from workout_bot.models.user import User
from workout_bot.schemas.user import UserCreate
from workout_bot.security import hash_password

def get_user_by_username(store: Store, username: str):
    return store.first_where(User, User.username == username)

def create_user(store: Store, user: UserCreate):
    # Hash the password; the plaintext never reaches the store
    hashed_password = hash_password(user.password)
    db_user = User(username=user.username, password=hashed_password)
    return store.create(db_user)
