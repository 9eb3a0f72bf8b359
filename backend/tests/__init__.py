import os

# Cheap argon2 parameters so the suite does not allocate 100 MB per hash
os.environ.setdefault("ARGON2_MEMORY_COST", "8192")
os.environ.setdefault("ARGON2_PARALLELISM", "1")
os.environ.setdefault("JWT_SECRET", "test-secret")
