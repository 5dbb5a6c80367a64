from .session import engine, AsyncSessionLocal, Base, get_db, init_db, seed_user_types

__all__ = [
    "engine",
    "AsyncSessionLocal",
    "Base",
    "get_db",
    "init_db",
    "seed_user_types"
]
