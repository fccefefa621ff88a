from app.database.base_class import Base
from app.database.db import get_db

__all__ = ["Base", "get_db"]
