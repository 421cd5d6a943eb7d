"""Initialize the database - creates all tables and adds missing columns/indexes."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import Base, close_engine, get_engine
import app.models  # noqa: F401 - registers all models
from app.utils.schema_sync import sync_missing_schema_objects


def init_db():
    print("Creating all database tables...")
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    applied = sync_missing_schema_objects(engine, Base.metadata)
    for change in applied:
        print(f"  + {change}")
    close_engine()
    print("Database initialized successfully.")


if __name__ == "__main__":
    init_db()
