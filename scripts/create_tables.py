"""
Script to create database tables using SQLAlchemy
Run this once to initialize the database schema
Run from project root: python -m scripts.create_tables
"""
import asyncio
import sys
import os

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from holiday_calendar.config import Settings
from holiday_calendar.db import Base, Database


async def create_tables():
    """Create all database tables"""
    database = Database(Settings.from_env())
    print("🔄 Creating database tables...")
    try:
        await database.init()
        print("Database tables created successfully!")
        print("\nTables created:")
        for name in Base.metadata.tables:
            print(f"  - {name}")
    except Exception as e:
        print(f"❌ Error creating tables: {e}")
        raise
    finally:
        await database.close()

if __name__ == "__main__":
    asyncio.run(create_tables())
