import sys
import os

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.database.postgres import Database

async def create_tables():
    """
    Create the users and messages tables based on the SQLAlchemy models.
    """
    async with Database(settings.database_url, echo=settings.database_echo) as database:
        await database.create_all()

import asyncio
asyncio.run(create_tables())
