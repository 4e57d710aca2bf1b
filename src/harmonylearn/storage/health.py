"""
Readiness Probe
"""

from sqlalchemy import select

from harmonylearn.core.database import Database
from harmonylearn.core.models import User


async def ping(database: Database) -> None:
    """Cheap read against the users table; raises when the database is unusable."""
    async with database.session() as session:
        await session.execute(select(User.id).limit(1))
