import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from settleup.core.config import settings

logger = logging.getLogger(__name__)


class MongoDatabase:
    """MongoDB connection manager."""

    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

mongodb = MongoDatabase()

async def connect_to_mongo():
    """Connect to MongoDB."""
    mongodb.client = AsyncIOMotorClient(settings.MONGODB_URL)
    mongodb.db = mongodb.client[settings.DATABASE_NAME]

    await create_indexes()
    logger.info("Connected to MongoDB: %s", settings.DATABASE_NAME)

async def close_mongo_connection():
    """Disconnect from MongoDB."""
    if mongodb.client is not None:
        mongodb.client.close()
        logger.info("Disconnected from MongoDB")

async def create_indexes():
    """Create database indexes."""
    # Group membership lookups
    await mongodb.db["groups"].create_index([("members.user_id", 1)])

    # Expenses are always fetched per group, newest first
    await mongodb.db["expenses"].create_index([("group_id", 1), ("expense_date", -1)])

    # Reminders
    await mongodb.db["payment_reminders"].create_index([("group_id", 1), ("created_at", -1)])
    await mongodb.db["payment_reminders"].create_index("to_user_id")

def get_db() -> AsyncIOMotorDatabase:
    """Get database instance."""
    return mongodb.db
