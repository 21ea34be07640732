from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from .config import get_settings

_settings = get_settings()
_client: AsyncIOMotorClient | None = None
_db: AsyncIOMotorDatabase | None = None

async def get_db() -> AsyncIOMotorDatabase:
    global _client, _db
    if _db is None:
        _client = AsyncIOMotorClient(_settings.mongodb_uri)
        _db = _client[_settings.db_name]
        await _db.users.create_index("email", unique=True)
        await _db.animals.create_index([("owner_id", 1)])
        await _db.animals.create_index([("available", 1), ("type", 1), ("gender", 1)])
        await _db.chat_messages.create_index([("sender_id", 1), ("receiver_id", 1)])
        await _db.chat_messages.create_index([("created_at", 1)])
    return _db
