# app/repositories/chat.py
from datetime import datetime, timezone
from typing import Any, Dict, List
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import get_db
from ..utils import to_id


class ChatMessageRepository:
    """Acceso a la colección chat_messages."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db.chat_messages

    async def create(self, sender_id: str, receiver_id: str, content: str) -> Dict[str, Any]:
        doc = {
            "sender_id": sender_id,
            "receiver_id": receiver_id,
            "content": content,
            "created_at": datetime.now(timezone.utc),
        }
        res = await self.collection.insert_one(doc)
        doc["_id"] = res.inserted_id
        return to_id(doc)

    async def find_between_users(self, user_id: str, other_user_id: str) -> List[Dict[str, Any]]:
        query = {
            "$or": [
                {"sender_id": user_id, "receiver_id": other_user_id},
                {"sender_id": other_user_id, "receiver_id": user_id},
            ]
        }
        items = []
        async for doc in self.collection.find(query).sort("created_at", 1):
            items.append(to_id(doc))
        return items


async def get_chat_message_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> ChatMessageRepository:
    return ChatMessageRepository(db)
