# app/repositories/users.py
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import get_db
from ..utils import to_id, to_object_id


class UserRepository:
    """Acceso a la colección users."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db.users

    async def find_by_id(self, user_id: str) -> Optional[Dict[str, Any]]:
        oid = to_object_id(user_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid})
        return to_id(doc) if doc else None

    async def find_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        doc = await self.collection.find_one({"email": email})
        return to_id(doc) if doc else None

    async def create(self, name: str, email: str, password_hash: str) -> Dict[str, Any]:
        doc = {
            "name": name,
            "email": email,
            "password_hash": password_hash,
            "created_at": datetime.now(timezone.utc),
        }
        res = await self.collection.insert_one(doc)
        return to_id(await self.collection.find_one({"_id": res.inserted_id}))


async def get_user_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> UserRepository:
    return UserRepository(db)
