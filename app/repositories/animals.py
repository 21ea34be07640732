# app/repositories/animals.py
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..db import get_db
from ..utils import to_id

MAX_RESULTS = 500


class AnimalRepository:
    """
    Acceso a la colección animals.
    Cada animal guarda sus imágenes embebidas: [{"image_data": bytes}, ...].
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db.animals

    async def find_all_available_not_from_user(
        self,
        user_id: str,
        gender: Optional[str] = None,
        animal_type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Animales disponibles para adopción que no son del usuario.
        gender/type por igualdad, name por coincidencia parcial sin mayúsculas.
        """
        query: Dict[str, Any] = {"available": True, "owner_id": {"$ne": user_id}}
        if gender:
            query["gender"] = gender
        if animal_type:
            query["type"] = animal_type
        if name:
            query["name"] = {"$regex": re.escape(name), "$options": "i"}

        docs = await self.collection.find(query).sort("created_at", -1).to_list(MAX_RESULTS)
        return [to_id(d) for d in docs]

    async def create(self, owner_id: str, data: Dict[str, Any], images: List[bytes]) -> Dict[str, Any]:
        doc = dict(data)
        doc["owner_id"] = owner_id     # lo pone el backend
        doc["available"] = True
        doc["images"] = [{"image_data": image} for image in images]
        doc["created_at"] = datetime.now(timezone.utc)
        res = await self.collection.insert_one(doc)
        return to_id(await self.collection.find_one({"_id": res.inserted_id}))


async def get_animal_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> AnimalRepository:
    return AnimalRepository(db)
