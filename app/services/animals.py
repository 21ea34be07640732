# app/services/animals.py
import base64
import logging
from typing import Any, Dict, List, NamedTuple, Optional, Sequence
from fastapi import Depends
from pydantic import ValidationError

from ..config import get_settings
from ..either import Either, Failure, Success
from ..repositories.animals import AnimalRepository, get_animal_repository
from ..schemas.animal import AnimalCreate
from ..utils import validation_message

logger = logging.getLogger(__name__)

MAX_IMAGES = 5


class ImageUpload(NamedTuple):
    content_type: str
    data: bytes


def format_animal_images(animals: Sequence[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Copia cada animal sustituyendo sus imágenes binarias por base64,
    en el mismo orden. No modifica los animales de entrada.
    """
    return [
        {
            **animal,
            "images": [
                base64.b64encode(image["image_data"]).decode("ascii")
                for image in animal.get("images", [])
            ],
        }
        for animal in animals
    ]


class GetAvailableAnimalsService:
    def __init__(self, animal_repository: AnimalRepository):
        self.animal_repository = animal_repository

    async def execute(
        self,
        user_id: str,
        gender: Optional[str] = None,
        animal_type: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Either[Dict[str, str], Dict[str, List[Dict[str, Any]]]]:
        animals = await self.animal_repository.find_all_available_not_from_user(
            user_id=user_id,
            gender=gender,
            animal_type=animal_type,
            name=name,
        )
        return Success.create({"animals": format_animal_images(animals)})


class CreateAnimalService:
    def __init__(self, animal_repository: AnimalRepository, max_image_bytes: int):
        self.animal_repository = animal_repository
        self.max_image_bytes = max_image_bytes

    def _check_images(self, images: Sequence[ImageUpload]) -> Optional[str]:
        if len(images) > MAX_IMAGES:
            return f"images: Máximo {MAX_IMAGES} imágenes por animal"
        for image in images:
            if not (image.content_type or "").startswith("image/"):
                return "images: Solo se permiten imágenes"
            if not image.data:
                return "images: Imagen vacía"
            if len(image.data) > self.max_image_bytes:
                return "images: Imagen demasiado grande"
        return None

    async def execute(
        self,
        owner_id: str,
        data: Dict[str, Any],
        images: Sequence[ImageUpload] = (),
    ) -> Either[Dict[str, str], Dict[str, Any]]:
        try:
            payload = AnimalCreate(**data)
        except ValidationError as exc:
            return Failure.create({"message": validation_message(exc)})

        error = self._check_images(images)
        if error:
            return Failure.create({"message": error})

        animal = await self.animal_repository.create(
            owner_id, payload.model_dump(), [image.data for image in images]
        )
        logger.info(f"Animal {animal['id']} publicado por {owner_id}")
        return Success.create(format_animal_images([animal])[0])


async def get_available_animals_service(
    animal_repository: AnimalRepository = Depends(get_animal_repository),
) -> GetAvailableAnimalsService:
    return GetAvailableAnimalsService(animal_repository)


async def get_create_animal_service(
    animal_repository: AnimalRepository = Depends(get_animal_repository),
) -> CreateAnimalService:
    return CreateAnimalService(animal_repository, get_settings().max_image_bytes)
