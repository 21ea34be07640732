# app/routers/animals.py
from typing import List, Optional
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from ..schemas.animal import AnimalOut, AvailableAnimalsOut
from ..security import get_current_user_id
from ..services.animals import (
    CreateAnimalService,
    GetAvailableAnimalsService,
    ImageUpload,
    get_available_animals_service,
    get_create_animal_service,
)
from ..utils import result_to_response

router = APIRouter()

@router.get("/available", response_model=AvailableAnimalsOut)
async def list_available_animals(
    gender: Optional[str] = Query(None),
    animal_type: Optional[str] = Query(None, alias="type"),
    name: Optional[str] = Query(None),
    user_id: str = Depends(get_current_user_id),
    service: GetAvailableAnimalsService = Depends(get_available_animals_service),
):
    """Animales en adopción que no son del usuario autenticado"""
    result = await service.execute(user_id=user_id, gender=gender, animal_type=animal_type, name=name)
    return result_to_response(result, status.HTTP_200_OK)

@router.post("", status_code=status.HTTP_201_CREATED, response_model=AnimalOut)
async def create_animal(
    name: Optional[str] = Form(None),
    animal_type: Optional[str] = Form(None, alias="type"),
    gender: Optional[str] = Form(None),
    breed: Optional[str] = Form(None),
    age_years: Optional[float] = Form(None),
    size: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    images: List[UploadFile] = File([]),
    user_id: str = Depends(get_current_user_id),
    service: CreateAnimalService = Depends(get_create_animal_service),
):
    """Publicar un animal para adopción con sus fotos"""
    data = {
        "name": name,
        "type": animal_type,
        "gender": gender,
        "breed": breed,
        "age_years": age_years,
        "size": size,
        "description": description,
    }
    uploads = [ImageUpload(file.content_type or "", await file.read()) for file in images]
    result = await service.execute(owner_id=user_id, data=data, images=uploads)
    return result_to_response(result, status.HTTP_201_CREATED)
