from pydantic import BaseModel, Field
from typing import Optional, List, Literal

Gender = Literal["male", "female"]

class AnimalCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=80)
    type: str = Field(..., min_length=1, max_length=40, description="Especie: dog, cat, ...")
    gender: Gender
    breed: Optional[str] = Field(None, max_length=80)
    age_years: Optional[float] = Field(None, ge=0, le=40)
    size: Optional[Literal["small", "medium", "large"]] = None
    description: Optional[str] = Field(None, max_length=1000)

class AnimalOut(AnimalCreate):
    id: str
    owner_id: str
    available: bool = True
    images: List[str] = []   # base64
    created_at: Optional[str] = None

class AvailableAnimalsOut(BaseModel):
    animals: List[AnimalOut]
