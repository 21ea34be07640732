from pydantic import BaseModel, Field, field_validator
from datetime import datetime

class ChatMessageCreate(BaseModel):
    sender_id: str
    receiver_id: str = Field(..., description="Usuario que recibe el mensaje")
    content: str = Field(..., max_length=2000)

    @field_validator("receiver_id")
    @classmethod
    def receiver_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El destinatario es obligatorio")
        return v.strip()

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("El mensaje no puede estar vacío")
        return v.strip()

class ChatMessageIn(BaseModel):
    # sender_id nunca se toma del cliente: sale del token
    receiver_id: str | None = None
    content: str | None = None

class ChatMessageOut(BaseModel):
    id: str
    sender_id: str
    receiver_id: str
    content: str
    created_at: datetime
