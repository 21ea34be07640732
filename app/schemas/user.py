from pydantic import BaseModel, EmailStr, Field
from typing import Optional

class UserCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=80, description="Nombre completo del usuario")
    email: EmailStr = Field(..., description="Email válido")
    # 72 es el límite de bcrypt
    password: str = Field(..., min_length=8, max_length=72, description="Contraseña (mín. 8 caracteres)")

class Login(BaseModel):
    email: EmailStr = Field(..., description="Email del usuario")
    password: str = Field(..., min_length=1, description="Contraseña")

class UserOut(BaseModel):
    id: str
    name: str
    email: EmailStr
    created_at: Optional[str] = None

class TokenOut(BaseModel):
    token: str
    user: UserOut
