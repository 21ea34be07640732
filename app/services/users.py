# app/services/users.py
import logging
from typing import Any, Dict
from fastapi import Depends
from pydantic import ValidationError

from ..either import Either, Failure, Success
from ..repositories.users import UserRepository, get_user_repository
from ..schemas.user import Login, UserCreate
from ..security import Authenticator, get_authenticator, hash_password, verify_password
from ..utils import validation_message

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Email o contraseña inválidos"


def public_user(doc: Dict[str, Any]) -> Dict[str, Any]:
    """Usuario sin el hash de la contraseña."""
    return {k: v for k, v in doc.items() if k != "password_hash"}


class CreateUserService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, name: Any, email: Any, password: Any) -> Either[Dict[str, str], Dict[str, Any]]:
        try:
            payload = UserCreate(name=name, email=email, password=password)
        except ValidationError as exc:
            return Failure.create({"message": validation_message(exc)})

        if await self.user_repository.find_by_email(payload.email):
            return Failure.create({"message": "Email ya registrado"})

        user = await self.user_repository.create(
            name=payload.name,
            email=payload.email,
            password_hash=hash_password(payload.password),
        )
        logger.info(f"Usuario registrado: {user['id']}")
        return Success.create(public_user(user))


class AuthenticateUserService:
    def __init__(self, user_repository: UserRepository, authenticator: Authenticator):
        self.user_repository = user_repository
        self.authenticator = authenticator

    async def execute(self, email: Any, password: Any) -> Either[Dict[str, str], Dict[str, Any]]:
        try:
            payload = Login(email=email, password=password)
        except ValidationError as exc:
            return Failure.create({"message": validation_message(exc)})

        user = await self.user_repository.find_by_email(payload.email)
        if not user or not verify_password(payload.password, user.get("password_hash", "")):
            return Failure.create({"message": INVALID_CREDENTIALS})

        token = self.authenticator.generate_token({"id": user["id"]})
        return Success.create({"token": token, "user": public_user(user)})


async def get_create_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> CreateUserService:
    return CreateUserService(user_repository)


async def get_authenticate_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
    authenticator: Authenticator = Depends(get_authenticator),
) -> AuthenticateUserService:
    return AuthenticateUserService(user_repository, authenticator)
