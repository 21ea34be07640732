from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional
from uuid import uuid4
from fastapi import Depends, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
import logging

from .config import get_settings
from .repositories.users import UserRepository, get_user_repository

logger = logging.getLogger(__name__)

ALGO = "HS256"
TOKEN_EXPIRES = timedelta(hours=1)
# Claims que añade el Authenticator y que no forman parte del payload
RESERVED_CLAIMS = ("iat", "exp", "jti")

pwd = CryptContext(schemes=["bcrypt"], deprecated="auto")
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login")


def hash_password(plain: str) -> str:
    return pwd.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    if not hashed:
        return False
    return pwd.verify(plain, hashed)


class Authenticator:
    """
    Emite y valida tokens JWT firmados con una validez fija de una hora.
    El servidor no guarda sesiones: la validez depende sólo de la firma
    y de la expiración embebida en el token.
    """

    def __init__(self, secret: str, clock: Optional[Callable[[], datetime]] = None):
        self._secret = secret
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def generate_token(self, payload: Dict[str, Any]) -> str:
        issued_at = self._clock()
        claims = dict(payload)
        claims.update({
            "iat": issued_at,
            "exp": issued_at + TOKEN_EXPIRES,
            "jti": uuid4().hex,
        })
        return jwt.encode(claims, self._secret, algorithm=ALGO)

    def validate_token(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Devuelve el payload original si la firma y la expiración son válidas.
        Token mal formado, firma incorrecta o expirado -> None (sin distinguir).
        """
        try:
            # aud/sub vienen del payload del llamante: sólo se verifican firma y expiración
            claims = jwt.decode(
                token, self._secret, algorithms=[ALGO],
                options={"verify_aud": False, "verify_sub": False},
            )
        except JWTError:
            return None
        except (AttributeError, TypeError, ValueError):
            # jose no envuelve todos los errores de formato en JWTError
            return None
        return {k: v for k, v in claims.items() if k not in RESERVED_CLAIMS}


_authenticator: Authenticator | None = None
def get_authenticator() -> Authenticator:
    global _authenticator
    if _authenticator is None:
        _authenticator = Authenticator(get_settings().jwt_secret)
    return _authenticator


async def get_current_user_id(
    token: str = Depends(oauth2_scheme),
    authenticator: Authenticator = Depends(get_authenticator),
) -> str:
    payload = authenticator.validate_token(token)
    if not payload or not payload.get("id"):
        raise HTTPException(status_code=401, detail="Token inválido")
    return str(payload["id"])


async def get_current_user(
    user_id: str = Depends(get_current_user_id),
    users: UserRepository = Depends(get_user_repository),
):
    user = await users.find_by_id(user_id)
    if not user:
        raise HTTPException(status_code=401, detail="Usuario no encontrado")
    return user
