# app/routers/auth.py
from fastapi import APIRouter, Depends, Request, status

from ..middleware.rate_limit import apply_rate_limit
from ..schemas.user import TokenOut
from ..services.users import AuthenticateUserService, get_authenticate_user_service
from ..utils import result_to_response

router = APIRouter()

@router.post("/login", status_code=status.HTTP_201_CREATED, response_model=TokenOut)
async def login(
    request: Request,
    payload: dict,
    service: AuthenticateUserService = Depends(get_authenticate_user_service),
):
    # Rate limiting: máximo 10 intentos de login por minuto por IP
    apply_rate_limit(request, "10/minute")

    result = await service.execute(email=payload.get("email"), password=payload.get("password"))
    return result_to_response(result, status.HTTP_201_CREATED, status.HTTP_401_UNAUTHORIZED)
