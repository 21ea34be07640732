# app/routers/users.py
from fastapi import APIRouter, Depends, Request, status

from ..middleware.rate_limit import apply_rate_limit
from ..schemas.user import UserOut
from ..security import get_current_user
from ..services.users import CreateUserService, get_create_user_service, public_user
from ..utils import result_to_response

router = APIRouter()

@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserOut)
async def create_user(
    request: Request,
    payload: dict,
    service: CreateUserService = Depends(get_create_user_service),
):
    # Rate limiting: máximo 5 registros por minuto por IP
    apply_rate_limit(request, "5/minute")

    result = await service.execute(
        name=payload.get("name"),
        email=payload.get("email"),
        password=payload.get("password"),
    )
    return result_to_response(result, status.HTTP_201_CREATED)

@router.get("/me", response_model=UserOut)
async def get_me(current=Depends(get_current_user)):
    return public_user(current)
