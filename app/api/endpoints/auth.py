from fastapi import APIRouter, status

from app.core.deps import Gateway
from app.schemas.common import MessageResponse
from app.schemas.user import LoginResponse, UserLogin, UserSignup
from app.services.user_service import authenticate, create_user

router = APIRouter(tags=["auth"])


@router.post("/signup", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def signup(data: UserSignup, gw: Gateway):
    await create_user(gw, data)
    return MessageResponse(message="User signup successful")


@router.post("/login", response_model=LoginResponse)
async def login(data: UserLogin, gw: Gateway):
    # no token is issued; clients resend user_id on later calls
    user = await authenticate(gw, data)
    return LoginResponse(message="Login success", user=user)
