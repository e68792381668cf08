import logging
from typing import Optional

from sqlalchemy import insert, select

from app.core.errors import AuthError, ConflictError, ValidationError
from app.core.security import hash_password, verify_password
from app.db.gateway import QueryGateway
from app.models.user import User
from app.schemas.user import UserLogin, UserRead, UserSignup

logger = logging.getLogger(__name__)


async def get_user_by_email(gw: QueryGateway, email: str) -> Optional[User]:
    row = await gw.fetch_one(select(User).where(User.email == email))
    return row[0] if row else None


async def create_user(gw: QueryGateway, data: UserSignup) -> None:
    if not (data.full_name and data.email and data.password and data.confirm_password):
        raise ValidationError("Please fill all required fields")
    if data.password != data.confirm_password:
        raise ValidationError("Passwords do not match")

    if await get_user_by_email(gw, data.email):
        logger.info("signup: email already registered")
        raise ConflictError("Email already registered")

    await gw.execute(
        insert(User).values(
            full_name=data.full_name,
            email=data.email,
            phone=str(data.phone) if data.phone else "",
            password=hash_password(data.password),
        )
    )
    logger.info("signup: created user %s", data.email)


async def authenticate(gw: QueryGateway, data: UserLogin) -> UserRead:
    """Check credentials and return the public part of the user record."""
    if not (data.email and data.password):
        raise ValidationError("Please provide email and password")

    user = await get_user_by_email(gw, data.email)
    if not user or not verify_password(data.password, user.password):
        logger.warning("login: rejected credentials for %s", data.email)
        raise AuthError()

    return UserRead.model_validate(user)
