from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.gateway import QueryGateway
from app.db.session import get_db


async def get_gateway(db: AsyncSession = Depends(get_db)) -> QueryGateway:
    return QueryGateway(db)


Gateway = Annotated[QueryGateway, Depends(get_gateway)]
