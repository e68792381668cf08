from fastapi import APIRouter, Query, status

from app.core.deps import Gateway
from app.schemas.common import MessageResponse
from app.schemas.plant import PlantCreate, PlantRead
from app.services.plant_service import create_plant, list_plants

router = APIRouter(prefix="/plants", tags=["plants"])


@router.get("", response_model=list[PlantRead])
async def get_plants(
    gw: Gateway,
    category: str | None = Query(None, description="Exact match on category"),
):
    return await list_plants(gw, category)


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_plant(data: PlantCreate, gw: Gateway):
    await create_plant(gw, data)
    return MessageResponse(message="Plant added")
