from fastapi import APIRouter

from app.core.deps import Gateway
from app.schemas.common import MessageResponse
from app.schemas.favorite import FavoriteRequest
from app.schemas.plant import PlantRead
from app.services.favorite_service import add_favorite, list_favorites, remove_favorite

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("/{user_id}", response_model=list[PlantRead])
async def get_favorites(user_id: int, gw: Gateway):
    return await list_favorites(gw, user_id)


@router.post("", response_model=MessageResponse)
async def post_favorite(data: FavoriteRequest, gw: Gateway):
    await add_favorite(gw, data)
    return MessageResponse(message="Added to favorites")


@router.delete("", response_model=MessageResponse)
async def delete_favorite(data: FavoriteRequest, gw: Gateway):
    await remove_favorite(gw, data)
    return MessageResponse(message="Removed from favorites")
