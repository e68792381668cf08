"""
Favorites: a user's saved plants.

The duplicate check and the insert are two separate statements. Two
concurrent requests for the same pair can both pass the check.
"""
import logging

from sqlalchemy import delete, insert, select

from app.core.errors import ConflictError, ValidationError
from app.db.gateway import QueryGateway
from app.models.favorite import Favorite
from app.models.plant import Plant
from app.schemas.favorite import FavoriteRequest
from app.schemas.plant import PlantRead

logger = logging.getLogger(__name__)


def _require_pair(data: FavoriteRequest) -> tuple[int, int]:
    if not (data.user_id and data.plant_id):
        raise ValidationError("Missing user_id or plant_id")
    return data.user_id, data.plant_id


async def list_favorites(gw: QueryGateway, user_id: int) -> list[PlantRead]:
    rows = await gw.fetch_all(
        select(Plant)
        .join(Favorite, Favorite.plant_id == Plant.id)
        .where(Favorite.user_id == user_id)
        .order_by(Favorite.id)
    )
    return [PlantRead.model_validate(row[0]) for row in rows]


async def add_favorite(gw: QueryGateway, data: FavoriteRequest) -> None:
    user_id, plant_id = _require_pair(data)

    existing = await gw.fetch_one(
        select(Favorite.id).where(Favorite.user_id == user_id, Favorite.plant_id == plant_id)
    )
    if existing:
        raise ConflictError("Already in favorites")

    await gw.execute(insert(Favorite).values(user_id=user_id, plant_id=plant_id))
    logger.info("favorites: user %d added plant %d", user_id, plant_id)


async def remove_favorite(gw: QueryGateway, data: FavoriteRequest) -> int:
    user_id, plant_id = _require_pair(data)
    return await gw.execute(
        delete(Favorite).where(Favorite.user_id == user_id, Favorite.plant_id == plant_id)
    )
