import logging
from typing import Optional

from sqlalchemy import insert, select

from app.core.errors import ValidationError
from app.db.gateway import QueryGateway
from app.models.plant import Plant
from app.schemas.plant import PlantCreate, PlantRead

logger = logging.getLogger(__name__)


async def list_plants(gw: QueryGateway, category: Optional[str] = None) -> list[PlantRead]:
    query = select(Plant)
    if category:
        query = query.where(Plant.category == category)
    rows = await gw.fetch_all(query.order_by(Plant.id))
    return [PlantRead.model_validate(row[0]) for row in rows]


async def create_plant(gw: QueryGateway, data: PlantCreate) -> None:
    # no duplicate check, the catalog may hold identical rows
    if not (data.name and data.price and data.image and data.category):
        raise ValidationError("Please fill all plant data")

    await gw.execute(
        insert(Plant).values(
            name=data.name,
            price=data.price,
            image=data.image,
            category=data.category,
        )
    )
    logger.info("plants: added %r in %r", data.name, data.category)
