"""
Shopping cart.

add_to_cart merges repeated adds of the same plant into one row by reading the
current quantity and writing the sum. Like the favorites check this is not
atomic under concurrent requests.
"""
import logging

from sqlalchemy import delete, insert, select, update

from app.core.errors import ValidationError
from app.db.gateway import QueryGateway
from app.models.cart import CartItem
from app.models.plant import Plant
from app.schemas.cart import CartAdd, CartItemRead, CheckoutRequest

logger = logging.getLogger(__name__)


async def list_cart(gw: QueryGateway, user_id: int) -> list[CartItemRead]:
    rows = await gw.fetch_all(
        select(CartItem.id, Plant.name, Plant.price, Plant.image, CartItem.quantity)
        .join(Plant, CartItem.plant_id == Plant.id)
        .where(CartItem.user_id == user_id)
        .order_by(CartItem.id)
    )
    return [CartItemRead.model_validate(row) for row in rows]


async def add_to_cart(gw: QueryGateway, data: CartAdd) -> bool:
    """Add or merge a cart row. Returns True when an existing row was updated."""
    if not (data.user_id and data.plant_id and data.quantity):
        raise ValidationError("Missing required fields")

    existing = await gw.fetch_one(
        select(CartItem.id, CartItem.quantity)
        .where(CartItem.user_id == data.user_id, CartItem.plant_id == data.plant_id)
        .order_by(CartItem.id)
    )
    if existing:
        new_qty = existing.quantity + data.quantity
        await gw.execute(update(CartItem).where(CartItem.id == existing.id).values(quantity=new_qty))
        logger.info("cart: row %d quantity -> %d", existing.id, new_qty)
        return True

    await gw.execute(
        insert(CartItem).values(
            user_id=data.user_id,
            plant_id=data.plant_id,
            quantity=data.quantity,
        )
    )
    logger.info("cart: user %d added plant %d x%d", data.user_id, data.plant_id, data.quantity)
    return False


async def remove_cart_item(gw: QueryGateway, cart_id: int) -> int:
    # deletes by row id only; the row's owner is not checked
    return await gw.execute(delete(CartItem).where(CartItem.id == cart_id))


async def checkout(gw: QueryGateway, data: CheckoutRequest) -> int:
    """Clear the user's cart. No order is recorded."""
    if not data.user_id:
        raise ValidationError("Missing user_id")

    removed = await gw.execute(delete(CartItem).where(CartItem.user_id == data.user_id))
    logger.info("checkout: cleared %d cart rows for user %d", removed, data.user_id)
    return removed
