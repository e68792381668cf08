from fastapi import APIRouter

from app.core.deps import Gateway
from app.schemas.cart import CartAdd, CartItemRead, CheckoutRequest
from app.schemas.common import MessageResponse
from app.services.cart_service import add_to_cart, checkout, list_cart, remove_cart_item

router = APIRouter(prefix="/cart", tags=["cart"])
checkout_router = APIRouter(tags=["cart"])


@router.get("/{user_id}", response_model=list[CartItemRead])
async def get_cart(user_id: int, gw: Gateway):
    return await list_cart(gw, user_id)


@router.post("", response_model=MessageResponse)
async def post_cart(data: CartAdd, gw: Gateway):
    merged = await add_to_cart(gw, data)
    return MessageResponse(message="Cart updated" if merged else "Added to cart")


@router.delete("/{cart_id}", response_model=MessageResponse)
async def delete_cart_item(cart_id: int, gw: Gateway):
    await remove_cart_item(gw, cart_id)
    return MessageResponse(message="Removed from cart")


@checkout_router.post("/checkout", response_model=MessageResponse)
async def post_checkout(data: CheckoutRequest, gw: Gateway):
    await checkout(gw, data)
    return MessageResponse(message="Checkout successful, cart cleared")
