from typing import Optional

from pydantic import BaseModel, Field


class CartAdd(BaseModel):
    user_id: Optional[int] = None
    plant_id: Optional[int] = None
    quantity: Optional[int] = Field(None, ge=0)


class CartItemRead(BaseModel):
    """A cart row joined to its plant."""

    id: int
    name: str
    price: float
    image: str
    quantity: int

    model_config = {"from_attributes": True}


class CheckoutRequest(BaseModel):
    user_id: Optional[int] = None
