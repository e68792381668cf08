from typing import Optional

from pydantic import BaseModel


class PlantCreate(BaseModel):
    name: Optional[str] = None
    price: Optional[float] = None
    image: Optional[str] = None
    category: Optional[str] = None


class PlantRead(BaseModel):
    id: int
    name: str
    price: float
    image: str
    category: str

    model_config = {"from_attributes": True}
