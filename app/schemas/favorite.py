from typing import Optional

from pydantic import BaseModel


class FavoriteRequest(BaseModel):
    user_id: Optional[int] = None
    plant_id: Optional[int] = None
