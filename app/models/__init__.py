from app.models.user import User
from app.models.plant import Plant
from app.models.favorite import Favorite
from app.models.cart import CartItem

__all__ = [
    "User",
    "Plant",
    "Favorite",
    "CartItem",
]
