from fastapi import APIRouter

from app.api.endpoints import auth, cart, favorites, plants

api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(plants.router)
api_router.include_router(favorites.router)
api_router.include_router(cart.router)
api_router.include_router(cart.checkout_router)
