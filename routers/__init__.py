from fastapi import APIRouter
from . import cart
router = APIRouter()
router.include_router(cart.router)
