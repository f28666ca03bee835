from fastapi import APIRouter

from app.api.routes.routes_orders import router as orders_router
from app.api.routes.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(orders_router, prefix="/orders", tags=["orders"])
