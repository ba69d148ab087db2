from fastapi import APIRouter
from fittrack.api.v1.metrics import router as metrics_router
from fittrack.api.v1.food import router as food_router
from fittrack.api.v1.assistant import router as assistant_router

api_router = APIRouter()

api_router.include_router(metrics_router, prefix="/metrics", tags=["metrics"])
api_router.include_router(food_router, prefix="/food", tags=["food"])
api_router.include_router(assistant_router, prefix="/assistant", tags=["assistant"])
