import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fittrack.api.router import api_router
from fittrack.core.config import settings
from fittrack.core.exception_handlers import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="FitTrack - workout, nutrition and activity metrics")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:8081",
        "http://127.0.0.1:8081",
        "http://localhost:19006",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix="/api/v1")


@app.on_event("startup")
async def startup_event():
    logger.info("%s запущен", settings.APP_NAME)


@app.get("/")
async def root():
    base_url = "http://localhost:8000"

    return {
        "app": settings.APP_NAME,
        "message": "FitTrack - workout, nutrition and activity metrics",
        "links": {
            "Metrics": f"{base_url}/api/v1/metrics",
            "Food analysis": f"{base_url}/api/v1/food/analyze",
            "Assistant": f"{base_url}/api/v1/assistant/chat",
            "Docs": f"{base_url}/docs",
            "ReDoc": f"{base_url}/redoc"
        }
    }
