import logging

from fastapi import FastAPI

from app.api.routes import hooks_router, vendors_router
from app.config import get_settings

settings = get_settings()

logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_name)

app.include_router(hooks_router)
app.include_router(vendors_router)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
