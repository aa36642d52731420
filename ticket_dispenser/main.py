import logging

from fastapi import FastAPI

from .config import settings
from .routes import api_router

logging.basicConfig(level=settings.log_level.upper())

app = FastAPI(title="ticket_dispenser", debug=settings.debug)

app.include_router(api_router)


@app.get("/health", tags=["health"])
def health_check() -> dict:
    return {"status": "ok"}
