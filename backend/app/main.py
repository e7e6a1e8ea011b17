# backend/app/main.py

import logging

from fastapi import FastAPI

from .api import client_ip
from .core.logging_config import setup_logging

app = FastAPI(
    title="DrinkMailer Service",
    description="飲料開團通知系統的輔助後端服務。",
    version="1.0.0"
)

# Mount API routes
app.include_router(client_ip.router, prefix="/api", tags=["Client IP"])


@app.on_event("startup")
def startup_event():
    """Initializes logging as the first step of startup."""
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Application startup sequence completed.")


@app.on_event("shutdown")
def shutdown_event():
    logger = logging.getLogger(__name__)
    logger.info("Application shutdown sequence completed.")


@app.get("/", tags=["Root"])
def read_root():
    return {"message": "Welcome to DrinkMailer Backend API. Visit /docs for API documentation."}
