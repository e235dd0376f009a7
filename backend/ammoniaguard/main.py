# backend/ammoniaguard/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .logging_config import setup_logging
from .routes import router

logger = logging.getLogger(__name__)

app = FastAPI(title="Ammonia Safety Guard", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=config.CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# App lifecycle
# -----------------------------
@app.on_event("startup")
def startup():
    setup_logging(config.LOG_LEVEL, config.LOG_FILE)
    logger.info(
        "Ammonia Safety Guard ready (heatmap max steps=%d, workers=%d)",
        config.HEATMAP_MAX_STEPS, config.HEATMAP_WORKERS,
    )


@app.get("/healthz")
def healthz():
    return {"ok": True}


# Main API
app.include_router(router)
