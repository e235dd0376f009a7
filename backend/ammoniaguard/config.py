# backend/ammoniaguard/config.py
import os

from dotenv import load_dotenv

load_dotenv()


def _parse_origins(raw: str) -> list[str]:
    if not raw:
        return ["*"]
    parts = [p.strip() for p in raw.split(",") if p.strip()]
    return parts or ["*"]


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


CORS_ORIGINS = _parse_origins(os.getenv("CORS_ORIGINS", ""))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE") or None

HEATMAP_MAX_STEPS = _int_env("HEATMAP_MAX_STEPS", 50)
HEATMAP_WORKERS = _int_env("HEATMAP_WORKERS", 1)
