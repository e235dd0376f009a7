import os
import time
import random
import logging

import requests
from dotenv import load_dotenv

from ammoniaguard.logging_config import setup_logging

load_dotenv()

API_BASE = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
INTERVAL = int(os.getenv("INTERVAL_SEC", "5"))
SAMPLE_COUNT = int(os.getenv("SAMPLE_COUNT", "0"))  # 0 = run forever
INCIDENT_MODE = os.getenv("INCIDENT_MODE", "1") == "1"

PREDICT_URL = f"{API_BASE}/api/v1/predict"

logger = logging.getLogger("ammoniaguard.simulator")

temp_base = 28.0
ph_base = 7.5
ec_base = 1200.0

def clamp(x, lo, hi):
    return max(lo, min(hi, x))

def next_sample(t: int) -> dict:
    # Scripted incident: pond warms, pH climbs, organic load builds up
    if INCIDENT_MODE:
        temp = temp_base + (t * 0.05) + random.uniform(-0.3, 0.3)
        ph = ph_base + (t * 0.01) + random.uniform(-0.05, 0.05)
        ec = ec_base + (t * 10.0) + random.uniform(-30.0, 30.0)
    else:
        temp = temp_base + random.uniform(-1.2, 1.2)
        ph = ph_base + random.uniform(-0.25, 0.25)
        ec = ec_base + random.uniform(-150.0, 150.0)

    return {
        "temperature": round(clamp(temp, 5.0, 40.0), 2),
        "ph": round(clamp(ph, 5.0, 10.0), 2),
        "conductivity": round(clamp(ec, 50.0, 3000.0), 1),
    }

def main():
    setup_logging(os.getenv("LOG_LEVEL", "INFO"))
    t = 0
    while SAMPLE_COUNT <= 0 or t < SAMPLE_COUNT:
        t += 1
        payload = next_sample(t)

        try:
            r = requests.post(PREDICT_URL, json=payload, timeout=10)
            r.raise_for_status()
            body = r.json()
            logger.info(
                "T=%.2f pH=%.2f EC=%.1f -> TAN=%.3f NH3=%.4f %s",
                payload["temperature"], payload["ph"], payload["conductivity"],
                body["TAN"], body["toxicNH3"], body["risk"],
            )
        except requests.RequestException as e:
            logger.error("predict error: %s", e)

        time.sleep(INTERVAL)

if __name__ == "__main__":
    main()
