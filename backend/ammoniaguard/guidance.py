from .risk_engine import CRITICAL_THRESHOLD, WARNING_THRESHOLD, RiskTier

# Full-scale toxic NH3 reading for the gauge (mg/L)
GAUGE_MAX = 0.5

ADVICE = {
    RiskTier.SAFE: "Conditions are optimal. Continue normal feeding.",
    RiskTier.WARNING: "STOP FEEDING immediately. Monitor water closely.",
    RiskTier.CRITICAL: "MORTALITY RISK! Perform emergency water exchange now.",
}

TIER_DESCRIPTIONS = {
    RiskTier.SAFE: "No acute stress expected. Normal feeding can continue.",
    RiskTier.WARNING: "Sub-lethal stress. Stop feeding. Increase aeration. Monitor.",
    RiskTier.CRITICAL: "Acute toxicity zone. Emergency water exchange required immediately.",
}

# Caller-side validation ranges, inclusive
INPUT_RANGES = {
    "temperature": (5.0, 40.0),
    "ph": (5.0, 10.0),
    "conductivity": (50.0, 3000.0),
}


def gauge_reading(toxic_nh3: float, max_value: float = GAUGE_MAX) -> dict:
    """
    Gauge fill fraction and colour band for a toxic NH3 value.
    With the default scale, 0.05 and 0.34 mg/L sit at 10% and 68%.
    """
    pct = min(toxic_nh3 / max_value, 1.0)
    if pct > 0.68:
        color = "red"
    elif pct > 0.1:
        color = "yellow"
    else:
        color = "green"
    return {"fraction": pct, "color": color}


def tier_table() -> list[dict]:
    bounds = {
        RiskTier.SAFE: (None, WARNING_THRESHOLD),
        RiskTier.WARNING: (WARNING_THRESHOLD, CRITICAL_THRESHOLD),
        RiskTier.CRITICAL: (CRITICAL_THRESHOLD, None),
    }
    return [
        {
            "risk": tier.value,
            "min_mg_l": bounds[tier][0],
            "max_mg_l": bounds[tier][1],
            "description": TIER_DESCRIPTIONS[tier],
            "advice": ADVICE[tier],
        }
        for tier in RiskTier
    ]
