import logging

from fastapi import APIRouter, HTTPException, Query

from . import config
from .guidance import ADVICE, INPUT_RANGES, gauge_reading, tier_table
from .heatmap import generate_heatmap_data, heatmap_summary
from .risk_engine import DEFAULT_PARAMETERS, predict_ammonia_risk
from .schemas import (
    PredictRequest, PredictionOut, GaugeOut,
    HeatmapOut, HeatmapCellOut, HeatmapSummary,
    ModelInfoOut, TierOut, InputRangeOut
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")

T_MIN, T_MAX = INPUT_RANGES["temperature"]
PH_MIN, PH_MAX = INPUT_RANGES["ph"]
EC_MIN, EC_MAX = INPUT_RANGES["conductivity"]

@router.post("/predict", response_model=PredictionOut)
def predict(payload: PredictRequest):
    result = predict_ammonia_risk(payload.temperature, payload.ph, payload.conductivity)
    logger.debug(
        "predict T=%.2f pH=%.2f EC=%.1f -> TAN=%.4f NH3=%.4f %s",
        payload.temperature, payload.ph, payload.conductivity,
        result.tan_mg_l, result.toxic_nh3_mg_l, result.risk.value,
    )

    return PredictionOut(
        temperature=payload.temperature,
        ph=payload.ph,
        conductivity=payload.conductivity,
        TAN=result.tan_mg_l,
        toxicNH3=result.toxic_nh3_mg_l,
        risk=result.risk.value,
        advice=ADVICE[result.risk],
        gauge=GaugeOut(**gauge_reading(result.toxic_nh3_mg_l)),
    )

@router.get("/heatmap", response_model=HeatmapOut)
def heatmap(
    t_min: float = Query(T_MIN, ge=T_MIN, le=T_MAX),
    t_max: float = Query(T_MAX, ge=T_MIN, le=T_MAX),
    ph_min: float = Query(PH_MIN, ge=PH_MIN, le=PH_MAX),
    ph_max: float = Query(PH_MAX, ge=PH_MIN, le=PH_MAX),
    conductivity: float = Query(1200.0, ge=EC_MIN, le=EC_MAX),
    steps: int = Query(8, ge=1),
):
    if t_min > t_max or ph_min > ph_max:
        logger.warning("heatmap rejected: inverted range T=[%s, %s] pH=[%s, %s]", t_min, t_max, ph_min, ph_max)
        raise HTTPException(status_code=422, detail="Range minimum must not exceed maximum")
    if steps > config.HEATMAP_MAX_STEPS:
        logger.warning("heatmap rejected: steps=%d over limit %d", steps, config.HEATMAP_MAX_STEPS)
        raise HTTPException(status_code=422, detail=f"steps must be <= {config.HEATMAP_MAX_STEPS}")

    grid = generate_heatmap_data(
        (t_min, t_max), (ph_min, ph_max), conductivity, steps,
        workers=config.HEATMAP_WORKERS,
    )
    summary = heatmap_summary(grid)

    return HeatmapOut(
        conductivity=conductivity,
        steps=steps,
        temperatures=[row[0].temperature for row in grid],
        ph_values=[cell.ph for cell in grid[0]],
        grid=[[HeatmapCellOut(**cell.as_dict()) for cell in row] for row in grid],
        summary=HeatmapSummary(**summary),
    )

@router.get("/model", response_model=ModelInfoOut)
def model_info():
    p = DEFAULT_PARAMETERS
    units = {"temperature": "°C", "ph": "", "conductivity": "µS/cm"}
    return ModelInfoOut(
        pipeline=[
            "feature_engineering",
            "standard_scaler",
            "surrogate_log1p_tan",
            "expm1",
            "emerson_nh3",
            "risk_classification",
        ],
        emerson="NH3 = TAN / (1 + 10^(pKa - pH)), pKa = 0.09018 + 2729.92 / (T + 273.15)",
        tiers=[TierOut(**t) for t in tier_table()],
        input_ranges=[
            InputRangeOut(name=name, unit=units[name], min=lo, max=hi)
            for name, (lo, hi) in INPUT_RANGES.items()
        ],
        saturation=p.saturation,
        log_clamp=list(p.log_clamp),
    )
