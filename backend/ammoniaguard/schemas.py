from pydantic import BaseModel, Field
from typing import List, Optional, Literal

RiskLevel = Literal["SAFE", "WARNING", "CRITICAL"]
GaugeColor = Literal["green", "yellow", "red"]

class PredictRequest(BaseModel):
    temperature: float = Field(..., ge=5, le=40, description="Water temperature, °C")
    ph: float = Field(..., ge=5.0, le=10.0, description="Surface water pH")
    conductivity: float = Field(..., ge=50, le=3000, description="Electrical conductivity, µS/cm")

class GaugeOut(BaseModel):
    fraction: float
    color: GaugeColor

class PredictionOut(BaseModel):
    temperature: float
    ph: float
    conductivity: float
    TAN: float
    toxicNH3: float
    risk: RiskLevel
    advice: str
    gauge: GaugeOut

class HeatmapCellOut(BaseModel):
    temperature: float
    pH: float
    TAN: float
    toxicNH3: float
    risk: RiskLevel

class HeatmapSummary(BaseModel):
    cells: int
    safe_cells: int
    warning_cells: int
    critical_cells: int
    peak: Optional[HeatmapCellOut] = None

class HeatmapOut(BaseModel):
    conductivity: float
    steps: int
    temperatures: List[float]
    ph_values: List[float]
    grid: List[List[HeatmapCellOut]]
    summary: HeatmapSummary

class TierOut(BaseModel):
    risk: RiskLevel
    min_mg_l: Optional[float] = None
    max_mg_l: Optional[float] = None
    description: str
    advice: str

class InputRangeOut(BaseModel):
    name: str
    unit: str
    min: float
    max: float

class ModelInfoOut(BaseModel):
    pipeline: List[str]
    emerson: str
    tiers: List[TierOut]
    input_ranges: List[InputRangeOut]
    saturation: float
    log_clamp: List[float]
