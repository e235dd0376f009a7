import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class RiskTier(str, Enum):
    """
    Ordered by severity. Comparing against anything other than a RiskTier
    raises TypeError instead of falling back to alphabetical str ordering.
    """
    SAFE = "SAFE"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]

    def _other_severity(self, other) -> int:
        if not isinstance(other, RiskTier):
            raise TypeError(f"cannot order RiskTier against {type(other).__name__}")
        return other.severity

    def __lt__(self, other):
        return self.severity < self._other_severity(other)

    def __le__(self, other):
        return self.severity <= self._other_severity(other)

    def __gt__(self, other):
        return self.severity > self._other_severity(other)

    def __ge__(self, other):
        return self.severity >= self._other_severity(other)


_SEVERITY = {RiskTier.SAFE: 0, RiskTier.WARNING: 1, RiskTier.CRITICAL: 2}

# Toxic NH3 thresholds (mg/L), lower bound inclusive
WARNING_THRESHOLD = 0.05
CRITICAL_THRESHOLD = 0.34


class WaterSample(NamedTuple):
    temperature_c: float
    ph: float
    conductivity_us_cm: float


class FeatureVector(NamedTuple):
    # order: [T, EC, pH, pH*T, EC*pH]
    temperature: float
    conductivity: float
    ph: float
    ph_temperature: float
    conductivity_ph: float


@dataclass(frozen=True)
class ModelParameters:
    """
    Fixed surrogate of the TAN regressor, fitted offline on log1p(TAN).
    Every sequence is keyed to FeatureVector positions.
    """
    means: FeatureVector = FeatureVector(26.5, 1180.0, 7.2, 191.28, 8496.0)
    stds: FeatureVector = FeatureVector(3.8, 350.0, 0.45, 30.5, 2800.0)
    intercept: float = -0.12
    weights: FeatureVector = FeatureVector(0.08, 0.22, -0.05, 0.12, 0.11)
    # second-order terms: T*EC, EC*pH, T*(pH*T)
    cross_temp_ec: float = 0.04
    cross_ec_ph: float = 0.03
    cross_temp_phtemp: float = 0.02
    saturation: float = 2.8
    log_clamp: tuple[float, float] = (-0.05, 3.2)

    def __post_init__(self):
        if len(self.means) != 5 or len(self.stds) != 5 or len(self.weights) != 5:
            raise ValueError("ModelParameters needs exactly five means, stds and weights")
        # plain sequences from a retrained model become named vectors
        for name in ("means", "stds", "weights"):
            object.__setattr__(self, name, FeatureVector(*getattr(self, name)))
        object.__setattr__(self, "log_clamp", tuple(self.log_clamp))
        if any(s == 0 for s in self.stds):
            raise ValueError("scaler standard deviations must be non-zero")
        if self.saturation <= 0:
            raise ValueError("saturation bound must be positive")
        lo, hi = self.log_clamp
        if lo > hi:
            raise ValueError("log clamp range is inverted")


DEFAULT_PARAMETERS = ModelParameters()


@dataclass(frozen=True)
class PredictionResult:
    tan_mg_l: float
    toxic_nh3_mg_l: float
    risk: RiskTier

    def as_dict(self) -> dict:
        return {
            "TAN": self.tan_mg_l,
            "toxicNH3": self.toxic_nh3_mg_l,
            "risk": self.risk.value,
        }


def _clamp(x: float, lo: float, hi: float) -> float:
    # x first so NaN passes through
    return max(min(x, hi), lo)


def engineer(sample: WaterSample) -> FeatureVector:
    t, ph, ec = sample.temperature_c, sample.ph, sample.conductivity_us_cm
    return FeatureVector(t, ec, ph, ph * t, ec * ph)


def scale(features: FeatureVector, params: ModelParameters = DEFAULT_PARAMETERS) -> FeatureVector:
    return FeatureVector(*((x - m) / s for x, m, s in zip(features, params.means, params.stds)))


def predict_log_tan(scaled: FeatureVector, params: ModelParameters = DEFAULT_PARAMETERS) -> float:
    """
    Surrogate prediction of log1p(TAN):
    - linear combination over the five standardized features
    - three fixed second-order cross terms
    - tanh saturation envelope, then a hard clamp
    """
    w = params.weights
    pred = params.intercept
    pred += w.temperature * scaled.temperature
    pred += w.conductivity * scaled.conductivity
    pred += w.ph * scaled.ph
    pred += w.ph_temperature * scaled.ph_temperature
    pred += w.conductivity_ph * scaled.conductivity_ph

    pred += params.cross_temp_ec * scaled.temperature * scaled.conductivity
    pred += params.cross_ec_ph * scaled.conductivity * scaled.ph
    pred += params.cross_temp_phtemp * scaled.temperature * scaled.ph_temperature

    pred = params.saturation * math.tanh(pred / params.saturation)

    lo, hi = params.log_clamp
    return _clamp(pred, lo, hi)


def invert(log_value: float) -> float:
    return math.expm1(log_value)


def toxic_ammonia(tan_mg_l: float, temperature_c: float, ph: float) -> float:
    """Emerson equilibrium: unionized NH3 (mg/L) from TAN, temperature and pH."""
    temp_k = temperature_c + 273.15
    pka = 0.09018 + 2729.92 / temp_k
    nh3_fraction = 1.0 / (1.0 + 10.0 ** (pka - ph))
    return tan_mg_l * nh3_fraction


def classify_risk(toxic_nh3: float) -> RiskTier:
    if toxic_nh3 < WARNING_THRESHOLD:
        return RiskTier.SAFE
    if toxic_nh3 < CRITICAL_THRESHOLD:
        return RiskTier.WARNING
    return RiskTier.CRITICAL


class AmmoniaPipeline:
    """Full prediction pipeline bound to one parameter set."""

    def __init__(self, params: ModelParameters = DEFAULT_PARAMETERS):
        self.params = params

    def predict(self, temperature_c: float, ph: float, conductivity_us_cm: float) -> PredictionResult:
        features = engineer(WaterSample(temperature_c, ph, conductivity_us_cm))
        scaled = scale(features, self.params)
        pred_tan = invert(predict_log_tan(scaled, self.params))

        # floor before classifying; NaN stays NaN
        toxic_nh3 = max(toxic_ammonia(pred_tan, temperature_c, ph), 0.0)

        return PredictionResult(
            tan_mg_l=max(pred_tan, 0.0),
            toxic_nh3_mg_l=toxic_nh3,
            risk=classify_risk(toxic_nh3),
        )

    def predict_sample(self, sample: WaterSample) -> PredictionResult:
        return self.predict(*sample)


default_pipeline = AmmoniaPipeline()


def predict_ammonia_risk(temperature_c: float, ph: float, conductivity_us_cm: float) -> PredictionResult:
    return default_pipeline.predict(temperature_c, ph, conductivity_us_cm)
