# projection/risk_policy.py

from dataclasses import dataclass

from subjects.domain_subject import RiskClassification


@dataclass(frozen=True)
class ModulationParameters:
    """
    growth_factor: multiplicative damper for compounding composites
    decay_factor:  per-year additive degradation (negative = improvement)
    """
    growth_factor: float
    decay_factor: float


MODULATION_TABLE = {
    RiskClassification.NONE: ModulationParameters(1.0, 0),
    RiskClassification.DANGER: ModulationParameters(0.8, 5),
    RiskClassification.WARNING: ModulationParameters(0.95, 2),
    RiskClassification.POSITIVE: ModulationParameters(1.1, -2),
    RiskClassification.NEUTRAL: ModulationParameters(1.0, 0),
}


def modulate(risk) -> ModulationParameters:
    """
    Total lookup: every classification has a fixed pair.
    Accepts the enum or its string value.
    """
    return MODULATION_TABLE[RiskClassification(risk)]
