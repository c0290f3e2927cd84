# projection/generator.py

from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from config.settings import HORIZON_YEARS
from projection.models import DOMAIN_MODELS
from subjects.domain_subject import Domain, RiskClassification


@dataclass(frozen=True)
class TimelinePoint:
    period: str                   # year label, e.g. "2026"
    metrics: Mapping[str, float]  # only the active domain's metrics

    def to_dict(self) -> dict:
        """Flat row shape consumed by charts: {"period": ..., "<metric>": ...}."""
        return {"period": self.period, **self.metrics}


@dataclass(frozen=True)
class Projection:
    """
    Exactly HORIZON_YEARS + 1 points, indexed by year offset.
    Never mutated; a new cycle builds a new Projection.
    """
    domain: Domain
    risk: RiskClassification
    points: tuple

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def __getitem__(self, offset):
        return self.points[offset]

    def to_list(self) -> list[dict]:
        return [p.to_dict() for p in self.points]


def generate(domain, profile, risk=RiskClassification.NONE, *, start_year: int | None = None) -> Projection:
    """
    Build the projection for `profile` over the fixed horizon.

    - domain: one of Domain; anything else raises ValueError
    - profile: the typed profile matching `domain` (TypeError otherwise)
    - risk: classification used to modulate the model
    - start_year: label of offset 0, defaults to the current calendar year
    """
    domain = Domain(domain)
    risk = RiskClassification(risk)

    if getattr(profile, "domain", None) is not domain:
        raise TypeError(f"{type(profile).__name__} cannot be projected as {domain.value}")

    model = DOMAIN_MODELS[domain]
    if start_year is None:
        start_year = datetime.now().year

    points = tuple(
        TimelinePoint(
            period=str(start_year + offset),
            metrics=model(profile, risk, offset),
        )
        for offset in range(HORIZON_YEARS + 1)
    )
    return Projection(domain=domain, risk=risk, points=points)
