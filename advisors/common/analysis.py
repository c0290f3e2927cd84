# advisors/common/analysis.py

import json
import re
from dataclasses import asdict, dataclass, field

from subjects.domain_subject import ADVISORY_RISK_LEVELS, RiskClassification

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$", re.IGNORECASE)


class InvalidAnalysis(ValueError):
    """The advisor answered, but not with a usable analysis."""


@dataclass(frozen=True)
class Swot:
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)
    opportunities: list[str] = field(default_factory=list)
    threats: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class AnalysisResult:
    """
    Qualitative analysis returned by the advisory collaborator.
    Only ever built from a fully valid response.
    """
    risk_level: RiskClassification
    swot: Swot
    prediction: str
    strategy: str
    execution_steps: list[str]

    def to_dict(self) -> dict:
        return {
            "riskLevel": self.risk_level.value,
            "swot": asdict(self.swot),
            "prediction": self.prediction,
            "strategy": self.strategy,
            "executionSteps": list(self.execution_steps),
        }


def _string_list(payload: dict, key: str) -> list[str]:
    value = payload.get(key, [])
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise InvalidAnalysis(f"{key} must be a list of strings")
    return [v.strip() for v in value if v.strip()]


def _string(payload: dict, key: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise InvalidAnalysis(f"{key} must be a string")
    return value.strip()


def parse_analysis(raw: str) -> AnalysisResult:
    """
    Parse the advisor's JSON text into an AnalysisResult.

    Rules:
    - Markdown code fences around the JSON are tolerated
    - riskLevel must be DANGER / WARNING / NEUTRAL / POSITIVE
    - Missing SWOT lists become empty lists
    - Anything else malformed raises InvalidAnalysis
    """
    text = _FENCE.sub("", (raw or "").strip())
    if not text:
        raise InvalidAnalysis("empty response")

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidAnalysis(f"response is not JSON: {e}") from e

    if not isinstance(payload, dict):
        raise InvalidAnalysis("response must be a JSON object")

    level = str(payload.get("riskLevel", "")).strip().upper()
    try:
        risk = RiskClassification(level)
    except ValueError:
        raise InvalidAnalysis(f"unknown riskLevel: {level!r}") from None
    if risk not in ADVISORY_RISK_LEVELS:
        raise InvalidAnalysis("riskLevel NONE is reserved for the baseline")

    swot = payload.get("swot") or {}
    if not isinstance(swot, dict):
        raise InvalidAnalysis("swot must be an object")

    return AnalysisResult(
        risk_level=risk,
        swot=Swot(
            strengths=_string_list(swot, "strengths"),
            weaknesses=_string_list(swot, "weaknesses"),
            opportunities=_string_list(swot, "opportunities"),
            threats=_string_list(swot, "threats"),
        ),
        prediction=_string(payload, "prediction"),
        strategy=_string(payload, "strategy"),
        execution_steps=_string_list(payload, "executionSteps"),
    )
