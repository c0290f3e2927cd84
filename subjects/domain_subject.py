from enum import Enum


class Domain(str, Enum):
    """
    Describes WHAT kind of subject a projection is about.
    Each domain has its own metric model and advisory policy.
    """
    PERSONAL = "PERSONAL"
    STUDENT = "STUDENT"
    BUSINESS = "BUSINESS"
    GOVERNMENT = "GOVERNMENT"


class RiskClassification(str, Enum):
    """
    Coarse label for where a decision trends.

    NONE is the internal baseline value and is never
    accepted from the advisory collaborator.
    """
    NONE = "NONE"
    DANGER = "DANGER"
    WARNING = "WARNING"
    NEUTRAL = "NEUTRAL"
    POSITIVE = "POSITIVE"


# what the advisory collaborator may return
ADVISORY_RISK_LEVELS = frozenset(
    r for r in RiskClassification if r is not RiskClassification.NONE
)
