from dataclasses import dataclass, field
from typing import ClassVar, Dict, Literal, Optional, Union

from subjects.domain_subject import Domain

HealthStatus = Literal["EXCELLENT", "GOOD", "AVERAGE"]
SocialStatus = Literal["SINGLE", "MARRIED", "FAMILY"]
Lifestyle = Literal["ACTIVE", "STRESSED", "SEDENTARY", "BALANCED"]
StudentLevel = Literal["PRIMARY", "MIDDLE", "SECONDARY"]
StudentStream = Literal["SCIENTIFIC", "LITERARY"]
PlanningPeriod = Literal["SHORT", "MEDIUM", "LONG"]


@dataclass(frozen=True)
class PersonalProfile:
    """
    An individual weighing a life decision.
    `decision` is opaque text, forwarded to the advisor only.
    """
    domain: ClassVar[Domain] = Domain.PERSONAL

    full_name: str = ""
    age: int = 0
    job_title: str = ""
    monthly_income: int = 0
    savings: int = 0
    health_status: HealthStatus = "GOOD"
    social_status: SocialStatus = "SINGLE"
    lifestyle: Lifestyle = "ACTIVE"
    decision: str = ""

    def to_payload(self) -> dict:
        return {
            "fullName": self.full_name,
            "age": self.age,
            "jobTitle": self.job_title,
            "monthlyIncome": self.monthly_income,
            "savings": self.savings,
            "healthStatus": self.health_status,
            "socialStatus": self.social_status,
            "lifestyle": self.lifestyle,
            "decision": self.decision,
        }


@dataclass(frozen=True)
class StudentProfile:
    """
    A school student choosing a path.

    Scores and the elective are context for the advisor;
    the numeric model does not read them.
    """
    domain: ClassVar[Domain] = Domain.STUDENT

    level: StudentLevel = "SECONDARY"
    stream: Optional[StudentStream] = "SCIENTIFIC"  # None below SECONDARY
    subject_scores: Dict[str, int] = field(default_factory=dict)
    elective: Optional[str] = None                  # None = nothing selected
    hobbies: str = ""

    def to_payload(self) -> dict:
        return {
            "level": self.level,
            "stream": self.stream,
            "subjects": dict(self.subject_scores),
            "elective": self.elective,
            "hobbies": self.hobbies,
        }


@dataclass(frozen=True)
class BusinessProfile:
    domain: ClassVar[Domain] = Domain.BUSINESS

    company_name: str = ""
    industry: str = ""
    capital: int = 0
    target_market: str = ""
    decision: str = ""

    def to_payload(self) -> dict:
        return {
            "companyName": self.company_name,
            "industry": self.industry,
            "capital": self.capital,
            "targetMarket": self.target_market,
            "decision": self.decision,
        }


@dataclass(frozen=True)
class GovernmentProfile:
    domain: ClassVar[Domain] = Domain.GOVERNMENT

    entity_name: str = ""
    sector: str = ""
    population: int = 0
    challenges: str = ""
    goals: str = ""
    planning_period: PlanningPeriod = "MEDIUM"

    def to_payload(self) -> dict:
        return {
            "entityName": self.entity_name,
            "sector": self.sector,
            "population": self.population,
            "challenges": self.challenges,
            "goals": self.goals,
            "planningPeriod": self.planning_period,
        }


SubjectProfile = Union[PersonalProfile, StudentProfile, BusinessProfile, GovernmentProfile]

PROFILE_TYPES = {
    Domain.PERSONAL: PersonalProfile,
    Domain.STUDENT: StudentProfile,
    Domain.BUSINESS: BusinessProfile,
    Domain.GOVERNMENT: GovernmentProfile,
}
