# advisors/engine.py

import json
import logging

from advisors.business.advisory_policy import BusinessAdvisoryPolicy
from advisors.common.analysis import InvalidAnalysis, parse_analysis
from advisors.common.templates import load_prompt_template
from advisors.gemini import call_llm
from advisors.government.advisory_policy import GovernmentAdvisoryPolicy
from advisors.personal.advisory_policy import PersonalAdvisoryPolicy
from advisors.student.advisory_policy import StudentAdvisoryPolicy
from subjects.domain_subject import Domain

logger = logging.getLogger(__name__)


ADVISORY_POLICIES = {
    Domain.PERSONAL: PersonalAdvisoryPolicy,
    Domain.STUDENT: StudentAdvisoryPolicy,
    Domain.BUSINESS: BusinessAdvisoryPolicy,
    Domain.GOVERNMENT: GovernmentAdvisoryPolicy,
}


def build_user_message(domain: Domain, payload: dict) -> str:
    template = load_prompt_template("response_format")
    return template.format(
        domain=domain.value,
        profile=json.dumps(payload, ensure_ascii=False, indent=2),
    )


class AdvisoryService:
    """
    The external advisory collaborator, seen from the engine.

    - llm_call_fn: function(system_prompt, developer_prompt, user_message) -> text
      (defaults to Gemini)

    analyze() yields exactly one of {AnalysisResult, None} per call.
    """

    def __init__(self, llm_call_fn=None):
        self.llm_call_fn = llm_call_fn or call_llm

    def analyze(self, domain, payload: dict):
        domain = Domain(domain)
        policy = ADVISORY_POLICIES[domain]

        try:
            raw = self.llm_call_fn(
                system_prompt=policy.system_prompt,
                developer_prompt=policy.developer_prompt,
                user_message=build_user_message(domain, payload),
            )
        except Exception:
            logger.exception("Advisory call failed for %s", domain.value)
            return None

        if not raw:
            logger.warning("Advisory call for %s returned no result", domain.value)
            return None

        try:
            return parse_analysis(raw)
        except InvalidAnalysis as e:
            logger.warning("Discarding advisory response for %s: %s", domain.value, e)
            return None
