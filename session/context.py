from subjects.domain_subject import Domain
from subjects.normalizer import normalize_profile

# Form defaults, per domain
DEFAULT_FORMS = {
    Domain.PERSONAL: {
        "fullName": "", "age": "", "jobTitle": "", "monthlyIncome": "", "savings": "",
        "healthStatus": "GOOD", "socialStatus": "SINGLE", "lifestyle": "ACTIVE",
        "decision": "",
    },
    Domain.STUDENT: {
        "level": "SECONDARY", "stream": "SCIENTIFIC", "subjects": {},
        "elective": "", "hobbies": "",
    },
    Domain.BUSINESS: {
        "companyName": "", "industry": "تكنولوجيا", "capital": "", "targetMarket": "",
        "decision": "",
    },
    Domain.GOVERNMENT: {
        "entityName": "", "sector": "", "population": "", "challenges": "", "goals": "",
        "planningPeriod": "MEDIUM",
    },
}


class SessionContext:
    """
    Session-scoped form state.
    Must persist across requests; the engine only ever sees
    the profile snapshot taken from it at analysis time.
    """

    def __init__(self):
        self.active_domain = Domain.PERSONAL

        # Raw, user-entered fields for every domain
        self.forms = {d: _copy_form(f) for d, f in DEFAULT_FORMS.items()}

    def switch_domain(self, domain) -> bool:
        """Returns True if the domain actually changed."""
        domain = Domain(domain)
        changed = domain is not self.active_domain
        self.active_domain = domain
        return changed

    def update_form(self, fields: dict):
        form = self.forms[self.active_domain]

        if self.active_domain is Domain.STUDENT:
            level_or_stream_changed = any(
                key in fields and fields[key] != form.get(key)
                for key in ("level", "stream")
            )
            if level_or_stream_changed:
                # Subject list differs per level/stream: start over
                form["subjects"] = {}
                form["elective"] = ""

            if isinstance(fields.get("subjects"), dict):
                form["subjects"] = {**form["subjects"], **fields["subjects"]}
            fields = {k: v for k, v in fields.items() if k != "subjects"}

        form.update({k: v for k, v in fields.items() if k in form})

    def active_profile(self):
        """Typed, immutable profile for the active domain."""
        return normalize_profile(self.active_domain, self.forms[self.active_domain])


def _copy_form(form: dict) -> dict:
    return {k: dict(v) if isinstance(v, dict) else v for k, v in form.items()}
