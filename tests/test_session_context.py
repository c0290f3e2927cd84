from session.context import SessionContext
from subjects.domain_subject import Domain
from subjects.profiles import PersonalProfile, StudentProfile


def test_defaults_to_personal():
    ctx = SessionContext()
    assert ctx.active_domain is Domain.PERSONAL
    assert isinstance(ctx.active_profile(), PersonalProfile)


def test_switch_domain_reports_change():
    ctx = SessionContext()
    assert ctx.switch_domain("STUDENT") is True
    assert ctx.switch_domain(Domain.STUDENT) is False
    assert isinstance(ctx.active_profile(), StudentProfile)


def test_update_form_ignores_unknown_fields():
    ctx = SessionContext()
    ctx.update_form({"monthlyIncome": "7000", "favouriteColour": "blue"})
    assert ctx.forms[Domain.PERSONAL]["monthlyIncome"] == "7000"
    assert "favouriteColour" not in ctx.forms[Domain.PERSONAL]
    assert ctx.active_profile().monthly_income == 7000


def test_forms_are_independent_per_session():
    a, b = SessionContext(), SessionContext()
    a.switch_domain(Domain.STUDENT)
    a.update_form({"subjects": {"الفيزياء": "90"}})
    assert b.forms[Domain.STUDENT]["subjects"] == {}


def test_student_scores_merge():
    ctx = SessionContext()
    ctx.switch_domain(Domain.STUDENT)
    ctx.update_form({"subjects": {"الفيزياء": "90"}})
    ctx.update_form({"subjects": {"الكيمياء": "85"}})
    assert ctx.active_profile().subject_scores == {"الفيزياء": 90, "الكيمياء": 85}


def test_changing_stream_clears_scores_and_elective():
    ctx = SessionContext()
    ctx.switch_domain(Domain.STUDENT)
    ctx.update_form({"subjects": {"الفيزياء": "90"}, "elective": "الحاسوب"})
    assert ctx.active_profile().elective == "الحاسوب"

    ctx.update_form({"stream": "LITERARY"})

    profile = ctx.active_profile()
    assert profile.stream == "LITERARY"
    assert profile.subject_scores == {}
    assert profile.elective is None


def test_same_level_does_not_clear_scores():
    ctx = SessionContext()
    ctx.switch_domain(Domain.STUDENT)
    ctx.update_form({"subjects": {"الفيزياء": "90"}})
    ctx.update_form({"level": "SECONDARY"})
    assert ctx.active_profile().subject_scores == {"الفيزياء": 90}
