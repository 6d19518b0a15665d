import pytest

from services.errors import ValidationError
from services.grading import target_planner
from services.grading.target_planner import (
    MSG_ALREADY_MET,
    MSG_DEGREE_COMPLETED,
    MSG_NOT_ACHIEVABLE,
    estimate_subjects,
    min_grade_for,
    required_future_gpa,
    solve_target_gpa,
)


def test_required_future_gpa_formula():
    assert required_future_gpa(3.0, 60, 3.5, 30) == pytest.approx(4.5)
    assert required_future_gpa(3.0, 60, 3.2, 60) == pytest.approx(3.4)


def test_unreachable_target():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120,
                            target_gpa=3.5, future_credits=30)
    assert plan.achievable is False
    assert plan.required_gpa == 4.5
    assert plan.min_grade_required is None
    assert plan.estimated_subjects == 10
    assert plan.message == MSG_NOT_ACHIEVABLE


def test_reachable_target_picks_lowest_sufficient_grade():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120,
                            target_gpa=3.2, future_credits=60)
    assert plan.achievable is True
    assert plan.required_gpa == 3.4
    # B+ (3.3) falls short of 3.4, A- (3.7) is the lowest that clears it
    assert plan.min_grade_required == "A-"
    assert plan.estimated_subjects == 20
    assert "at least A- in 20 future subjects" in plan.message


def test_future_credits_default_to_remaining():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120, target_gpa=3.2)
    assert plan.future_credits == 60
    assert plan.remaining_credits == 60
    assert plan.min_grade_required == "A-"


def test_unset_degree_total_uses_default():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=None, target_gpa=3.2)
    assert plan.future_credits == 60


def test_already_exceeding_target():
    # 3.5 - (3.8 - 3.5) * 120 / 6 < 0
    plan = solve_target_gpa(current_gpa=3.8, completed_credits=120, degree_total_credits=200,
                            target_gpa=3.5, future_credits=6)
    assert plan.achievable is True
    assert plan.required_gpa == 0
    assert plan.min_grade_required == "F"
    assert plan.estimated_subjects == 2
    assert plan.message == MSG_ALREADY_MET


def test_zero_target_is_always_met():
    plan = solve_target_gpa(current_gpa=2.0, completed_credits=30, degree_total_credits=120, target_gpa=0)
    assert plan.achievable is True
    assert plan.min_grade_required == "F"


def test_required_exactly_four_is_achievable():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120,
                            target_gpa=3.5, future_credits=60)
    assert plan.achievable is True
    assert plan.required_gpa == 4.0
    assert plan.min_grade_required == "A"


def test_required_within_tolerance_above_four_reports_four(monkeypatch):
    monkeypatch.setattr(target_planner, "required_future_gpa", lambda *args: 4.0 + 1e-12)
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120,
                            target_gpa=3.5, future_credits=60)
    assert plan.achievable is True
    assert plan.required_gpa == 4.0
    assert plan.min_grade_required == "A"


def test_degree_already_completed():
    plan = solve_target_gpa(current_gpa=3.1, completed_credits=120, degree_total_credits=120, target_gpa=3.5)
    assert plan.degree_completed is True
    assert plan.achievable is True
    assert plan.required_gpa is None
    assert plan.min_grade_required is None
    assert plan.estimated_subjects == 0
    assert plan.message == MSG_DEGREE_COMPLETED


def test_future_credits_above_remaining_rejected():
    with pytest.raises(ValidationError) as exc:
        solve_target_gpa(current_gpa=3.0, completed_credits=100, degree_total_credits=120,
                         target_gpa=3.2, future_credits=30)
    assert "30" in exc.value.message
    assert "20" in exc.value.message


def test_explicit_future_credits_rejected_once_degree_complete():
    with pytest.raises(ValidationError):
        solve_target_gpa(current_gpa=3.0, completed_credits=120, degree_total_credits=120,
                         target_gpa=3.2, future_credits=3)


@pytest.mark.parametrize("future", [0, -3])
def test_non_positive_future_credits_rejected(future):
    with pytest.raises(ValidationError):
        solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120,
                         target_gpa=3.2, future_credits=future)


@pytest.mark.parametrize("target", [-0.1, 4.01, 5, float("nan")])
def test_target_out_of_range_rejected(target):
    with pytest.raises(ValidationError):
        solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120, target_gpa=target)


def test_target_of_four_is_accepted():
    plan = solve_target_gpa(current_gpa=4.0, completed_credits=60, degree_total_credits=120, target_gpa=4.0)
    assert plan.achievable is True
    assert plan.min_grade_required == "A"


@pytest.mark.parametrize("required,grade", [
    (4.0, "A"),
    (4.0 + 1e-12, "A"),
    (3.7000000000000006, "A-"),
    (3.4, "A-"),
    (3.3, "B+"),
    (2.1, "C+"),
    (1.0, "D"),
    (0.5, "D"),
])
def test_min_grade_for(required, grade):
    assert min_grade_for(required) == grade


def test_single_subject_message_is_singular():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=63,
                            target_gpa=3.0, future_credits=3)
    assert plan.estimated_subjects == 1
    assert "in 1 future subject." in plan.message


@pytest.mark.parametrize("credits,expected", [(0, 0), (1, 1), (3, 1), (4, 2), (30, 10)])
def test_estimate_subjects(credits, expected):
    assert estimate_subjects(credits) == expected


def test_to_dict_shape():
    plan = solve_target_gpa(current_gpa=3.0, completed_credits=60, degree_total_credits=120, target_gpa=3.2)
    assert set(plan.to_dict()) == {"requiredGPA", "minGradeRequired", "estimatedSubjects", "achievable", "message"}
