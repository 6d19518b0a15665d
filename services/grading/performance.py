from typing import Iterable, List, NamedTuple

from services.grading.scale import points_of

TOP_N = 5


class RankedSubject(NamedTuple):
    subject: object
    points: float


def rank_subjects(subjects: Iterable) -> List[RankedSubject]:
    # points desc, then credits desc; sorted() is stable so equal keys keep input order
    ranked = [RankedSubject(s, points_of(s.grade)) for s in subjects]
    return sorted(ranked, key=lambda r: (-r.points, -r.subject.credits))


def rank_subject_performance(subjects: Iterable, limit: int = TOP_N) -> dict:
    """Best `limit` subjects, and the worst `limit` listed worst first."""
    ranked = rank_subjects(subjects)
    return {
        "best": ranked[:limit],
        "worst": list(reversed(ranked[-limit:])),
    }
