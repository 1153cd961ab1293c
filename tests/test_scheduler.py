import pytest

from advising import (
    ConfigurationError,
    MemoryCacheStore,
    OfferingResolver,
    OfferingsCache,
    SemesterScheduler,
)

from conftest import FakeCatalogClient


def _scheduler(offerings, cache=None, horizon=12):
    client = FakeCatalogClient(offerings)
    store = MemoryCacheStore(cache)
    return SemesterScheduler(OfferingResolver(client, store), horizon=horizon), client


def test_end_to_end_fall_start():
    scheduler, _ = _scheduler({
        "2024-fall": ["CMPT 225", "MATH 240"],
        "2025-spring": ["CMPT 295"],
    })
    plan = scheduler.build_plan(["CMPT 225", "CMPT 295", "MATH 240"], 2, 2024, "fall")

    assert [(p.label, p.courses) for p in plan] == [
        ("Fall 2024", ["CMPT 225", "MATH 240"]),
        ("Spring 2025", ["CMPT 295"]),
    ]
    assert all(not p.from_prediction for p in plan)


def test_empty_desired_list_is_an_empty_plan():
    scheduler, client = _scheduler({})
    assert scheduler.build_plan([], 3, 2024, "spring") == []
    assert client.calls == []


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_is_an_empty_plan(capacity):
    scheduler, client = _scheduler({"2024-fall": ["CMPT 225"]})
    assert scheduler.build_plan(["CMPT 225"], capacity, 2024, "fall") == []
    assert client.calls == []


def test_bad_start_term_fails_fast():
    scheduler, _ = _scheduler({})
    with pytest.raises(ConfigurationError):
        scheduler.build_plan(["CMPT 225"], 3, 2024, "winter")


def test_capacity_respected_and_ranking_order_kept():
    desired = ["CMPT 354", "CMPT 225", "CMPT 307", "CMPT 300", "CMPT 295"]
    scheduler, _ = _scheduler({
        # Offered in catalog order, not ranking order
        "2024-fall": ["CMPT 225", "CMPT 295", "CMPT 300", "CMPT 307", "CMPT 354"],
        "2025-spring": ["CMPT 225", "CMPT 295", "CMPT 300", "CMPT 307", "CMPT 354"],
    })
    plan = scheduler.build_plan(desired, 2, 2024, "fall")

    assert [p.courses for p in plan] == [
        ["CMPT 354", "CMPT 225"],
        ["CMPT 307", "CMPT 300"],
    ]
    assert all(len(p.courses) <= 2 for p in plan)


def test_no_course_is_scheduled_twice():
    everything = ["CMPT 225", "CMPT 295", "MATH 240"]
    scheduler, _ = _scheduler({f"{y}-{t}": everything
                               for y in (2024, 2025) for t in ("spring", "summer", "fall")})
    plan = scheduler.build_plan(everything + ["CMPT 225"], 1, 2024, "spring")

    scheduled = [c for p in plan for c in p.courses]
    assert scheduled == ["CMPT 225", "CMPT 295", "MATH 240"]
    assert len(scheduled) == len(set(scheduled))
    assert [f"{p.year}-{p.term}" for p in plan] == [
        "2024-spring", "2024-summer", "2024-fall",
    ]


def test_first_display_form_is_kept_for_duplicates():
    scheduler, _ = _scheduler({"2024-fall": ["CMPT 225"]})
    plan = scheduler.build_plan(["cmpt225", "CMPT 225"], 3, 2024, "fall")
    assert plan[0].courses == ["cmpt225"]


def test_offerings_are_compared_normalized():
    scheduler, _ = _scheduler({"2024-fall": ["cmpt  225", "MATH240"]})
    plan = scheduler.build_plan(["CMPT 225", "Math 240"], 3, 2024, "fall")
    assert plan[0].courses == ["CMPT 225", "Math 240"]


def test_terms_without_matches_are_skipped():
    scheduler, client = _scheduler({
        "2024-fall": ["ENGL 101"],
        "2025-summer": ["CMPT 225"],
    })
    plan = scheduler.build_plan(["CMPT 225"], 3, 2024, "fall")
    assert [p.label for p in plan] == ["Summer 2025"]
    # Stops as soon as nothing is left
    assert client.calls == [(2024, "fall"), (2025, "spring"), (2025, "summer")]


def test_unschedulable_courses_are_left_out():
    scheduler, client = _scheduler({"2024-fall": ["CMPT 225"]}, horizon=3)
    plan = scheduler.build_plan(["CMPT 225", "CMPT 999"], 3, 2024, "fall")
    assert [p.courses for p in plan] == [["CMPT 225"]]
    assert len(client.calls) == 3


def test_predicted_terms_are_flagged():
    cache = OfferingsCache(semesters={"2024-spring": ["CMPT 295"]})
    scheduler, _ = _scheduler({"2024-fall": ["CMPT 225"]}, cache=cache)
    plan = scheduler.build_plan(["CMPT 225", "CMPT 295"], 3, 2024, "fall")

    assert [(p.label, p.courses, p.from_prediction) for p in plan] == [
        ("Fall 2024", ["CMPT 225"], False),
        ("Spring 2025", ["CMPT 295"], True),
    ]


def test_explicit_cache_is_used_and_updated_cache_returned():
    cache = OfferingsCache(semesters={"2024-fall": ["CMPT 225"]})
    scheduler, client = _scheduler({})
    plan, updated = scheduler.schedule(["CMPT 225"], 3, 2024, "fall", cache)

    assert plan[0].courses == ["CMPT 225"]
    assert client.calls == []
    assert updated is cache
