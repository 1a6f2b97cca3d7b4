from datetime import date

from builders import inactive_patch, issue, open_patch

from patch_report.analytics.ordering import (
    ORDERING_POLICIES,
    by_days_in_state,
    by_jira_date,
    by_released_report_date,
    by_report_date,
)


def test_days_in_state_longest_first():
    patches = [open_patch("A-1", "p1", days=2), open_patch("A-1", "p2", days=9), open_patch("A-1", "p3", days=5)]
    assert [p.name for p in by_days_in_state(patches)] == ["p2", "p3", "p1"]


def test_days_in_state_missing_counter_last_and_stable():
    patches = [
        open_patch("A-1", "none1", days=None),
        open_patch("A-1", "eq1", days=4),
        open_patch("A-1", "none2", days=None),
        open_patch("A-1", "eq2", days=4),
    ]
    assert [p.name for p in by_days_in_state(patches)] == ["eq1", "eq2", "none1", "none2"]


def test_jira_date_ascending():
    d1, d2 = date(2024, 1, 5), date(2024, 2, 5)
    patches = [inactive_patch("C-1", "late", d2), inactive_patch("C-1", "early", d1)]
    assert [p.name for p in by_jira_date(patches)] == ["early", "late"]


def test_jira_date_missing_sorts_first():
    patches = [
        inactive_patch("C-1", "dated", date(2024, 1, 1)),
        inactive_patch("C-1", "undated-1"),
        inactive_patch("C-1", "undated-2"),
    ]
    assert [p.name for p in by_jira_date(patches)] == ["undated-1", "undated-2", "dated"]


def test_report_date_orders_are_stable():
    same = date(2024, 3, 1)
    issues = [
        issue("I-2", report_date=same),
        issue("I-1", report_date=date(2024, 1, 1)),
        issue("I-3", report_date=same),
        issue("I-0", report_date=None),
    ]
    expected = ["I-0", "I-1", "I-2", "I-3"]
    assert [i.key for i in by_report_date(issues)] == expected
    assert [i.key for i in by_released_report_date(issues)] == expected


def test_orders_return_new_lists():
    patches = [open_patch("A-1", "p1", days=1), open_patch("A-1", "p2", days=2)]
    ordered = by_days_in_state(patches)
    assert ordered is not patches
    assert [p.name for p in patches] == ["p1", "p2"]


def test_policy_registry():
    assert set(ORDERING_POLICIES) == {"days_in_state", "jira_date", "report_date", "released_report_date"}
