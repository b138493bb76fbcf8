"""Unit tests for the current-auditor context."""

from minishop.core.auditing import (
    ANONYMOUS_AUDITOR,
    auditor_scope,
    get_current_auditor,
    reset_current_auditor,
    set_current_auditor,
)


def test_anonymous_by_default():
    assert get_current_auditor() == ANONYMOUS_AUDITOR


def test_set_and_reset():
    token = set_current_auditor("alice")
    assert get_current_auditor() == "alice"

    reset_current_auditor(token)
    assert get_current_auditor() == ANONYMOUS_AUDITOR


def test_scope_nests():
    with auditor_scope("alice"):
        with auditor_scope("bob"):
            assert get_current_auditor() == "bob"
        assert get_current_auditor() == "alice"
    assert get_current_auditor() == ANONYMOUS_AUDITOR


def test_empty_auditor_is_anonymous():
    with auditor_scope(""):
        assert get_current_auditor() == ANONYMOUS_AUDITOR
