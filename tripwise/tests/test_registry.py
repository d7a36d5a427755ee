from __future__ import annotations

from tripwise.browse.registry import active_session_count, clear_sessions, end_session, get_session


def test_same_id_returns_same_session():
    clear_sessions()
    first = get_session("abc")
    first.toggle_favorite("1")
    assert get_session("abc") is first
    assert active_session_count() == 1


def test_session_count_stays_capped():
    clear_sessions()
    for n in range(20):
        get_session(f"client-{n}", max_sessions=5)
    assert active_session_count() == 5


def test_least_recently_used_session_is_dropped():
    clear_sessions()
    kept = get_session("a", max_sessions=2)
    kept.toggle_favorite("3")
    get_session("b", max_sessions=2)
    get_session("a", max_sessions=2)
    get_session("c", max_sessions=2)

    assert get_session("a", max_sessions=2) is kept
    assert kept.store.get_favorites() == {"3"}
    assert not end_session("b")


def test_end_session():
    clear_sessions()
    get_session("gone")
    assert end_session("gone")
    assert not end_session("gone")
    assert active_session_count() == 0
