from concurrent.futures import ThreadPoolExecutor

import pytest

from ajax_lab_api.app.core.exceptions import ValidationError
from ajax_lab_api.app.services.engagement_service import EngagementState


@pytest.fixture
def state():
    return EngagementState()


def test_likes_start_at_zero(state):
    assert state.get_likes() == 0


def test_increment_like_returns_new_total(state):
    assert state.increment_like() == 1
    assert state.increment_like() == 2
    assert state.get_likes() == 2


def test_concurrent_likes_are_not_lost(state):
    state.increment_like()
    initial = state.get_likes()
    with ThreadPoolExecutor(max_workers=16) as pool:
        totals = list(pool.map(lambda _: state.increment_like(), range(500)))
    assert state.get_likes() == initial + 500
    assert sorted(totals) == list(range(initial + 1, initial + 501))


def test_add_comment_returns_all_in_order(state):
    state.add_comment("first")
    comments = state.add_comment("second")
    assert [c.text for c in comments] == ["first", "second"]
    assert [c.id for c in comments] == [1, 2]
    assert comments[0].timestamp <= comments[1].timestamp


def test_comment_text_is_trimmed(state):
    comments = state.add_comment("  nice post  ")
    assert comments[0].text == "nice post"


@pytest.mark.parametrize("text", ["", "   ", None, 42])
def test_blank_comment_rejected_without_change(state, text):
    state.add_comment("kept")
    with pytest.raises(ValidationError) as excinfo:
        state.add_comment(text)
    assert excinfo.value.message == "Comment cannot be empty"
    assert len(state.list_comments()) == 1


def test_list_comments_is_a_snapshot(state):
    state.add_comment("one")
    snapshot = state.list_comments()
    state.add_comment("two")
    assert len(snapshot) == 1
    assert len(state.list_comments()) == 2


def test_concurrent_comments_get_unique_ids(state):
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda i: state.add_comment(f"comment {i}"), range(200)))
    comments = state.list_comments()
    assert len(comments) == 200
    assert [c.id for c in comments] == list(range(1, 201))
