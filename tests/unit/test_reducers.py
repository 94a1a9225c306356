"""
Tests for the client reducers and store.
"""
from src.client.action_types import Action, ActionType
from src.client.reducers import (
    alert_reducer,
    auth_reducer,
    initial_auth,
    initial_post,
    initial_profile,
    post_reducer,
    profile_reducer,
)
from src.client.store import Store


def test_store_starts_from_initial_slices():
    store = Store()
    assert store["alert"] == []
    assert store["auth"] == initial_auth()
    assert store["profile"] == initial_profile()
    assert store["post"] == initial_post()


def test_unknown_action_returns_same_slice():
    state = initial_post()
    assert post_reducer(state, Action(ActionType.SET_ALERT, {"id": "x"})) is state


class TestAlertReducer:
    def test_set_and_remove(self):
        state = alert_reducer(None, Action(ActionType.SET_ALERT, {"id": "a", "msg": "hi", "alert_type": "success"}))
        state = alert_reducer(state, Action(ActionType.SET_ALERT, {"id": "b", "msg": "yo", "alert_type": "danger"}))
        assert [a["id"] for a in state] == ["a", "b"]
        assert [a["id"] for a in alert_reducer(state, Action(ActionType.REMOVE_ALERT, "a"))] == ["b"]

    def test_input_not_mutated(self):
        state = [{"id": "a"}]
        alert_reducer(state, Action(ActionType.SET_ALERT, {"id": "b"}))
        assert state == [{"id": "a"}]


class TestAuthReducer:
    def test_login_then_user_loaded(self):
        state = auth_reducer(None, Action(ActionType.LOGIN_SUCCESS, {"token": "t"}))
        assert state["token"] == "t"
        assert state["is_authenticated"] is True
        state = auth_reducer(state, Action(ActionType.USER_LOADED, {"id": "u1", "name": "Jane"}))
        assert state["user"]["name"] == "Jane"
        assert state["loading"] is False

    def test_failures_clear_session(self):
        logged_in = {"token": "t", "is_authenticated": True, "loading": False, "user": {"id": "u1"}}
        for kind in (ActionType.AUTH_ERROR, ActionType.LOGIN_FAIL, ActionType.LOGOUT, ActionType.ACCOUNT_DELETED):
            state = auth_reducer(logged_in, Action(kind))
            assert state["token"] is None
            assert state["user"] is None
            assert state["is_authenticated"] is False
        assert logged_in["token"] == "t"


class TestProfileReducer:
    def test_error_clears_current_profile(self):
        state = profile_reducer(None, Action(ActionType.GET_PROFILE, {"id": "p1"}))
        state = profile_reducer(state, Action(ActionType.PROFILE_ERROR, {"msg": "Bad Request", "status": 400}))
        assert state["profile"] is None
        assert state["error"]["status"] == 400

    def test_clear_profile_drops_repos(self):
        state = profile_reducer(None, Action(ActionType.GET_REPOS, [{"name": "r"}]))
        state = profile_reducer(state, Action(ActionType.CLEAR_PROFILE))
        assert state["repos"] == []
        assert state["profile"] is None


class TestPostReducer:
    def _state(self):
        posts = [
            {"id": "p2", "likes": [], "comments": []},
            {"id": "p1", "likes": [], "comments": []},
        ]
        return {**initial_post(), "posts": posts, "post": posts[1], "loading": False}

    def test_add_post_goes_first(self):
        state = post_reducer(self._state(), Action(ActionType.ADD_POST, {"id": "p3"}))
        assert [p["id"] for p in state["posts"]] == ["p3", "p2", "p1"]

    def test_update_likes_touches_matching_post_only(self):
        before = self._state()
        likes = [{"id": "l1", "user": "u1"}]
        state = post_reducer(before, Action(ActionType.UPDATE_LIKES, {"post_id": "p1", "likes": likes}))
        assert state["posts"][1]["likes"] == likes
        assert state["posts"][0]["likes"] == []
        assert state["post"]["likes"] == likes
        assert before["posts"][1]["likes"] == []

    def test_delete_post(self):
        state = post_reducer(self._state(), Action(ActionType.DELETE_POST, "p2"))
        assert [p["id"] for p in state["posts"]] == ["p1"]

    def test_comments(self):
        comments = [{"id": "c2", "text": "B"}, {"id": "c1", "text": "A"}]
        state = post_reducer(self._state(), Action(ActionType.ADD_COMMENT, comments))
        assert state["post"]["comments"] == comments
        state = post_reducer(state, Action(ActionType.DELETE_COMMENT, "c2"))
        assert [c["id"] for c in state["post"]["comments"]] == ["c1"]


def test_subscribe_and_unsubscribe():
    store = Store()
    seen = []
    unsubscribe = store.subscribe(lambda state: seen.append(len(state["alert"])))
    store.dispatch(Action(ActionType.SET_ALERT, {"id": "a", "msg": "m", "alert_type": "success"}))
    unsubscribe()
    store.dispatch(Action(ActionType.REMOVE_ALERT, "a"))
    assert seen == [1]
