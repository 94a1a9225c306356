"""
End-to-end tests for the client action creators against the in-process API.
"""
import asyncio

import httpx
import pytest

from src.client import auth_actions, post_actions, profile_actions
from src.client.api_client import ApiClient
from src.client.store import Store


@pytest.fixture()
def run(app):
    """Run ``scenario(store, api)`` on a fresh store and client, return the store."""

    def _run(scenario):
        async def main():
            store = Store()
            async with ApiClient("http://testserver", transport=httpx.ASGITransport(app=app)) as api:
                await scenario(store, api)
            for handle in store.alert_timers.values():
                handle.cancel()
            return store

        return asyncio.run(main())

    return _run


def _alerts(store):
    return [(a["msg"], a["alert_type"]) for a in store["alert"]]


def test_register_loads_user(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        assert api.token

    store = run(scenario)
    auth = store["auth"]
    assert auth["is_authenticated"] is True
    assert auth["loading"] is False
    assert auth["user"]["email"] == "jane@mail.com"


def test_register_failure_alerts_each_rule(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "", "bad", "abc")

    store = run(scenario)
    assert store["auth"]["token"] is None
    assert store["auth"]["is_authenticated"] is False
    assert _alerts(store) == [
        ("Name is required", "danger"),
        ("Please include a valid email", "danger"),
        ("Please enter a password with 5 or more characters", "danger"),
    ]


def test_login_failure_and_logout(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        auth_actions.logout(store, api)
        assert api.token is None
        await auth_actions.login(store, api, "jane@mail.com", "wrong-pass")

    store = run(scenario)
    assert store["auth"]["is_authenticated"] is False
    assert ("Invalid Credentials", "danger") in _alerts(store)


def test_load_user_without_token(run):
    async def scenario(store, api):
        await auth_actions.load_user(store, api)

    store = run(scenario)
    assert store["auth"]["is_authenticated"] is False
    assert store["auth"]["loading"] is False


def test_profile_flow(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        await profile_actions.get_current_profile(store, api)
        assert store["profile"]["error"]["status"] == 400

        await profile_actions.create_profile(store, api, {"status": "Developer", "skills": "py, go"})
        await profile_actions.add_experience(
            store, api, {"title": "Dev", "company": "Acme", "from": "2020-01-01"}
        )
        exp_id = store["profile"]["profile"]["experience"][0]["id"]
        await profile_actions.delete_experience(store, api, exp_id)

    store = run(scenario)
    profile = store["profile"]["profile"]
    assert profile["skills"] == ["py", "go"]
    assert profile["experience"] == []
    assert [msg for msg, _ in _alerts(store)] == [
        "Profile Created",
        "Experience Added",
        "Experience Removed",
    ]


def test_get_profiles_clears_own_profile(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        await profile_actions.create_profile(store, api, {"status": "Developer", "skills": "py"})
        await profile_actions.get_profiles(store, api)

    store = run(scenario)
    assert store["profile"]["profile"] is None
    assert len(store["profile"]["profiles"]) == 1


def test_delete_account_logs_out(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        await profile_actions.delete_account(store, api)
        assert api.token is None

    store = run(scenario)
    assert store["auth"]["user"] is None
    assert store["auth"]["is_authenticated"] is False
    assert "Your account has been permanently deleted" in [msg for msg, _ in _alerts(store)]


def test_post_flow(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        await post_actions.add_post(store, api, "first")
        await post_actions.add_post(store, api, "second")
        await post_actions.get_posts(store, api)
        post_id = store["post"]["posts"][0]["id"]

        await post_actions.get_post(store, api, post_id)
        await post_actions.add_like(store, api, post_id)
        assert len(store["post"]["post"]["likes"]) == 1
        await post_actions.add_like(store, api, post_id)
        assert store["post"]["error"]["status"] == 400

        await post_actions.add_comment(store, api, post_id, "nice")
        comment_id = store["post"]["post"]["comments"][0]["id"]
        await post_actions.delete_comment(store, api, post_id, comment_id)
        await post_actions.remove_like(store, api, post_id)

        other = store["post"]["posts"][1]["id"]
        await post_actions.delete_post(store, api, other)

    store = run(scenario)
    posts = store["post"]["posts"]
    assert [p["text"] for p in posts] == ["second"]
    assert posts[0]["likes"] == []
    assert store["post"]["post"]["comments"] == []


def test_missing_post_sets_error(run):
    async def scenario(store, api):
        await auth_actions.register(store, api, "Jane Doe", "jane@mail.com", "secret1")
        await post_actions.get_post(store, api, "not-an-id")

    store = run(scenario)
    assert store["post"]["error"] == {"msg": "Not Found", "status": 404}
