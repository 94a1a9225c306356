import httpx
import pytest

from src.domain.errors import NotFoundError, UpstreamError
from src.infrastructure.github.github_gateway import GitHubGateway


def test_requests_five_oldest_first_with_credentials(monkeypatch):
    monkeypatch.setenv("GITHUB_CLIENT_ID", "cid")
    monkeypatch.setenv("GITHUB_CLIENT_SECRET", "csecret")
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = request.url
        seen["agent"] = request.headers.get("user-agent")
        return httpx.Response(200, json=[{"name": "repo1"}, {"name": "repo2"}])

    gateway = GitHubGateway(transport=httpx.MockTransport(handler))
    repos = gateway.fetch_repositories("octocat")

    assert [r["name"] for r in repos] == ["repo1", "repo2"]
    assert seen["url"].path == "/users/octocat/repos"
    params = seen["url"].params
    assert params["per_page"] == "5"
    assert params["sort"] == "created:asc"
    assert params["client_id"] == "cid"
    assert params["client_secret"] == "csecret"
    assert seen["agent"]


@pytest.mark.parametrize("status", [403, 404, 500])
def test_any_upstream_failure_is_no_profile_found(status):
    gateway = GitHubGateway(transport=httpx.MockTransport(lambda request: httpx.Response(status)))
    with pytest.raises(NotFoundError) as excinfo:
        gateway.fetch_repositories("ghost")
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "No Github profile found"


@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, text="<html>rate limited</html>"),
        httpx.Response(200, json={"message": "odd"}),
    ],
)
def test_success_without_repository_list_is_upstream_error(response):
    gateway = GitHubGateway(transport=httpx.MockTransport(lambda request: response))
    with pytest.raises(UpstreamError) as excinfo:
        gateway.fetch_repositories("octocat")
    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "No Github profile found"


def test_transport_error_is_upstream_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    gateway = GitHubGateway(transport=httpx.MockTransport(handler))
    with pytest.raises(UpstreamError):
        gateway.fetch_repositories("octocat")
