import pytest
from fastapi.testclient import TestClient

from api import app


@pytest.fixture
def client(fake_git):
    return TestClient(app)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["tools"] == 16


def test_list_tools(client):
    response = client.get("/api/tools")
    assert response.status_code == 200
    names = [tool["name"] for tool in response.json()["tools"]]
    assert names[0] == "git_init"
    assert len(names) == 16


def test_list_tools_openai_format(client):
    response = client.get("/api/tools", params={"format": "openai"})
    assert response.json()["tools"][0]["type"] == "function"


def test_list_tools_bad_format(client):
    response = client.get("/api/tools", params={"format": "xml"})
    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "validation"


def test_describe_tool(client):
    response = client.get("/api/tools/git_reset")
    assert response.status_code == 200
    assert response.json()["inputSchema"]["properties"]["mode"]["default"] == "mixed"


def test_call_tool(client, fake_git):
    fake_git.stdout = "abc123 first commit\n"

    response = client.post("/api/tools/git_log", json={"arguments": {"oneline": True, "limit": 1}})

    assert response.status_code == 200
    assert response.json() == {"tool": "git_log", "ok": True, "text": "abc123 first commit\n"}
    assert fake_git.argv == ["git", "log", "-1", "--oneline"]


def test_call_tool_without_body_arguments(client):
    response = client.post("/api/tools/git_add", json={})
    assert response.json()["text"] == "Files added to staging area"


@pytest.mark.parametrize("method", ["get", "post"])
def test_unknown_tool(client, fake_git, method):
    response = client.request(method.upper(), "/api/tools/git_rebase", json={} if method == "post" else None)

    assert response.status_code == 404
    detail = response.json()["detail"]
    assert detail["kind"] == "validation"
    assert detail["message"].startswith("Unknown tool 'git_rebase'")
    assert fake_git.calls == []


def test_missing_required_argument(client, fake_git):
    response = client.post("/api/tools/git_commit", json={"arguments": {}})

    assert response.status_code == 400
    assert response.json()["detail"]["kind"] == "validation"
    assert fake_git.calls == []


def test_git_failure(client, fake_git):
    fake_git.returncode = 1
    fake_git.stderr = "error: pathspec 'nope' did not match any file(s) known to git\n"

    response = client.post("/api/tools/git_checkout", json={"arguments": {"branch": "nope"}})

    assert response.status_code == 422
    assert response.json()["detail"] == {
        "kind": "command",
        "message": "error: pathspec 'nope' did not match any file(s) known to git",
    }


def test_spawn_failure(client, fake_git):
    fake_git.exception = FileNotFoundError(2, "No such file or directory", "git")

    response = client.post("/api/tools/git_status", json={"arguments": {}})

    assert response.status_code == 502
    assert response.json()["detail"]["kind"] == "execution"
