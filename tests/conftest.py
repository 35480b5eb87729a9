"""共享 fixtures"""

import json

import httpx
import pytest

from qase_sync.core.config import ENV_BINDINGS


@pytest.fixture(autouse=True)
def clean_qase_env(monkeypatch):
    """隔离 QASE_* 等环境变量（包括测试中由 .env 写入的值）"""
    for name in ENV_BINDINGS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def qase_env(monkeypatch):
    monkeypatch.setenv("QASE_API_TOKEN", "test-token")
    monkeypatch.setenv("QASE_PROJECT_CODE", "DEMO")


def make_report(executions: list[dict]) -> dict:
    return {"collection": {"info": {"name": "demo"}}, "run": {"executions": executions}}


def make_execution(name: str, tests: list[dict] | None = None) -> dict:
    entry = {"requestExecuted": {"name": name, "method": "GET"}, "response": {"code": 200}}
    if tests is not None:
        entry["tests"] = tests
    return entry


@pytest.fixture
def write_report(tmp_path):
    """在 tmp_path 下写入报告文件，返回路径"""

    def _write(executions: list[dict], file_name: str = "results.json"):
        path = tmp_path / file_name
        path.write_text(json.dumps(make_report(executions)), encoding="utf-8")
        return path

    return _write


class FakeQase:
    """基于 httpx.MockTransport 的 Qase API 替身，记录收到的请求"""

    def __init__(self, case_steps: dict[int, list[dict]] | None = None, run_id: int = 42):
        self.case_steps = case_steps or {}
        self.run_id = run_id
        self.requests: list[httpx.Request] = []
        self.fail_on: tuple[str, str] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if self.fail_on == (request.method, path):
            return httpx.Response(500, json={"status": False, "errorMessage": "boom"})

        if request.method == "POST" and path.startswith("/v1/run/"):
            return httpx.Response(200, json={"status": True, "result": {"id": self.run_id}})
        if request.method == "GET" and path.startswith("/v1/case/"):
            case_id = int(path.rsplit("/", 1)[1])
            if case_id not in self.case_steps:
                return httpx.Response(404, json={"status": False, "errorMessage": "Test case not found"})
            return httpx.Response(200, json={"status": True, "result": {"id": case_id, "steps": self.case_steps[case_id]}})
        if request.method == "POST" and path.startswith("/v1/result/"):
            return httpx.Response(200, json={"status": True, "result": {"case_id": 1}})
        if request.method == "POST" and path.endswith("/results"):
            return httpx.Response(200, json={"status": True})
        return httpx.Response(404, json={"status": False})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self) -> list[tuple[str, str]]:
        return [(r.method, r.url.path) for r in self.requests]

    def body(self, index: int) -> dict:
        return json.loads(self.requests[index].content)
