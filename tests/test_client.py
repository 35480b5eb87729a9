"""测试 Qase 客户端与结果发布器（使用 httpx.MockTransport）"""

import asyncio
from unittest.mock import AsyncMock

import httpx
import pytest

from conftest import FakeQase
from qase_sync.schema.config import QaseConfig
from qase_sync.schema.result import RunResult, StepVerdict


def _make_client(fake: FakeQase):
    from qase_sync.client.qase import QaseClient

    config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
    return QaseClient(config, transport=fake.transport)


def _result(case_id: int = 501, status: str = "passed") -> RunResult:
    return RunResult(
        title=f"Login Qase:{case_id}",
        case_id=case_id,
        status=status,
        comment="✅ Status code is 200",
        steps=[StepVerdict(position=1, action="Send request", expected_result="Status code is 200", status=status)],
    )


class TestQaseClient:
    """测试 Qase API 调用"""

    def test_create_run(self):
        fake = FakeQase(run_id=77)
        client = _make_client(fake)

        async def _run():
            try:
                return await client.create_run("Local Run", [501, 502])
            finally:
                await client.close()

        assert asyncio.run(_run()) == 77
        assert fake.calls() == [("POST", "/v1/run/DEMO")]
        assert fake.body(0) == {"title": "Local Run", "cases": [501, 502]}
        assert fake.requests[0].headers["Token"] == "tok"

    def test_get_case_steps(self):
        fake = FakeQase(
            case_steps={
                501: [
                    {"position": 1, "action": "Send request", "expected_result": "Status code is 200", "hash": "abc"},
                    {"action": "Check body", "expected_result": None, "data": ""},
                ]
            }
        )
        client = _make_client(fake)

        async def _run():
            try:
                return await client.get_case_steps(501)
            finally:
                await client.close()

        steps = asyncio.run(_run())
        assert fake.calls() == [("GET", "/v1/case/DEMO/501")]
        assert steps[0].position == 1
        assert steps[0].expected_result == "Status code is 200"
        assert steps[1].position is None
        assert steps[1].expected_result is None

    @pytest.mark.parametrize("payload", [{"steps": []}, {"steps": None}, {}])
    def test_get_case_steps_empty(self, payload):
        def handler(request):
            return httpx.Response(200, json={"status": True, "result": {"id": 5, **payload}})

        from qase_sync.client.qase import QaseClient

        config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
        client = QaseClient(config, transport=httpx.MockTransport(handler))

        async def _run():
            try:
                return await client.get_case_steps(5)
            finally:
                await client.close()

        assert asyncio.run(_run()) == []

    def test_http_error_raises_qase_api_error(self):
        from qase_sync.core.exceptions import QaseAPIError

        fake = FakeQase()
        client = _make_client(fake)

        async def _run():
            try:
                await client.get_case_steps(404)
            finally:
                await client.close()

        with pytest.raises(QaseAPIError) as exc_info:
            asyncio.run(_run())
        assert exc_info.value.status_code == 404
        assert "Test case not found" in exc_info.value.response_body

    def test_status_false_raises(self):
        from qase_sync.client.qase import QaseClient
        from qase_sync.core.exceptions import QaseAPIError

        def handler(request):
            return httpx.Response(200, json={"status": False, "errorMessage": "Project not found"})

        config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
        client = QaseClient(config, transport=httpx.MockTransport(handler))

        async def _run():
            try:
                await client.create_run("t", [1])
            finally:
                await client.close()

        with pytest.raises(QaseAPIError, match="Project not found"):
            asyncio.run(_run())

    @pytest.mark.parametrize("body", [[1, 2], "ok", None])
    def test_non_object_body_raises(self, body):
        from qase_sync.client.qase import QaseClient
        from qase_sync.core.exceptions import QaseAPIError

        def handler(request):
            return httpx.Response(200, json=body)

        config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
        client = QaseClient(config, transport=httpx.MockTransport(handler))

        async def _run():
            try:
                await client.create_run("t", [1])
            finally:
                await client.close()

        with pytest.raises(QaseAPIError, match="响应格式异常") as exc_info:
            asyncio.run(_run())
        assert exc_info.value.status_code == 200

    def test_transport_error_raises(self):
        from qase_sync.client.qase import QaseClient
        from qase_sync.core.exceptions import QaseAPIError

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
        client = QaseClient(config, transport=httpx.MockTransport(handler))

        async def _run():
            try:
                await client.get_case_steps(1)
            finally:
                await client.close()

        with pytest.raises(QaseAPIError, match="请求异常"):
            asyncio.run(_run())

    def test_create_run_without_id(self):
        from qase_sync.client.qase import QaseClient
        from qase_sync.core.exceptions import QaseAPIError

        def handler(request):
            return httpx.Response(200, json={"status": True, "result": {}})

        config = QaseConfig(api_base="https://qase.test", api_token="tok", project_code="DEMO")
        client = QaseClient(config, transport=httpx.MockTransport(handler))

        async def _run():
            try:
                await client.create_run("t", [1])
            finally:
                await client.close()

        with pytest.raises(QaseAPIError, match="result.id"):
            asyncio.run(_run())


class TestPayloads:
    """测试两种提交格式"""

    def test_v1_payload(self):
        from qase_sync.publisher import to_v1_payload

        assert to_v1_payload(_result()) == {
            "case_id": 501,
            "status": "passed",
            "comment": "✅ Status code is 200",
            "steps": [
                {"position": 1, "action": "Send request", "expected_result": "Status code is 200", "status": "passed"}
            ],
        }

    def test_v2_payload(self):
        from qase_sync.publisher import to_v2_payload

        assert to_v2_payload(_result(status="failed")) == {
            "title": "Login Qase:501",
            "testops_id": 501,
            "execution": {"status": "failed"},
            "fields": {"description": "✅ Status code is 200"},
            "steps": [
                {
                    "position": 1,
                    "data": {"action": "Send request", "expected_result": "Status code is 200"},
                    "execution": {"status": "failed"},
                }
            ],
        }


class TestPublishers:
    """测试发布器"""

    def test_build_publisher(self):
        from qase_sync.core.exceptions import ConfigError
        from qase_sync.publisher import BatchPublisher, PerCasePublisher, build_publisher

        client = AsyncMock()
        assert isinstance(build_publisher("per_case", client), PerCasePublisher)
        assert isinstance(build_publisher("batch", client), BatchPublisher)
        with pytest.raises(ConfigError):
            build_publisher("v3", client)

    def test_per_case_posts_each_result(self):
        from qase_sync.publisher import PerCasePublisher

        fake = FakeQase()
        client = _make_client(fake)
        publisher = PerCasePublisher(client)

        async def _run():
            try:
                await publisher.submit_results(9, [_result(1), _result(2)])
            finally:
                await client.close()

        asyncio.run(_run())
        assert fake.calls() == [("POST", "/v1/result/DEMO/9"), ("POST", "/v1/result/DEMO/9")]
        assert [fake.body(i)["case_id"] for i in range(2)] == [1, 2]

    def test_per_case_aborts_on_first_failure(self):
        from qase_sync.core.exceptions import QaseAPIError
        from qase_sync.publisher import PerCasePublisher

        client = AsyncMock()
        client.create_result.side_effect = [QaseAPIError("HTTP 500"), {"status": True}]
        publisher = PerCasePublisher(client)

        with pytest.raises(QaseAPIError):
            asyncio.run(publisher.submit_results(9, [_result(1), _result(2)]))
        assert client.create_result.await_count == 1

    def test_batch_posts_once(self):
        from qase_sync.publisher import BatchPublisher

        fake = FakeQase()
        client = _make_client(fake)
        publisher = BatchPublisher(client)

        async def _run():
            try:
                await publisher.submit_results(9, [_result(1), _result(2)])
            finally:
                await client.close()

        asyncio.run(_run())
        assert fake.calls() == [("POST", "/v2/DEMO/run/9/results")]
        assert [r["testops_id"] for r in fake.body(0)["results"]] == [1, 2]

    def test_batch_skips_empty(self):
        from qase_sync.publisher import BatchPublisher

        client = AsyncMock()
        asyncio.run(BatchPublisher(client).submit_results(9, []))
        client.create_results_bulk.assert_not_awaited()
