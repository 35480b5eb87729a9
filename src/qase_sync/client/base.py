"""共享 HTTP 客户端基类"""

import httpx

from qase_sync.core.exceptions import QaseAPIError
from qase_sync.core.logging import get_logger

logger = get_logger(__name__)


class BaseHTTPClient:
    """异步 HTTP 客户端基类（不重试，首个失败即抛出 QaseAPIError）"""

    def __init__(
        self,
        base_url: str,
        api_token: str,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={"Token": api_token, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        **kwargs,
    ) -> dict:
        """发送请求并返回 JSON 响应体"""
        try:
            resp = await self._client.request(method, path, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            body = e.response.text
            raise QaseAPIError(
                f"{method} {path} 失败 (HTTP {status}): {body}",
                status_code=status,
                response_body=body,
            ) from e
        except httpx.RequestError as e:
            raise QaseAPIError(f"{method} {path} 请求异常: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise QaseAPIError(
                f"{method} {path} 响应不是合法 JSON",
                status_code=resp.status_code,
                response_body=resp.text,
            ) from e

        if not isinstance(data, dict):
            raise QaseAPIError(
                f"{method} {path} 响应格式异常",
                status_code=resp.status_code,
                response_body=resp.text,
            )

        # Qase 在部分错误场景下返回 2xx + {"status": false}
        if data.get("status") is False:
            raise QaseAPIError(
                f"{method} {path} 返回失败状态: {resp.text}",
                status_code=resp.status_code,
                response_body=resp.text,
            )
        return data

    async def close(self) -> None:
        await self._client.aclose()
