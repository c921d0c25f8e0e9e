"""Admin API 클라이언트."""

from typing import Any, Optional, Protocol
from urllib.parse import quote

import httpx

from clusterctl.config import TLSConfig, settings
from clusterctl.errors import AdminAPIError


class AdminAPI(Protocol):
    """User management capability of the Admin API."""

    def create_user(self, username: str, password: str) -> None:
        ...

    def delete_user(self, username: str) -> None:
        ...

    def close(self) -> None:
        ...


def _normalize_url(url: str, tls: Optional[TLSConfig]) -> str:
    """Add a scheme to bare host:port addresses."""
    url = url.strip().rstrip("/")
    if not url:
        raise AdminAPIError("Admin API URL is empty")
    if "://" not in url:
        scheme = "https" if tls is not None else "http"
        url = f"{scheme}://{url}"
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise AdminAPIError(f"Invalid Admin API URL '{url}': {e}") from e
    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise AdminAPIError(f"Invalid Admin API URL '{url}'")
    return url


class AdminClient:
    """Cluster Admin API 클라이언트."""

    def __init__(
        self,
        url: str,
        tls: Optional[TLSConfig] = None,
        timeout: Optional[float] = None,
    ):
        self.url = _normalize_url(url, tls)
        self.tls = tls
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client: Optional[httpx.Client] = None

    @property
    def client(self) -> httpx.Client:
        """HTTP 클라이언트 (lazy initialization)."""
        if self._client is None:
            try:
                verify: Any = self.tls.ssl_context() if self.tls is not None else True
            except OSError as e:
                raise AdminAPIError(f"TLS 설정 로드 실패: {e}") from e

            self._client = httpx.Client(
                base_url=self.url,
                verify=verify,
                timeout=self.timeout,
            )

        client = self._client
        assert client is not None
        return client

    def _request(
        self,
        method: str,
        path: str,
        data: Optional[dict] = None,
    ) -> dict[str, Any]:
        """API 요청 실행."""
        http_client = self.client
        try:
            response = http_client.request(method=method, url=path, json=data)
        except httpx.RequestError as e:
            raise AdminAPIError(f"연결 실패 ({self.url}): {e}") from e

        if response.status_code >= 400:
            message = ""
            try:
                body = response.json() if response.content else {}
            except ValueError:
                body = {}
            if isinstance(body, dict):
                message = str(body.get("message") or "")
            if not message:
                message = response.text.strip() or f"HTTP {response.status_code}"
            raise AdminAPIError(message, response.status_code)

        if response.status_code == 204 or not response.content:
            return {}
        try:
            result = response.json()
        except ValueError:
            return {}
        return result if isinstance(result, dict) else {}

    def close(self) -> None:
        """클라이언트 종료."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "AdminClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ─────────────────────────────────────────────────────────────────────────
    # SASL 사용자 관리
    # ─────────────────────────────────────────────────────────────────────────

    def create_user(self, username: str, password: str) -> None:
        """SASL 사용자 생성.

        Args:
            username: 새 사용자 이름
            password: 새 사용자 비밀번호
        """
        self._request(
            "POST",
            "/v1/security/users",
            data={
                "username": username,
                "password": password,
                "algorithm": settings.sasl_mechanism,
            },
        )

    def delete_user(self, username: str) -> None:
        """SASL 사용자 삭제."""
        self._request("DELETE", f"/v1/security/users/{quote(username, safe='')}")
