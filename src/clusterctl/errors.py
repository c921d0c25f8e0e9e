"""clusterctl 오류 타입."""

from typing import Optional


class ClusterctlError(Exception):
    """Base error reported by the top-level handler."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ConfigError(ClusterctlError):
    """설정/TLS 해석 오류."""


class AdminAPIError(ClusterctlError):
    """Admin API 오류."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
