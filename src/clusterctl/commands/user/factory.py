"""Deferred Admin API client construction.
Admin API 클라이언트 지연 생성.
"""

from typing import Callable, Optional

from clusterctl.admin_client import AdminAPI
from clusterctl.config import TLSConfig

TLSResolver = Callable[[], Optional[TLSConfig]]
ClientBuilder = Callable[[str, Optional[TLSConfig]], AdminAPI]


class AdminAPIFactory:
    """Builds one Admin API client per command execution.

    Nothing is resolved until `resolve()` is called, so bad TLS material only
    fails the command that actually needs the client.
    """

    def __init__(self, resolve_tls: TLSResolver, build_client: ClientBuilder):
        self.resolve_tls = resolve_tls
        self.build_client = build_client

    def resolve(self, api_url: str) -> AdminAPI:
        """Resolve TLS and bind it with `api_url` into a new client."""
        tls = self.resolve_tls()
        return self.build_client(api_url, tls)
