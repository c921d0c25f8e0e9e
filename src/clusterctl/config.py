"""clusterctl 설정 관리.

Configuration priority (highest to lowest):
1. Environment variables (CLUSTERCTL_*)
2. User config (~/.config/clusterctl/config)
3. System config (/etc/clusterctl/config) - for admin use
"""

import os
import ssl
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Tuple, Type

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from clusterctl.errors import ConfigError

DEFAULT_ADMIN_PORT = 9644


def _load_config_file(filepath: Path) -> dict[str, str]:
    """Load key=value config file / key=value 설정 파일 로드."""
    config: dict[str, str] = {}

    if not filepath.exists():
        return config

    try:
        content = filepath.read_text()
    except PermissionError:
        return config

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue

        key, value = line.split("=", 1)
        config[key.strip()] = value.strip().strip('"').strip("'")

    return config


def _get_user_config_path() -> Path:
    """Get user config path / 사용자 설정 파일 경로."""
    config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
    return Path(config_home) / "clusterctl" / "config"


def _get_system_config_path() -> Path:
    """Get system config path / 시스템 설정 파일 경로."""
    return Path("/etc/clusterctl/config")


def _load_all_configs() -> dict[str, str]:
    """Load all config files with priority.

    Priority: user config > system config

    Maps config file keys to settings fields:
    - ADMIN_API_URL -> admin_api_url
    - TLS_CERT -> tls_cert_file
    - TLS_KEY -> tls_key_file
    - TLS_TRUSTSTORE -> tls_truststore_file
    - SASL_MECHANISM -> sasl_mechanism
    """
    mapping = {
        "ADMIN_API_URL": "admin_api_url",
        "TLS_CERT": "tls_cert_file",
        "TLS_KEY": "tls_key_file",
        "TLS_TRUSTSTORE": "tls_truststore_file",
        "SASL_MECHANISM": "sasl_mechanism",
    }

    result = {}

    # 1. Load system config (lower priority)
    for key, value in _load_config_file(_get_system_config_path()).items():
        if key in mapping:
            result[mapping[key]] = value

    # 2. Load user config (higher priority, overwrites system)
    for key, value in _load_config_file(_get_user_config_path()).items():
        if key in mapping:
            result[mapping[key]] = value

    return result


class ConfigFileSource(PydanticBaseSettingsSource):
    """Custom settings source for config files."""

    def get_field_value(
        self, field: Any, field_name: str
    ) -> Tuple[Any, str, bool]:
        config = _load_all_configs()
        if field_name in config:
            return config[field_name], field_name, False
        return None, field_name, False

    def __call__(self) -> dict[str, Any]:
        return _load_all_configs()


@dataclass(frozen=True)
class TLSConfig:
    """Admin API 전송 보안 설정."""

    cert_file: Optional[Path] = None
    key_file: Optional[Path] = None
    truststore_file: Optional[Path] = None

    @property
    def client_cert(self) -> Optional[Tuple[str, str]]:
        """httpx `cert` 인자."""
        if self.cert_file and self.key_file:
            return str(self.cert_file), str(self.key_file)
        return None

    def ssl_context(self) -> ssl.SSLContext:
        """Build the SSL context passed to httpx as `verify`."""
        context = ssl.create_default_context(
            cafile=str(self.truststore_file) if self.truststore_file else None
        )
        if self.client_cert:
            context.load_cert_chain(*self.client_cert)
        return context


class Settings(BaseSettings):
    """애플리케이션 설정."""

    model_config = SettingsConfigDict(
        env_prefix="CLUSTERCTL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Admin API 설정
    admin_api_url: str = Field(
        default=f"localhost:{DEFAULT_ADMIN_PORT}",
        description="Admin API 주소",
    )
    request_timeout: float = Field(
        default=30.0,
        description="HTTP 요청 타임아웃 (초)",
    )
    sasl_mechanism: str = Field(
        default="SCRAM-SHA-256",
        description="새 사용자의 SASL SCRAM 알고리즘",
    )

    # TLS 설정
    tls_cert_file: Optional[Path] = Field(
        default=None,
        description="클라이언트 인증서 경로",
    )
    tls_key_file: Optional[Path] = Field(
        default=None,
        description="클라이언트 키 경로",
    )
    tls_truststore_file: Optional[Path] = Field(
        default=None,
        description="CA 인증서(truststore) 경로",
    )

    @property
    def user_config_file(self) -> Path:
        """사용자 설정 파일 경로."""
        return _get_user_config_path()

    def has_tls(self) -> bool:
        """TLS 설정이 있는지 확인."""
        return bool(self.tls_cert_file or self.tls_key_file or self.tls_truststore_file)

    def resolve_tls(self) -> Optional[TLSConfig]:
        """Resolve transport security for the Admin API client.

        Returns None when no TLS material is configured (plaintext).

        Raises:
            ConfigError: cert/key configured without its pair, or a file is missing.
        """
        if not self.has_tls():
            return None

        if bool(self.tls_cert_file) != bool(self.tls_key_file):
            raise ConfigError(
                "TLS_CERT and TLS_KEY must be set together "
                f"(cert={self.tls_cert_file or '-'}, key={self.tls_key_file or '-'})"
            )

        for path in (self.tls_cert_file, self.tls_key_file, self.tls_truststore_file):
            if path is not None and not path.exists():
                raise ConfigError(f"TLS file not found: {path}")

        return TLSConfig(
            cert_file=self.tls_cert_file,
            key_file=self.tls_key_file,
            truststore_file=self.tls_truststore_file,
        )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        """Customize settings sources.

        Priority (highest to lowest):
        1. init_settings (constructor args)
        2. env_settings (CLUSTERCTL_* environment variables)
        3. dotenv_settings (.env file)
        4. config_files (~/.config/clusterctl/config, /etc/clusterctl/config)
        5. file_secret_settings (secrets directory)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            ConfigFileSource(settings_cls),
            file_secret_settings,
        )


# 전역 설정 인스턴스
settings = Settings()
