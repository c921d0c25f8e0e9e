from pathlib import Path

import pytest

from clusterctl.config import DEFAULT_ADMIN_PORT, Settings, TLSConfig
from clusterctl.errors import ConfigError


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("ADMIN_API_URL", "TLS_CERT_FILE", "TLS_KEY_FILE", "TLS_TRUSTSTORE_FILE"):
        monkeypatch.delenv(f"CLUSTERCTL_{name}", raising=False)
    return tmp_path


def _touch(path: Path) -> Path:
    path.write_text("-----BEGIN CERTIFICATE-----\n")
    return path


def test_default_admin_api_url():
    assert Settings(_env_file=None).admin_api_url == f"localhost:{DEFAULT_ADMIN_PORT}"


def test_env_overrides_admin_api_url(monkeypatch):
    monkeypatch.setenv("CLUSTERCTL_ADMIN_API_URL", "10.0.0.7:9644")
    assert Settings(_env_file=None).admin_api_url == "10.0.0.7:9644"


def test_user_config_file(isolated_config):
    config_file = isolated_config / "xdg" / "clusterctl" / "config"
    config_file.parent.mkdir(parents=True)
    config_file.write_text(
        "# clusterctl configuration\n"
        "ADMIN_API_URL=\"broker-1:9644\"\n"
        "SASL_MECHANISM=SCRAM-SHA-512\n"
        "UNKNOWN=ignored\n"
    )

    loaded = Settings(_env_file=None)

    assert loaded.admin_api_url == "broker-1:9644"
    assert loaded.sasl_mechanism == "SCRAM-SHA-512"


def test_resolve_tls_plaintext():
    assert Settings(_env_file=None).resolve_tls() is None


def test_resolve_tls_with_client_cert(tmp_path):
    cert = _touch(tmp_path / "client.crt")
    key = _touch(tmp_path / "client.key")
    ca = _touch(tmp_path / "ca.crt")

    tls = Settings(
        _env_file=None, tls_cert_file=cert, tls_key_file=key, tls_truststore_file=ca
    ).resolve_tls()

    assert isinstance(tls, TLSConfig)
    assert tls.client_cert == (str(cert), str(key))
    assert tls.truststore_file == ca


def test_resolve_tls_truststore_only(tmp_path):
    ca = _touch(tmp_path / "ca.crt")

    tls = Settings(_env_file=None, tls_truststore_file=ca).resolve_tls()

    assert tls is not None
    assert tls.client_cert is None
    assert tls.truststore_file == ca


def test_resolve_tls_cert_without_key(tmp_path):
    cert = _touch(tmp_path / "client.crt")

    with pytest.raises(ConfigError):
        Settings(_env_file=None, tls_cert_file=cert).resolve_tls()


def test_resolve_tls_missing_file(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        Settings(_env_file=None, tls_truststore_file=tmp_path / "missing.crt").resolve_tls()

    assert "missing.crt" in exc_info.value.message
