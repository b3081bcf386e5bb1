# tests/conftest.py
import os
import pytest

@pytest.fixture(scope="session", autouse=True)
def _env_defaults():
    # --- Proxy under test ---
    os.environ.setdefault("PROXY_URL", "http://proxify:8888")
    os.environ.setdefault("CA_CERT_URL", "http://proxify/cacert.crt")
    os.environ.setdefault("CA_CERT_PATH", "rootCA.crt")

    # --- Upstreams ---
    os.environ.setdefault("BREWS_URL", "https://api.openbrewerydb.org/v1/breweries")
    os.environ.setdefault("BREWS_CITY", "san_diego")
    os.environ.setdefault("BREWS_PER_PAGE", "5")
    os.environ.setdefault("IP_ECHO_URL", "http://ifconfig.me/ip")
    os.environ.setdefault("MTLS_URL", "https://trashcan.undeadops.xyz/hello")

    os.environ.setdefault("USER_AGENT", "httpproxy/1.0")
    os.environ.setdefault("TRASHCAN_INSECURE_SKIP_VERIFY", "true")
    os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def settings(tmp_path):
    from proxycheck.config import Settings
    return Settings(ca_cert_path=str(tmp_path / "rootCA.crt"))


PEM = b"-----BEGIN CERTIFICATE-----\nMIIBfake\n-----END CERTIFICATE-----\n"


@pytest.fixture
def ca_bundle(settings):
    with open(settings.ca_cert_path, "wb") as f:
        f.write(PEM)
    return settings.ca_cert_path


@pytest.fixture
def make_response():
    import io
    import requests

    def _make(status=200, body=b"", url="http://example.test/"):
        r = requests.Response()
        r.status_code = status
        r.raw = io.BytesIO(body)
        r.url = url
        r.encoding = "utf-8"
        return r

    return _make


@pytest.fixture
def pki():
    # Test-only PKI under tests/fixtures: ca.pem signs server.pem (127.0.0.1)
    # and client.pem (CN=trashcan-client); other-key.pem matches neither.
    from pathlib import Path
    root = Path(__file__).parent / "fixtures"
    return {name: str(root / f"{name}.pem") for name in ("ca", "server", "server-key", "client", "client-key", "other-key")}
