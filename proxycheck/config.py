import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env(name: str, default: str, **kwargs):
    return Field(default_factory=lambda: os.getenv(name, default), **kwargs)


def _env_flag(name: str, default: str):
    return Field(default_factory=lambda: os.getenv(name, default).strip().lower() in ("1", "true", "yes"))


class Settings(BaseModel):
    # env values arrive as text, so defaults go through validation too
    model_config = ConfigDict(validate_default=True)

    proxy_url: str = _env("PROXY_URL", "http://proxify:8888")
    ca_cert_url: str = _env("CA_CERT_URL", "http://proxify/cacert.crt")
    ca_cert_path: str = _env("CA_CERT_PATH", "rootCA.crt")

    brews_url: str = _env("BREWS_URL", "https://api.openbrewerydb.org/v1/breweries")
    brews_city: str = _env("BREWS_CITY", "san_diego")
    brews_per_page: int = _env("BREWS_PER_PAGE", "5", gt=0)

    ip_echo_url: str = _env("IP_ECHO_URL", "http://ifconfig.me/ip")
    mtls_url: str = _env("MTLS_URL", "https://trashcan.undeadops.xyz/hello")
    user_agent: str = _env("USER_AGENT", "httpproxy/1.0")

    # Test-only: the trashcan endpoint serves a self-signed certificate.
    trashcan_insecure_skip_verify: bool = _env_flag("TRASHCAN_INSECURE_SKIP_VERIFY", "true")

    log_level: str = _env("LOG_LEVEL", "INFO")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return v


class Options(BaseModel):
    """Command-line flags for one run."""

    use_proxy: bool = False
    get_ca: bool = False
    get_brews: bool = False
    get_trash: bool = False
    no_certs: bool = False
    cert: str = "client.pem"
    key: str = "client-key.pem"


def get_settings() -> Settings:
    return Settings()
