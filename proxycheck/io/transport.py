import logging
import ssl
from pathlib import Path
from typing import Optional, Tuple, Union

import requests
import urllib3

from proxycheck.config import Options, Settings

log = logging.getLogger(__name__)

PEM_MARKER = b"-----BEGIN CERTIFICATE-----"


def load_ca_bundle(path: Union[str, Path]) -> Path:
    """
    Read the PEM CA bundle the proxy signs with.
    Raises OSError when the file is missing or unreadable.
    """
    p = Path(path)
    data = p.read_bytes()
    if PEM_MARKER not in data:
        log.warning(f"no PEM certificate found in {p}")
    return p


def load_client_credentials(cert: str, key: str) -> Tuple[str, str]:
    # Fails here, before any request, on a missing, mismatched or corrupt pair.
    ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    ctx.load_cert_chain(certfile=cert, keyfile=key)
    return cert, key


def new_session(
    settings: Settings,
    proxy_url: Optional[str] = None,
    verify: Union[bool, str] = True,
    cert: Optional[Tuple[str, str]] = None,
) -> requests.Session:
    s = requests.Session()
    # proxy and CA selection come only from the arguments, never HTTP(S)_PROXY etc.
    s.trust_env = False
    s.headers["User-Agent"] = settings.user_agent
    if proxy_url:
        s.proxies = {"http": proxy_url, "https": proxy_url}
    s.verify = verify
    if cert:
        s.cert = cert
    return s


def ca_download_session(settings: Settings) -> requests.Session:
    return new_session(settings, proxy_url=settings.proxy_url)


def proxied_session(settings: Settings) -> requests.Session:
    ca = load_ca_bundle(settings.ca_cert_path)
    return new_session(settings, proxy_url=settings.proxy_url, verify=str(ca))


def mtls_session(settings: Settings, options: Options) -> requests.Session:
    cert = None
    if not options.no_certs:
        cert = load_client_credentials(options.cert, options.key)

    proxy_url = None
    verify: Union[bool, str] = True
    if options.use_proxy:
        proxy_url = settings.proxy_url
        verify = str(load_ca_bundle(settings.ca_cert_path))

    if settings.trashcan_insecure_skip_verify:
        log.warning(f"server certificate verification disabled for {settings.mtls_url} (test-only)")
        # logged once above, not per request
        urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        verify = False

    return new_session(settings, proxy_url=proxy_url, verify=verify, cert=cert)
