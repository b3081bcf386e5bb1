# proxycheck/tasks/cacert.py
import logging

import requests

from proxycheck.config import Settings
from proxycheck.io.storage import write_stream

log = logging.getLogger(__name__)


def fetch_ca_cert(session: requests.Session, settings: Settings) -> int:
    """
    Download the proxy's CA certificate and write it to `settings.ca_cert_path`.
    Returns the number of bytes written.
    """
    with session.get(settings.ca_cert_url, stream=True) as r:
        r.raise_for_status()
        written = write_stream(settings.ca_cert_path, r)

    log.info(f"[getca] wrote {written} bytes to {settings.ca_cert_path}")
    return written
