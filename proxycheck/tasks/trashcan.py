# proxycheck/tasks/trashcan.py
import requests

from proxycheck.config import Settings


def fetch_trashcan(session: requests.Session, settings: Settings) -> str:
    r = session.get(settings.mtls_url)
    return r.text
