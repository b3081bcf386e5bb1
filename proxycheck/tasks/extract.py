# proxycheck/tasks/extract.py
import logging
from typing import List, Optional

import click
import requests
from pydantic import ValidationError

from proxycheck.config import Settings
from proxycheck.utils.models import Brewery

log = logging.getLogger(__name__)

HEADERS = {"Accept": "application/json"}


def brews_request_url(settings: Settings, city: str) -> str:
    params = {"by_city": city, "per_page": settings.brews_per_page}
    return requests.Request("GET", settings.brews_url, params=params).prepare().url


def get_my_ip(session: requests.Session, settings: Settings) -> Optional[str]:
    r = session.get(settings.ip_echo_url)
    if r.status_code != requests.codes.ok:
        log.warning(f"[getbrews] ip echo returned {r.status_code}")
        return None
    return r.text.strip()


def _parse_breweries(payload) -> List[Brewery]:
    if not isinstance(payload, list):
        log.warning(f"[getbrews] expected a list, got {type(payload).__name__}")
        return []

    breweries = []
    for item in payload:
        try:
            breweries.append(Brewery.model_validate(item))
        except ValidationError as e:
            log.warning(f"[getbrews] skipping entry: {e.error_count()} validation error(s)")
    return breweries


def get_brews(session: requests.Session, settings: Settings, city: str) -> List[Brewery]:
    """
    Fetch breweries for `city` through the proxied session.
    Prints the request URL and the caller's apparent IP first.
    Raises requests.RequestException on network or HTTP errors.
    """
    url = brews_request_url(settings, city)
    click.echo(url)

    ip = get_my_ip(session, settings)
    if ip:
        click.echo(ip)

    r = session.get(url, headers=HEADERS)
    r.raise_for_status()
    try:
        payload = r.json()
    except ValueError:
        log.warning("[getbrews] response body is not JSON")
        return []

    breweries = _parse_breweries(payload)
    log.info(f"[getbrews] city={city} breweries={len(breweries)}")
    return breweries


# Re-export for unit tests
parse_breweries = _parse_breweries
