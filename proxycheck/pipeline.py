# proxycheck/pipeline.py
import logging

import click
import requests
from pydantic import TypeAdapter

from proxycheck.config import Options, Settings, get_settings
from proxycheck.io.transport import ca_download_session, mtls_session, proxied_session
from proxycheck.tasks.cacert import fetch_ca_cert
from proxycheck.tasks.extract import get_brews
from proxycheck.tasks.trashcan import fetch_trashcan
from proxycheck.utils.models import Brewery

log = logging.getLogger(__name__)

_BREWERY_LIST = TypeAdapter(list[Brewery])


def _get_ca(settings: Settings) -> bool:
    try:
        with ca_download_session(settings) as session:
            fetch_ca_cert(session, settings)
    except requests.RequestException as e:
        click.echo(f"Error fetching caCert pem, {e}")
        return False
    except OSError as e:
        click.echo(f"error writing {settings.ca_cert_path} - {e}")
        return False
    return True


def _get_brews(settings: Settings) -> bool:
    # Client construction errors are fatal, request errors are not.
    try:
        session = proxied_session(settings)
    except OSError as e:
        log.error(f"[getbrews] cannot load CA bundle: {e}")
        return False

    breweries = []
    with session:
        try:
            breweries = get_brews(session, settings, settings.brews_city)
        except requests.RequestException as e:
            click.echo(f"Error Getting {settings.brews_city}, {e}")
    click.echo(_BREWERY_LIST.dump_json(breweries, indent=2).decode())
    return True


def _get_trash(options: Options, settings: Settings) -> bool:
    try:
        with mtls_session(settings, options) as session:
            if options.use_proxy:
                click.echo(f"Connecting to Trashcan using proxy: {settings.proxy_url}")
            else:
                click.echo("Connecting to Trashcan without Proxy")
            body = fetch_trashcan(session, settings)
    except OSError as e:  # ssl.SSLError and requests errors included
        log.error(f"[gettrash] {e}")
        return False
    click.echo(body)
    return True


def run(options: Options, settings: Settings | None = None) -> int:
    """
    Run the selected paths in order: getca, getbrews, gettrash.
    Returns the process exit status, 1 on the first fatal error.
    """
    settings = settings or get_settings()

    if options.get_ca and not _get_ca(settings):
        return 1
    if options.get_brews and not _get_brews(settings):
        return 1
    if options.get_trash and not _get_trash(options, settings):
        return 1
    return 0
