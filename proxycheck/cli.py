"""
Proxy test harness.

Usage:
    proxycheck -getca
    proxycheck -getbrews
    proxycheck -gettrash -useproxy -cert client.pem -key client-key.pem
"""

import sys

import click
from pydantic import ValidationError

from proxycheck.config import LOG_LEVELS, Options, get_settings
from proxycheck.pipeline import run
from proxycheck.utils.logging import setup_logging


@click.command(context_settings={"help_option_names": ["-h", "-help", "--help"]})
@click.option("-useproxy", "--useproxy", "use_proxy", is_flag=True, help="Use Proxify Proxy")
@click.option("-getca", "--getca", "get_ca", is_flag=True, help="Download CA Certificate")
@click.option("-getbrews", "--getbrews", "get_brews", is_flag=True,
              help="Use proxy to fetch list of breweries from api")
@click.option("-gettrash", "--gettrash", "get_trash", is_flag=True,
              help="Fetch the mTLS endpoint using client certs")
@click.option("-nocerts", "--nocerts", "no_certs", is_flag=True, help="Do not supply TLS credentials")
@click.option("-cert", "--cert", "cert", default="client.pem", show_default=True,
              help="mTLS client certificate")
@click.option("-key", "--key", "key", default="client-key.pem", show_default=True,
              help="mTLS client certificate key")
@click.option("--log-level", "log_level", default=None,
              type=click.Choice(LOG_LEVELS, case_sensitive=False), help="Override LOG_LEVEL")
def main(use_proxy, get_ca, get_brews, get_trash, no_certs, cert, key, log_level):
    """Exercise an HTTP/HTTPS forward proxy."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise click.UsageError(f"invalid settings from environment:\n{e}") from e
    setup_logging(log_level or settings.log_level)

    options = Options(
        use_proxy=use_proxy,
        get_ca=get_ca,
        get_brews=get_brews,
        get_trash=get_trash,
        no_certs=no_certs,
        cert=cert,
        key=key,
    )
    sys.exit(run(options, settings))


if __name__ == "__main__":
    main()
