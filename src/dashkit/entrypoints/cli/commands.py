"""Helper subcommands of the ``dashkit`` CLI.

Results go to stdout; diagnostics go to stderr through logging.
"""

import json
import logging
import random
from typing import Any

import click

from dashkit.bootstrap import Toolkit
from dashkit.interfaces.errors import FetchError

logger = logging.getLogger(__name__)


def _load_object(value: str) -> dict[str, Any]:
    try:
        obj = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON ({e.msg})", param_hint="JSON") from e
    if not isinstance(obj, dict):
        raise click.BadParameter("expected a JSON object", param_hint="JSON")
    return obj


@click.command()
@click.argument("items", nargs=-1)
@click.option("--seed", type=int, default=None, help="Seed for a reproducible order.")
@click.pass_obj
def shuffle(toolkit: Toolkit, items: tuple[str, ...], seed: int | None) -> None:
    """Print ITEMS in a random order, space-separated."""
    rng = random.Random(seed) if seed is not None else None
    click.echo(" ".join(toolkit.shuffle(items, rng=rng)))


@click.command()
@click.argument("json_text", metavar="JSON")
@click.argument("keys", nargs=-1)
@click.pass_obj
def pick(toolkit: Toolkit, json_text: str, keys: tuple[str, ...]) -> None:
    """Print the JSON object restricted to KEYS."""
    click.echo(json.dumps(toolkit.pick(_load_object(json_text), keys)))


@click.command()
@click.argument("json_text", metavar="JSON")
@click.argument("keys", nargs=-1)
@click.pass_obj
def omit(toolkit: Toolkit, json_text: str, keys: tuple[str, ...]) -> None:
    """Print the JSON object without KEYS."""
    click.echo(json.dumps(toolkit.omit(_load_object(json_text), keys)))


def _parse_headers(values: tuple[str, ...]) -> dict[str, str]:
    headers: dict[str, str] = {}
    for value in values:
        name, sep, content = value.partition(":")
        if not sep or not name.strip():
            raise click.BadParameter(
                f"Expected NAME:VALUE, got {value!r}", param_hint="--header"
            )
        headers[name.strip()] = content.strip()
    return headers


@click.command()
@click.argument("url")
@click.option("--method", "-X", default="GET", show_default=True, help="HTTP method.")
@click.option(
    "--header", "-H", "headers", multiple=True, help="Request header NAME:VALUE."
)
@click.option("--data", "-d", default=None, help="Request body.")
@click.pass_obj
def fetch(
    toolkit: Toolkit,
    url: str,
    method: str,
    headers: tuple[str, ...],
    data: str | None,
) -> None:
    """Fetch URL and print the response body.

    The status line goes to stderr. Exits with status 1 when the response is
    not 2xx or when no response could be obtained.
    """
    init = {"method": method, "headers": _parse_headers(headers), "body": data}
    try:
        response = toolkit.fetch(url, init)
    except FetchError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"{response.status} {response.url}", err=True)
    click.echo(response.text(), nl=False)
    if not response.ok:
        logger.warning("%s %s returned HTTP %s", method, url, response.status)
        raise click.exceptions.Exit(1)
