"""
CLI commands for inspecting jdbc:hazelcast URLs.

Uses click for command-line argument parsing.
"""

import json
import sys
from typing import Any

try:
    import click
except ImportError:
    click = None  # type: ignore

MASK = "**********"

# Property names whose values are never printed unless asked for
SECRET_KEYS = frozenset(
    {
        "password",
        "trustStorePassword",
        "access-key",
        "secret-key",
        "hazelcast.client.cloud.discovery.token",
    }
)


def require_click() -> None:
    """Raise error if click is not installed."""
    if click is None:
        print("Error: click is required for CLI. Install with: pip install click")
        sys.exit(1)


def mask_secrets(data: Any) -> Any:
    """Recursively replace secret values in a dumped configuration."""
    if isinstance(data, dict):
        return {k: MASK if k in SECRET_KEYS and v is not None else mask_secrets(v) for k, v in data.items()}
    if isinstance(data, list):
        return [mask_secrets(item) for item in data]
    return data


def parse_property_options(values: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated ``name=value`` options into a property bag."""
    properties: dict[str, str] = {}
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise ValueError(f"Expected name=value, got {item!r}")
        properties[name] = value
    return properties


# Only define CLI if click is available
if click is not None:

    @click.group()
    def cli() -> None:
        """Hazelcast JDBC connection string tool."""

    @cli.command()
    @click.argument("url")
    @click.option("--property", "-p", "props", multiple=True, help="Extra property as name=value")
    @click.option("--show-secrets", is_flag=True, help="Print passwords, keys and tokens in clear")
    def resolve(url: str, props: tuple[str, ...], show_secrets: bool) -> None:
        """Print the client configuration a URL resolves to."""
        from ..exceptions import HazelcastJdbcError
        from ..factory import resolve_config

        try:
            info = parse_property_options(props)
            config = resolve_config(url, info)
        except (HazelcastJdbcError, ValueError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)

        data = config.model_dump(mode="json")
        credentials = config.security_config.credentials
        if show_secrets and credentials is not None and credentials.password is not None:
            data["security_config"]["credentials"]["password"] = credentials.password.get_secret_value()
        elif not show_secrets:
            data = mask_secrets(data)

        click.echo(json.dumps(data, indent=2))

    @cli.command()
    def properties() -> None:
        """List the URL properties the driver understands."""
        from ..driver import Driver

        for info in Driver.instance().get_property_info(""):
            click.echo(f"{info.name:<30} {info.description}")

else:
    # Placeholder CLI if click is not installed
    def cli() -> None:  # type: ignore
        """CLI placeholder when click is not installed."""
        require_click()


def main() -> None:
    """Entry point for the CLI."""
    require_click()
    cli()


if __name__ == "__main__":
    main()
