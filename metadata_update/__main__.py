"""CLI entry point for the release-metadata updater."""

from __future__ import annotations

import logging

import click

from .config import DEFAULT_CONTRACT, TAG_ENV_VAR, UpdateConfig
from .exceptions import ConfigError, UpdateError
from .store import dump_metadata
from .updater import update_metadata

LOGGER = logging.getLogger("metadata_update")

LOG_FORMAT = "%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()), format=LOG_FORMAT, datefmt=LOG_DATEFMT
    )


@click.command()
@click.option(
    "--contract",
    default=DEFAULT_CONTRACT,
    show_default=True,
    help="Contract value for new release entry.",
)
@click.option(
    "--repo-dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False),
    help="Root directory of the repository.",
)
@click.option(
    "--tag",
    envvar=TAG_ENV_VAR,
    default=None,
    help=f"Release tag to process (defaults to ${TAG_ENV_VAR}).",
)
@click.option(
    "--dry-run/--no-dry-run",
    default=False,
    show_default=True,
    help="Print the updated metadata instead of writing it.",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging verbosity.",
)
def cli(contract: str, repo_dir: str, tag: str | None, dry_run: bool, log_level: str) -> None:
    """Add a release series to metadata.yaml for a new minor version tag."""

    _configure_logging(log_level)
    config = UpdateConfig(contract=contract, repo_dir=repo_dir)

    try:
        if not tag:
            raise ConfigError(
                f"{config.tag_env_var} environment variable not set",
                context={"env": config.tag_env_var},
            )
        result = update_metadata(
            tag,
            contract=config.contract,
            repo_dir=config.repo_dir,
            dry_run=dry_run,
        )
    except UpdateError as exc:
        exc.log_error(LOGGER)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(exc.exit_code) from exc

    if dry_run and result.changed and result.metadata is not None:
        click.echo(dump_metadata(result.metadata), nl=False)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
