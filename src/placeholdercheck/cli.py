import logging
import os
from collections.abc import Sequence

import click

from placeholdercheck import checker, config
from placeholdercheck.classes import DEFAULT_SOURCE_CANDIDATES, CheckOptions
from placeholdercheck.exceptions import PlaceholderCheckError

logger = logging.getLogger(__name__)

PROG_NAME = "placeholder-checker"


def _source_help() -> str:
    primary, *fallbacks = DEFAULT_SOURCE_CANDIDATES
    if not fallbacks:
        return f"Source locale file to compare against (default: {primary})."
    return (
        f"Source locale file to compare against "
        f"(default: {primary}, fallbacks: {', '.join(fallbacks)})."
    )


def _not_empty(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise click.BadParameter("value must not be empty")
    return value


@click.command(
    name=PROG_NAME,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("-s", "--source", callback=_not_empty, help=_source_help())
@click.option(
    "--cwd",
    default=".",
    show_default="current working directory",
    callback=_not_empty,
    help="Directory to scan.",
)
@click.option(
    "--ignore",
    multiple=True,
    help="Additional JSON files to ignore (repeatable, comma separated allowed).",
)
@click.option(
    "-k",
    "--keyword-prefix",
    "keyword_prefixes",
    multiple=True,
    help="Treat <prefix><digits> as numbered placeholders (repeatable, comma separated allowed).",
)
@click.option(
    "-j",
    "--jobs",
    type=click.IntRange(min=1),
    default=None,
    help="Number of locale files checked in parallel.",
)
@click.option(
    "--config",
    "config_file",
    default=None,
    help=f"YAML configuration file (default: {config.DEFAULT_CONFIG_PATH} if present).",
)
@click.version_option(package_name="i18n-placeholder-checker")
@click.pass_context
def cli(
    ctx: click.Context,
    source: str | None,
    cwd: str,
    ignore: tuple[str, ...],
    keyword_prefixes: tuple[str, ...],
    jobs: int | None,
    config_file: str | None,
) -> None:
    """Check that every locale JSON file keeps the placeholders of the source locale."""
    try:
        settings = config.load_config(config_file)
        config.setup_logging(settings)
        defaults = config.check_defaults(settings)

        options = CheckOptions(
            cwd=os.path.abspath(cwd),
            source=source or defaults["source"],
            ignore=defaults["ignore"] + config.split_values(ignore),
            keyword_prefixes=defaults["keyword_prefixes"]
            + config.split_values(keyword_prefixes),
            jobs=jobs or defaults["jobs"],
        )
        ok = checker.run(options)
    except PlaceholderCheckError as ex:
        logger.debug("Placeholder check aborted", exc_info=True)
        click.echo(f"Error: {ex}", err=True)
        ctx.exit(1)

    ctx.exit(0 if ok else 1)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        return cli.main(args=argv, prog_name=PROG_NAME, standalone_mode=False) or 0
    except click.UsageError as ex:
        if ex.ctx is None:
            with click.Context(cli, info_name=PROG_NAME) as ctx:
                click.echo(ctx.get_usage(), err=True)
        ex.show()
        return 1
    except click.ClickException as ex:
        ex.show()
        return 1
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1


def run_cli() -> None:
    raise SystemExit(main())
