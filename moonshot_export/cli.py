"""Command-line interface for Moonshot Export."""

import logging
from pathlib import Path

import click

from . import __version__
from .config import Settings
from .exceptions import ExportError
from .schemas.request_record import Category, RequestSelector
from .services.export_service import export_request

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr so they never mix with exported output."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def handle_export_error(exc: ExportError) -> None:
    """Report an export failure and exit with its exit code."""
    logger.debug("Export failed with %s", exc.error_code)
    click.echo(f"Error: {exc.detail}", err=True)
    click.get_current_context().exit(exc.exit_code)


def resolve_category(good: bool, bad: bool) -> Category | None:
    if good and bad:
        raise click.UsageError("--good and --bad are mutually exclusive")
    if good:
        return Category.GOODCASE
    if bad:
        return Category.BADCASE
    return None


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="moonshot-export")
@click.option("--id", "row_id", type=int, default=None, help="Row id.")
@click.option("--chatcmpl", default=None, help="Completion id (chatcmpl-...).")
@click.option(
    "--requestid",
    "request_id",
    default=None,
    help="Request id returned from Moonshot AI.",
)
@click.option(
    "-o",
    "--output",
    default=None,
    help="Output file path, or stdout / stderr. [default: stdout]",
)
@click.option(
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Output directory; the file name is generated from the request.",
)
@click.option(
    "--escape-html/--no-escape-html",
    default=True,
    show_default=True,
    help="Escape problematic HTML characters (<, >, &) in the JSON document.",
)
@click.option("--good", is_flag=True, help="Mark a chat request as a good case.")
@click.option("--bad", is_flag=True, help="Mark a chat request as a bad case.")
@click.option(
    "--tag",
    "tags",
    multiple=True,
    help="Tag describing the current case. Can be repeated.",
)
@click.option("--curl", is_flag=True, help="Export a curl command instead of JSON.")
@click.option(
    "--database-url",
    default=None,
    help="SQLAlchemy URL of the request store. [env: MOONSHOT_EXPORT_DATABASE_URL]",
)
@click.option(
    "--base-url",
    default=None,
    help="Base URL used in curl commands. [env: MOONSHOT_EXPORT_BASE_URL]",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def export(
    row_id: int | None,
    chatcmpl: str | None,
    request_id: str | None,
    output: str | None,
    directory: Path | None,
    escape_html: bool,
    good: bool,
    bad: bool,
    tags: tuple[str, ...],
    curl: bool,
    database_url: str | None,
    base_url: str | None,
    verbose: bool,
) -> None:
    """Export a Moonshot AI request as JSON or as a curl command."""
    try:
        selector = RequestSelector.resolve(row_id, chatcmpl, request_id)
    except ValueError:
        raise click.UsageError(
            "one of the options --id, --chatcmpl or --requestid is required"
        ) from None
    category = resolve_category(good, bad)
    if output is not None and directory is not None:
        raise click.UsageError("--output and --directory are mutually exclusive")

    settings = Settings.from_env()
    configure_logging("DEBUG" if verbose else settings.log_level)

    try:
        export_request(
            database_url or settings.database_url,
            selector,
            output=output,
            directory=directory,
            escape_html=escape_html,
            category=category,
            tags=tags,
            curl=curl,
            base_url=base_url or settings.base_url,
        )
    except ExportError as e:
        handle_export_error(e)


def main():
    """Main entry point for the CLI."""
    export()


if __name__ == "__main__":
    main()
