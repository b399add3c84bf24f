"""Page title composition command.

Contents:
    * :func:`cli_title` - Print the composed title for a page.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from pydantic import ValidationError

from page_title.adapters.translation.config import TitleConfig
from page_title.domain.behaviors import PageTitle
from page_title.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _load_title_config(cli_ctx: CLIContext) -> TitleConfig:
    """Parse ``[page_title]``, exiting with CONFIG_ERROR when it is invalid."""
    try:
        return cli_ctx.services.load_title_config_from_dict(cli_ctx.config.as_dict())
    except ValidationError as exc:
        logger.error(
            "Invalid page_title configuration",
            extra={"error": str(exc), "error_type": type(exc).__name__},
        )
        click.echo(f"\nError: Invalid [page_title] configuration - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


def _build_page(cli_ctx: CLIContext, title_config: TitleConfig, locale: str | None) -> PageTitle:
    """Wire a PageTitle for this invocation, exiting with CONFIG_ERROR on a blank locale."""
    try:
        resolve = cli_ctx.services.build_text_resolver(title_config, locale=locale)
    except ConfigurationError as exc:
        logger.error("Configuration error", extra={"error": str(exc)})
        click.echo(f"\nError: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc
    return PageTitle(resolve=resolve, postfix_key=title_config.postfix_key)


@click.command("title", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("page_title", required=False, default="")
@click.option(
    "--locale",
    type=str,
    default=None,
    help="Resolve the postfix in this locale instead of page_title.locale",
)
@click.pass_context
def cli_title(ctx: click.Context, page_title: str, locale: str | None) -> None:
    """Print PAGE_TITLE joined to the translated application name.

    Without PAGE_TITLE only the application name is printed.
    """
    cli_ctx = get_cli_context(ctx)
    extra = {"command": "title", "locale": locale, "profile": cli_ctx.profile}

    with lib_log_rich.runtime.bind(job_id="cli-title", extra=extra):
        title_config = _load_title_config(cli_ctx)
        page = _build_page(cli_ctx, title_config, locale)
        page.set_title(page_title)
        composed = page.get_title()
        logger.info("Composed page title", extra={"title": page_title, "composed": composed})
        click.echo(composed)


__all__ = ["cli_title"]
