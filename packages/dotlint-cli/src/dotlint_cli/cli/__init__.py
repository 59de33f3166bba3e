import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler

from dotlint_cli.report import ConsoleReporter
from dotlint_core.codebase.debug import configure_logger
from dotlint_core.config import Config
from dotlint_core.errors import DotlintError
from dotlint_rules.checker import Validator

EXIT_FATAL = 2


@click.command(name="validate-dotfiles")
@click.option("--fix", "-f", "fix", is_flag=True, help="Show fix suggestions.")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Show detailed output.")
def cli(fix: bool, verbose: bool) -> None:
    """Validate dotfiles repository structure and configuration.

    The repository root is $DOTFILES_DIR, or the current directory if unset.

    \b
    Exit codes:
      0 - All validations passed (warnings allowed)
      1 - Validation failures found
      2 - Critical error
    """
    console = Console(highlight=False, soft_wrap=True)
    configure_logger(
        logging.INFO if verbose else logging.WARNING,
        handler=RichHandler(console=console, show_time=False, show_path=False),
    )

    config = Config.from_env(verbose=verbose, fix_mode=fix)
    reporter = ConsoleReporter(console)
    reporter.header()

    try:
        exit_code = Validator(config).validate(reporter)
    except DotlintError as e:
        reporter.fatal(e)
        sys.exit(EXIT_FATAL)

    sys.exit(exit_code)


def main() -> None:
    cli()
