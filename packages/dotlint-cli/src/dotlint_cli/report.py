from rich.console import Console
from rich.markup import escape

from dotlint_core.models.issues import RunSummary, ValidationResult

SUCCESS = "✓"
FAILURE = "✗"
WARNING = "⚠"
INFO = "ℹ"


class ConsoleReporter:
    """Renders results and the run summary to a rich console."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console(highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self.console.print(f"[green]{SUCCESS} {escape(message)}[/green]")

    def failure(self, message: str) -> None:
        self.console.print(f"[red]{FAILURE} {escape(message)}[/red]")

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]{WARNING} {escape(message)}[/yellow]")

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{INFO} {escape(message)}[/cyan]")

    def header(self) -> None:
        self.console.print("\n[bold]Validating dotfiles repository...[/bold]\n")

    def print_result(self, result: ValidationResult) -> None:
        if result.passed:
            self.success(result.rule_name)
        else:
            self.failure(result.rule_name)

        for issue in result.issues:
            file_str = f" ({issue.file})" if issue.file else ""
            message = f"  {issue.message}{file_str}"
            if issue.is_error:
                self.failure(message)
            else:
                self.warning(message)

            if issue.fix_suggestion:
                self.info(f"    {issue.fix_suggestion}")

    def print_summary(self, summary: RunSummary, fix_mode: bool) -> None:
        self.console.print(f"\n[bold]{'=' * 60}[/bold]")

        if summary.failed:
            self.failure(
                f"Validation failed: {summary.total_issues} issue(s) found "
                f"({summary.errors} errors, {summary.warnings} warnings)"
            )
            if fix_mode:
                self._print_fixes(summary)
        elif summary.warnings:
            self.warning(f"Validation completed with {summary.warnings} warning(s)")
        else:
            self.success("All validations passed!\n")

    def _print_fixes(self, summary: RunSummary) -> None:
        self.console.print("\n[bold]Fix suggestions:[/bold]\n")

        if summary.ignored_files:
            self.info("Add these lines to .gitignore:")
            for file in summary.ignored_files:
                self.success(f"  !{file}")
            self.console.print()

        if summary.untracked_files:
            self.info("Run this command to track files:")
            self.success(f"  git add {' '.join(summary.untracked_files)}")
            self.console.print()

    def fatal(self, error: Exception) -> None:
        self.console.print(f"[red]Error during validation: {escape(str(error))}[/red]")
