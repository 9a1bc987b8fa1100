from typing import List, Optional
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models.service_info import RunConfig, ResolvedPaths


def make_console(config: RunConfig, stderr: bool = False) -> Console:
    """
    Console honoring --no-color.

    Whether color is emitted otherwise is left to rich's terminal detection.
    """
    if config.no_color:
        return Console(stderr=stderr, no_color=True, highlight=False)
    return Console(stderr=stderr)


class Reporter:
    """
    All user facing output of the tool.

    Status lines go to stdout and are silenced by --quiet, dry-run lines are
    always shown, warnings and errors go to stderr.
    """

    def __init__(self, config: RunConfig, console: Optional[Console] = None,
                 err_console: Optional[Console] = None):
        self.config = config
        self.console = console or make_console(config)
        self.err_console = err_console or make_console(config, stderr=True)

    def status(self, message: str):
        if self.config.quiet:
            return
        self.console.print(f"[green]{escape(message)}[/green]", soft_wrap=True)

    def plan(self, message: str):
        self.console.print(f"[cyan]dry-run:[/cyan] {escape(message)}", soft_wrap=True)

    def debug(self, level: int, message: str):
        if self.config.verbose_level >= level:
            self.console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)

    def warn(self, message: str):
        self.err_console.print(f"[yellow]warning:[/yellow] {escape(message)}", soft_wrap=True)

    def error(self, message: str):
        self.err_console.print(f"[bold red]error:[/bold red] {escape(message)}", soft_wrap=True)

    def summary(self, resolved: ResolvedPaths, actions: List[str]):
        """Table of the resolved settings, shown with --verbose."""
        if self.config.verbose_level < 1:
            return
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Setting", style="dim")
        table.add_column("Value")
        table.add_row("init system", resolved.init_system)
        table.add_row("binary directory", resolved.bindir)
        table.add_row("service file", resolved.profile.service_file_path)
        table.add_row("file mode", oct(resolved.profile.file_mode))
        table.add_row("actions", ", ".join(actions))
        self.console.print(table)
