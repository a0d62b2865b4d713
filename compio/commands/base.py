"""
Base classes for Rich-enhanced Click commands and groups.

This module defines:
- `RichGroup`: A custom Click group with Rich-enhanced help rendering.
- `RichCommand`: A custom Click command with Rich-enhanced help rendering.
- `rich_help`: Builder for the marked-up help text used by commands.
- `error_report`: Uniform rendering of failures on stderr.
"""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
import click
from compio.lib.log import LOG

console: Console = Console()
err_console: Console = Console(stderr=True)


def rich_help(command: str, description: str, usage: str, args: dict) -> str:
    """
    Generate Rich-enhanced help text for commands.

    :param command: The command name.
    :param description: Description of the command.
    :param usage: Usage syntax for the command.
    :param args: Dictionary of arguments and their descriptions.
    :return: Formatted Rich help string.
    """
    help_text = f"[bold green]{command}[/bold green]: [bold cyan]{description}[/bold cyan]\n\n"
    help_text += f"[bold yellow]Usage:[/bold yellow]\n    [green]{usage}[/green]\n\n"
    help_text += "[bold yellow]Arguments:[/bold yellow]\n"
    for arg, desc in args.items():
        help_text += f"    [green]{arg}[/green]: {desc}\n"
    return help_text


def error_report(message: str) -> None:
    """
    Log a failure and show it on stderr.

    :param message: Plain text description of the failure.
    """
    LOG(message)
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}", soft_wrap=True)


def _options_print(params: list[click.Parameter]) -> None:
    options = [param for param in params if isinstance(param, click.Option)]
    if options:
        console.print("[bold yellow]Options:[/bold yellow]")
        for param in options:
            console.print(
                f"- [cyan]{', '.join(param.opts + param.secondary_opts)}[/cyan]: "
                f"{param.help or 'No description'}"
            )


class RichGroup(click.Group):
    """
    A Click Group that uses Rich for rendering help messages.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the group using Rich.

        :param ctx: The Click context for the command group.
        :param formatter: The Click help formatter.
        """
        info_name: str = ctx.info_name or ""
        console.print(
            f"[bold yellow]Usage:[/bold yellow] [cyan]{info_name}[/cyan] "
            f"[magenta][OPTIONS] COMMAND [ARGS]...[/magenta]\n"
        )

        if self.help:
            console.print(f"[bold cyan]{self.help.strip()}[/bold cyan]\n")

        if self.commands:
            console.print("[bold green]Available Commands:[/bold green]")
            for name, command in self.commands.items():
                console.print(
                    f"- [cyan]{name}[/cyan]: "
                    f"[white]{command.short_help or 'No description available.'}[/white]"
                )
            console.print()

        _options_print(self.get_params(ctx))


class RichCommand(click.Command):
    """
    A Click Command that uses Rich for rendering help messages.
    """

    def format_help(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """
        Render the help message for the command using Rich.

        :param ctx: The Click context for the command.
        :param formatter: The Click help formatter.
        """
        help_text = self.help or "No help text available."
        panel_width = max(len(line) for line in help_text.splitlines()) + 10
        panel_width = min(panel_width, 80)  # Cap the width to avoid excessive size
        console.print(Panel(help_text, expand=False, width=panel_width, border_style="cyan"))
        _options_print(self.get_params(ctx))
