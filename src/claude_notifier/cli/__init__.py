"""CLI entry point for claude-notifier.

Uses Typer for command routing with lazy loading, so commands that never
show a menu don't import the terminal UI.
"""

import typer

__all__ = ["app", "cli_main"]

app = typer.Typer(
    name="claude-notifier",
    help="Desktop notifications for Claude Code",
    no_args_is_help=True,
)


# Config subcommand group
config_app = typer.Typer(help="Notification preferences")
app.add_typer(config_app, name="config")


@config_app.callback(invoke_without_command=True)
def config(ctx: typer.Context) -> None:
    """Open an interactive menu to configure preferences.

    Settings: icon color, notification sound (Space previews),
    notifications for headless claude -p sessions.
    """
    if ctx.invoked_subcommand is not None:
        return

    from claude_notifier.cli.commands import cmd_config
    from claude_notifier.utils.exceptions import TerminalError

    try:
        cmd_config(None)
    except TerminalError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


@config_app.command("show")
def config_show() -> None:
    """Show current settings."""
    from claude_notifier.cli.commands import cmd_config_show

    cmd_config_show(None)


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from claude_notifier.cli.commands import cmd_debug_on

    cmd_debug_on(None)


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from claude_notifier.cli.commands import cmd_debug_off

    cmd_debug_off(None)


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
