# webstrap/utils/console.py

from rich.console import Console
from rich.markup import escape


def make_console(**kwargs) -> Console:
    """
    soft_wrap keeps each message on one line, so every line carries its tag
    even when rich cannot see a terminal width.
    """
    return Console(highlight=False, soft_wrap=True, **kwargs)


console = make_console()
err_console = make_console(stderr=True)


def info(message: str):
    console.print(f"[cyan]I:[/cyan] {escape(message)}")


def warn(message: str):
    console.print(f"[yellow]W:[/yellow] {escape(message)}")


def error(message: str):
    err_console.print(f"[bold red]E:[/bold red] {escape(message)}")
