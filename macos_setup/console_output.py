# Fedora-macOS-Setup/macos_setup/console_output.py

from typing import Any, Optional

from rich.console import Console
from rich.padding import Padding
from rich.panel import Panel
from rich.rule import Rule

# highlight=False: styling comes only from explicit markup
console = Console(highlight=False)

# --- Output Functions ---

def print_info(message: Any, icon: bool = True):
    """Prints an informational message using Rich markup."""
    prefix = "[bold blue]ℹ️ INFO:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_warning(message: Any, icon: bool = True):
    """Prints a warning message using Rich markup."""
    prefix = "[bold yellow]⚠️ WARNING:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_error(message: Any, icon: bool = True):
    """Prints an error message using Rich markup."""
    prefix = "[bold red]❌ ERROR:[/] " if icon else ""
    console.print(f"{prefix}[bold red]{message}[/]")

def print_success(message: Any, icon: bool = True):
    """Prints a success message using Rich markup."""
    prefix = "[bold green]✅ SUCCESS:[/] " if icon else ""
    console.print(f"{prefix}{message}")

def print_step(title: str, char: str = "="):
    """
    Prints a phase header, styled as a Rich Rule.
    Example: print_step("Phase 1: System Update & Prerequisites")
    """
    console.print()
    console.print(Rule(f"[bold magenta]{title}[/]", style="magenta", characters=char))

def print_sub_step(message: str, indent: int = 2):
    """
    Prints a step announcement, slightly indented, with a leading marker.
    Example: print_sub_step("Updating all system packages...")
    """
    console.print(Padding(f"[bright_blue]▶[/] {message}", (0, 0, 0, indent)))

def print_skipped(message: str, indent: int = 2):
    """Prints a step that was not run because its condition did not hold."""
    console.print(Padding(f"[dim]⏭ {message} (skipped)[/]", (0, 0, 0, indent)))

def print_panel(
    content: Any,
    title: Optional[str] = None,
    style: str = "blue",
    padding: tuple = (1, 2)
):
    """
    Prints content within a Rich Panel.
    Content can be simple text or other Rich renderables.
    """
    console.print(
        Panel(
            content,
            title=f"[bold]{title}[/]" if title else None,
            border_style=style,
            padding=padding,
            expand=False
        )
    )

def print_rule(style: str = "dim white", char: str = "-"):
    """Prints a plain horizontal rule."""
    console.print(Rule(style=style, characters=char))
