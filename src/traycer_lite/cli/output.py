"""
Rich Terminal Output for Traycer Lite CLI

Results go to stdout; warnings and errors go to stderr. Generated code, JSON
and help text are written straight to the console file so tabs and carriage
returns survive; Rich only styles the section headings.
"""

import json
from typing import Optional

from rich.console import Console

from ..core.models import PlanAndCode


class OutputManager:
    """
    Manages terminal output for the Traycer Lite CLI.

    Provides consistent styling for:
    - The planning layer and final code sections
    - Raw JSON output
    - Warnings, errors and status lines
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        err_console: Optional[Console] = None,
    ):
        """
        Initialize the output manager.

        Args:
            console: Console for results (creates one if not provided)
            err_console: Console for warnings and errors
        """
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True)

    # ==================== Basic Output ====================

    def print(self, message: str = "", style: str | None = None) -> None:
        """Print a message with optional styling."""
        self.console.print(message, style=style)

    def print_raw(self, text: str) -> None:
        """Print text exactly as given, bypassing Rich rendering."""
        stream = self.console.file
        stream.write(text + "\n")
        stream.flush()

    def print_warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        self.err_console.print(message, style="yellow", markup=False, highlight=False, soft_wrap=True)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        self.err_console.print(message, style="red", markup=False, highlight=False, soft_wrap=True)

    # ==================== Results ====================

    def plan_and_code(self, result: PlanAndCode) -> None:
        """
        Render the planning layer followed by the final code.

        Args:
            result: Plan and code to display
        """
        self.console.print("[bold blue]Planning Layer[/bold blue]")
        for i, step in enumerate(result.plan, 1):
            self.print_raw(f"{i}. {step}")
        self.print()
        self.console.print("[bold blue]Final Code[/bold blue]")
        self.print_raw(result.code)

    def plan_and_code_json(self, result: PlanAndCode) -> None:
        """Render the result as indented JSON."""
        self.print_raw(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
