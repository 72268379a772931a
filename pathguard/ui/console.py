"""Console output with Rich integration.

This module provides a ConsoleManager that adapts CLI output to:
- Rich-rendered tables when writing to a terminal
- JSON lines for machine-readable output (CI/CD)
"""

from __future__ import annotations

import json
import re
import sys
import threading
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")

STATUS_STYLES = {
    "ok": "green",
    "unsafe": "red",
    "error": "red",
}


def display_path(value: str) -> str:
    """Render a path for terminal output with control characters made visible."""
    shown = _CONTROL_RE.sub(lambda m: f"\\x{ord(m.group()):02x}", value)
    return escape(shown)


class ConsoleManager:
    """Manages CLI output as Rich tables or JSON lines."""

    def __init__(
        self,
        verbose: bool = False,
        json_output: bool = False,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.verbose = verbose
        self.json_output = json_output
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._lock = threading.RLock()

        if self.json_output:
            self.console = None
            self.err_console = None
        else:
            self.console = Console(file=self._stdout, highlight=False)
            self.err_console = Console(file=self._stderr, highlight=False)

    def print_results(self, title: str, rows: Iterable[Dict[str, Any]]) -> None:
        """Print one row per checked path.

        Each row carries ``input``, ``status`` and either ``result`` or
        ``code``/``message`` keys.
        """
        rows = list(rows)
        with self._lock:
            if self.json_output:
                for row in rows:
                    print(json.dumps({"type": title, **row}), file=self._stdout)
                return

            table = Table(title=title)
            table.add_column("Input", style="cyan")
            table.add_column("Status", style="bold")
            table.add_column("Result")

            for row in rows:
                status = row.get("status", "unknown")
                style = STATUS_STYLES.get(status, "white")
                if "result" in row:
                    detail = display_path(str(row["result"]))
                else:
                    detail = escape(str(row.get("message", "")))
                table.add_row(
                    display_path(str(row.get("input", ""))),
                    f"[{style}]{status}[/{style}]",
                    detail,
                )
            self.console.print(table)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        with self._lock:
            if self.json_output:
                print(
                    json.dumps(
                        {"timestamp": self._get_timestamp(), "type": "error", "message": message}
                    ),
                    file=self._stderr,
                )
            else:
                self.err_console.print(f"[red]ERROR: {escape(message)}[/red]")

    def _get_timestamp(self) -> str:
        """Get ISO timestamp for JSON output."""
        return datetime.now().isoformat()
