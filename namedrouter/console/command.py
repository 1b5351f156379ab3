"""
Base Command Class
Laravel-style command base class for the namedrouter CLI
"""
import argparse
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence


class Command(ABC):

    # Command name (e.g., "route:list")
    name: str = ""

    # Command description
    description: str = ""

    def configure(self, parser: argparse.ArgumentParser):
        """Add command arguments to its sub-parser"""

    @abstractmethod
    async def handle(self, **kwargs) -> int:
        """
        Execute the command logic

        Returns:
            int: Exit code (0 for success, non-zero for error)
        """

    # Output helpers
    def info(self, message: str):
        """Print info message"""
        print(f"ℹ {message}")

    def success(self, message: str):
        """Print success message"""
        print(f"✅ {message}")

    def error(self, message: str):
        """Print error message"""
        print(f"❌ {message}")

    def warning(self, message: str):
        """Print warning message"""
        print(f"⚠ {message}")

    def line(self, message: str = ""):
        """Print plain line"""
        print(message)

    def table(self, headers: Sequence[str], rows: List[Sequence[str]], max_widths: Optional[Sequence[int]] = None):
        """
        Print a boxed table

        Args:
            headers: Column headers
            rows: Row cells, converted with str()
            max_widths: Per-column width limits; longer cells are truncated
        """
        rows = [[str(cell) for cell in row] for row in rows]
        widths = [len(h) for h in headers]
        for row in rows:
            for i, cell in enumerate(row):
                widths[i] = max(widths[i], len(cell))

        if max_widths:
            widths = [max(min(w, limit), len(h)) for w, limit, h in zip(widths, max_widths, headers)]

        separator = '+-' + '-+-'.join('-' * w for w in widths) + '-+'

        def render(cells: Sequence[str]) -> str:
            return '| ' + ' | '.join(
                self._truncate(cell, widths[i]).ljust(widths[i]) for i, cell in enumerate(cells)
            ) + ' |'

        self.line(separator)
        self.line(render(headers))
        self.line(separator)
        for row in rows:
            self.line(render(row))
        self.line(separator)

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text to max length with ellipsis"""
        if len(text) <= max_len:
            return text
        return text[:max_len - 3] + '...'
