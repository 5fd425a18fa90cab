# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

GQLPROJECTION_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "brand": "bold magenta",
    "dim": "dim",
})

console = Console(theme=GQLPROJECTION_THEME)


def print_projection_table(projection: dict[str, int], title: str) -> None:
    """Print a projection as a two-column Rich table."""
    table = Table(title=f"[brand]{title}[/brand]", border_style="dim")
    table.add_column("Path", style="info")
    table.add_column("Include", justify="right")

    for path, marker in projection.items():
        table.add_row(path, str(marker))

    console.print(table)
