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
"""'gqlprojection info': Display version and environment information."""

from __future__ import annotations

import platform
import sys
from importlib.metadata import PackageNotFoundError, version

import click
from rich.table import Table

from gqlprojection import __version__
from gqlprojection.cli.console import console

_LIBRARIES = [
    "graphql-core",
    "pydantic",
    "pyyaml",
    "structlog",
    "click",
    "rich",
]


def _installed_version(distribution: str) -> str | None:
    try:
        return version(distribution)
    except PackageNotFoundError:
        return None


@click.command()
def info_command() -> None:
    """Display gqlprojection and environment information."""
    console.print(f"\n[brand]gqlprojection[/brand] [dim]v{__version__}[/dim]\n")

    env_table = Table(title="Environment", show_header=False, border_style="dim")
    env_table.add_column("Key", style="info")
    env_table.add_column("Value")
    env_table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    env_table.add_row("Platform", platform.platform())
    console.print(env_table)

    libs_table = Table(title="\nLibraries", border_style="dim")
    libs_table.add_column("Library", style="info")
    libs_table.add_column("Version")

    for distribution in _LIBRARIES:
        installed = _installed_version(distribution)
        status = installed if installed is not None else "[dim]not installed[/dim]"
        libs_table.add_row(distribution, status)

    console.print(libs_table)
    console.print()
