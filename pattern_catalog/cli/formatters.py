"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML serialisation
- Rich tables for pattern listings, demonstrations and vehicles
- Plain list formatting for detailed views
"""

import json
from typing import Any, Dict, List

import yaml
from rich.console import Console
from rich.table import Table


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip("\n")
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def format_table_output(data: Any) -> str:
    """Format data as a table."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_table(data["patterns"])
    elif isinstance(data, dict) and "output" in data:
        return format_demonstration_table(data["pattern"], data["output"])
    elif isinstance(data, dict) and "pattern" in data and isinstance(data["pattern"], dict):
        return format_pattern_details_table(data["pattern"])
    elif isinstance(data, dict) and "vehicle" in data:
        return format_mapping_table(data["vehicle"])
    elif isinstance(data, dict) and "families" in data:
        return format_families_table(data["families"])
    else:
        # Fallback to JSON for unknown data structures
        return json.dumps(data, indent=2, default=str)


def format_list_output(data: Any) -> str:
    """Format data as a detailed list."""
    if isinstance(data, dict) and "patterns" in data:
        return format_patterns_list(data["patterns"])
    elif isinstance(data, dict) and "output" in data:
        return "\n".join(data["output"])
    elif isinstance(data, dict) and "pattern" in data and isinstance(data["pattern"], dict):
        return format_patterns_list([data["pattern"]])
    elif isinstance(data, dict) and "vehicle" in data:
        return data.get("description") or format_mapping_list(data["vehicle"])
    elif isinstance(data, dict) and "families" in data:
        return format_families_list(data["families"])
    else:
        return json.dumps(data, indent=2, default=str)


def _render(table: Table) -> str:
    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)
    return capture.get().rstrip("\n")


def format_patterns_table(patterns: List[Dict[str, Any]]) -> str:
    """Format pattern entries as a Rich table."""
    if not patterns:
        return "No patterns found."

    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Slug", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Category", style="blue")
    table.add_column("Summary")

    for pattern in patterns:
        table.add_row(
            str(pattern.get("slug", "N/A")),
            str(pattern.get("name", "N/A")),
            str(pattern.get("category", "N/A")),
            str(pattern.get("summary", "")),
        )
    return _render(table)


def format_demonstration_table(pattern: str, output: List[str]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("#", style="yellow", justify="right")
    table.add_column(f"{pattern} output", style="green")
    for index, line in enumerate(output, start=1):
        table.add_row(str(index), line)
    return _render(table)


def format_mapping_table(mapping: Dict[str, Any]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    for key, value in mapping.items():
        table.add_row(str(key), str(value))
    return _render(table)


def format_pattern_details_table(pattern: Dict[str, Any]) -> str:
    """Format one pattern entry, including pros and cons, as a Rich table."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for key, value in pattern.items():
        if isinstance(value, list):
            value = "\n".join(str(item) for item in value)
        table.add_row(str(key), str(value))
    return _render(table)


def format_families_table(families: Dict[str, List[str]]) -> str:
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Family", style="cyan")
    table.add_column("Kinds", style="green")
    for family, kinds in families.items():
        table.add_row(family, ", ".join(kinds))
    return _render(table)


def format_patterns_list(patterns: List[Dict[str, Any]]) -> str:
    """Format pattern entries as a detailed list."""
    if not patterns:
        return "No patterns found."

    lines: List[str] = []
    for i, pattern in enumerate(patterns):
        if i > 0:
            lines.append("")  # Blank line between patterns

        lines.append(f"{pattern.get('name', 'N/A')} ({pattern.get('slug', 'N/A')})")
        lines.append(f"  Category: {pattern.get('category', 'N/A')}")
        lines.append(f"  Summary: {pattern.get('summary', '')}")
        if pattern.get("pros"):
            lines.append("  Pros:")
            lines.extend(f"    + {item}" for item in pattern["pros"])
        if pattern.get("cons"):
            lines.append("  Cons:")
            lines.extend(f"    - {item}" for item in pattern["cons"])
    return "\n".join(lines)


def format_mapping_list(mapping: Dict[str, Any]) -> str:
    return "\n".join(f"{key}: {value}" for key, value in mapping.items())


def format_families_list(families: Dict[str, List[str]]) -> str:
    return "\n".join(f"{family}: {', '.join(kinds)}" for family, kinds in families.items())
