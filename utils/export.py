# utils/export.py
# This file is part of Tabula - A Propositional Truth Table Engine
#
# Text and CSV serialization of truth tables

"""Serializers for finished truth tables.

Every format has the same shape: a header row made of the variable names
followed by the formula text as the user entered it, then one line per table
row in table order.

- Clipboard text: tab separated, cells ``T``/``F``
- CSV: comma separated, cells ``TRUE``/``FALSE``, newline after every row
"""

import csv
import io
from pathlib import Path
from typing import List, Union

from evaluation.truth_table import TruthTable
from utils.logger import get_logger


def _header(table: TruthTable) -> List[str]:
    return list(table.variables) + [table.formula]


def _cell(value: bool, true_text: str, false_text: str) -> str:
    return true_text if value else false_text


def to_clipboard_text(table: TruthTable) -> str:
    """Render a table as tab separated text with T/F cells."""
    lines = ["\t".join(_header(table))]
    for row in table.rows:
        cells = [_cell(value, "T", "F") for value in row.inputs]
        cells.append(_cell(row.output, "T", "F"))
        lines.append("\t".join(cells))
    return "\n".join(lines) + "\n"


def _write_csv_rows(table: TruthTable, stream) -> None:
    writer = csv.writer(stream, lineterminator="\n")
    writer.writerow(_header(table))
    for row in table.rows:
        cells = [_cell(value, "TRUE", "FALSE") for value in row.inputs]
        cells.append(_cell(row.output, "TRUE", "FALSE"))
        writer.writerow(cells)


def to_csv(table: TruthTable) -> str:
    """Render a table as CSV text with TRUE/FALSE cells."""
    buffer = io.StringIO()
    _write_csv_rows(table, buffer)
    return buffer.getvalue()


def write_csv(table: TruthTable, filepath: Union[str, Path]) -> Path:
    """Write the CSV rendering of a table to a UTF-8 file.

    Args:
        table: Table to export
        filepath: Destination path (parent directory must exist)

    Returns:
        Path that was written
    """
    path = Path(filepath)
    with open(path, "w", newline="", encoding="utf-8") as file:
        _write_csv_rows(table, file)

    get_logger().debug(f"Wrote {len(table)} rows to {path}")
    return path


def format_table(table: TruthTable) -> str:
    """Render a table as an aligned text grid for terminal display."""
    header = _header(table)
    widths = [max(len(name), 1) for name in header]

    def render(cells: List[str]) -> str:
        return " | ".join(cell.center(width) for cell, width in zip(cells, widths))

    lines = [render(header), "-+-".join("-" * width for width in widths)]
    for row in table.rows:
        cells = [_cell(value, "T", "F") for value in row.inputs]
        cells.append(_cell(row.output, "T", "F"))
        lines.append(render(cells))
    return "\n".join(line.rstrip() for line in lines) + "\n"
