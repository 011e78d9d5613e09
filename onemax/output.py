"""Writers for per-evaluation records and gnuplot scripts."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike
from pathlib import Path


def format_number(value: float) -> str:
    """Format a number the way a default-configured C++ stream would."""
    if isinstance(value, int):
        return str(value)
    return f"{value:g}"


def write_record(path: str | PathLike[str], values: Iterable[float]) -> None:
    """Write ``values`` as lines of ``<1-based index> <value>``."""
    with Path(path).open("w", encoding="utf-8") as record:
        for index, value in enumerate(values, start=1):
            record.write(f"{index} {format_number(value)}\n")


def write_plot(
    path: str | PathLike[str],
    image: str,
    title: str,
    xlabel: str,
    ylabel: str,
    xmax: int,
    ymax: int,
    data_file: str,
    legend: str,
) -> None:
    """Write a gnuplot script that plots ``data_file`` into ``image``."""
    lines = [
        "set terminal png size 800, 600",
        f"set output '{image}'",
        f"set title '{title}'",
        f"set xlabel '{xlabel}'",
        f"set ylabel '{ylabel}'",
        f"set xrange [0:{xmax}]",
        f"set yrange [0:{ymax}]",
        f"plot '{data_file}' using 1:2 with lines title '{legend}'",
    ]
    Path(path).write_text("".join(line + "\n" for line in lines), encoding="utf-8")