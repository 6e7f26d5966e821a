"""
Site Index Method Comparison Example

Computes site index for a small set of plots with both supported
methods and prints them side by side.

Usage:
    python examples/site_index_comparison.py
"""

import pandas as pd
from rich.console import Console
from rich.table import Table

from pysiteindex import SpeciesCode, site_index_from_frame, setup_logging

console = Console()

PLOTS = pd.DataFrame(
    {
        "age": [25, 40, 65, 105, 30, 55, 120, 45, 80, 50],
        "top_height": [9.8, 17.5, 22.0, 27.1, 8.4, 13.9, 19.6, 14.2, 20.5, 16.0],
        "species": [1, 1, 1, 1, 2, 2, 2, 3, 3, 9],
    },
    index=[f"plot_{i:02d}" for i in range(1, 11)],
)


def species_label(code) -> str:
    if SpeciesCode.is_valid(code):
        return SpeciesCode.from_code(code).label
    return f"unknown ({code})"


def format_si(value) -> str:
    return "-" if pd.isna(value) else f"{value:.1f}"


def main():
    setup_logging("WARNING")

    console.print()
    console.rule("[bold blue]Site Index by Method[/bold blue]")
    console.print()

    results = PLOTS.assign(
        sharma_brunner=site_index_from_frame(PLOTS, method="SHARMA-BRUNNER"),
        tveite_braastad=site_index_from_frame(PLOTS, method="TVEITE-BRAASTAD"),
    )

    table = Table()
    table.add_column("Plot", style="bold")
    table.add_column("Species")
    table.add_column("Age", justify="right")
    table.add_column("Top height (m)", justify="right")
    table.add_column("SI Sharma-Brunner", justify="right")
    table.add_column("SI Tveite-Braastad", justify="right")

    for plot_id, row in results.iterrows():
        table.add_row(
            plot_id,
            species_label(row["species"]),
            f"{row['age']:.0f}",
            f"{row['top_height']:.1f}",
            format_si(row["sharma_brunner"]),
            format_si(row["tveite_braastad"]),
        )

    console.print(table)


if __name__ == "__main__":
    main()
