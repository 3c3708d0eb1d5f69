"""Console rendering of the stop graph.

Every function here only reads from the graph through its public API and
returns text; printing is left to the caller.
"""

from __future__ import annotations

from typing import List, Tuple

from .graph import StopGraph

RULE = " ************************************************************ "

MENU_OPTIONS: Tuple[str, ...] = (
    "Display Bus Stops",
    "Display Bus Stop Map",
    "Add Bus Stop",
    "Remove Bus Stop",
    "Add Bus Route",
    "Remove Bus Route",
    "Check if Path Exists between Bus Stops",
    "Find Minimum Distance between Bus Stops",
    "Exit",
)


def format_stop_map(graph: StopGraph, unit: str = "KM") -> str:
    """Adjacency dump: each stop followed by its neighbors and distances."""
    lines: List[str] = ["\t Bus Stop Map ", "\t -------------- "]
    for stop in graph.list_stops():
        lines.append(f"{stop} => ")
        for neighbor, distance in sorted(graph.neighbors(stop).items()):
            lines.append(f"\t{neighbor}\t{distance} {unit}")
    lines.append("\t -------------- ")
    return "\n".join(lines) + "\n"


def format_stop_list(graph: StopGraph) -> str:
    """Numbered listing of stop names."""
    lines = ["", RULE, "", " List of Bus Stops: "]
    lines.extend(f"{i}. {stop}" for i, stop in enumerate(graph.list_stops(), start=1))
    lines.extend(["", RULE])
    return "\n".join(lines) + "\n"


def format_options() -> str:
    """The numbered main menu."""
    lines = [
        "",
        " ********************** Bus System App ************************* ",
        "",
        " List of Available Options: ",
    ]
    lines.extend(f" {i}. {label}" for i, label in enumerate(MENU_OPTIONS, start=1))
    lines.extend(["", " **************************************************************** "])
    return "\n".join(lines) + "\n"
