"""Interactive text menu for the bus network.

Reads whitespace-separated answers from a text stream, drives a single
StopGraph passed in by the caller and prints the results. Streams are
injectable so sessions can be scripted.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, TextIO

from .config import CLIConfig, get_config
from .container import Container
from .domain.errors import BusNetworkError
from .domain.models import UNREACHABLE
from .graph import StopGraph
from .logging_config import configure_logging
from .rendering import MENU_OPTIONS, format_options, format_stop_list, format_stop_map

EXIT_CHOICE = len(MENU_OPTIONS)


@dataclass
class Console:
    """Token-oriented reader/writer over a pair of text streams."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    _pending: List[str] = field(default_factory=list, repr=False)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def ask(self, prompt: str, count: int = 1) -> List[str]:
        """Prompt and return the next ``count`` tokens.

        Tokens left over on a line are kept for the next question.

        Raises:
            EOFError: If the input ends before enough tokens are read.
        """
        self.write(prompt)
        while len(self._pending) < count:
            line = self.stdin.readline()
            if not line:
                raise EOFError
            self._pending.extend(line.split())
        answer, self._pending = self._pending[:count], self._pending[count:]
        return answer


Action = Callable[[StopGraph, Console, CLIConfig], None]


def display_stops(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    console.write(format_stop_list(graph))


def display_map(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    console.write(format_stop_map(graph, unit=config.distance_unit))


def add_stop(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    (name,) = console.ask(" Enter the name of the new Bus Stop: ")
    if graph.add_stop(name):
        console.write(f" Bus Stop '{name}' added successfully.\n")
    else:
        console.write(f" Bus Stop '{name}' already exists.\n")


def remove_stop(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    (name,) = console.ask(" Enter the name of the Bus Stop to remove: ")
    if graph.remove_stop(name):
        console.write(f" Bus Stop '{name}' removed successfully.\n")
    else:
        console.write(f" Bus Stop '{name}' not found.\n")


def add_route(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    a, b = console.ask(" Enter the names of the Bus Stops to connect: ", count=2)
    (raw,) = console.ask(
        f" Enter the distance between {a} and {b} (in {config.distance_unit}): "
    )
    try:
        distance = int(raw)
    except ValueError:
        console.write(f" Invalid distance '{raw}'. Please enter a whole number.\n")
        return

    if not (graph.contains_stop(a) and graph.contains_stop(b)):
        console.write(" One or both Bus Stops not found.\n")
        return

    graph.add_route(a, b, distance)
    console.write(" Bus Route added successfully.\n")


def remove_route(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    a, b = console.ask(" Enter the names of the Bus Stops to disconnect: ", count=2)
    if graph.remove_route(a, b):
        console.write(" Bus Route removed successfully.\n")
    else:
        console.write(" Bus Route not found.\n")


def check_path(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    a, b = console.ask(
        " Enter the names of the Bus Stops to check for a path: ", count=2
    )
    if graph.has_path(a, b):
        console.write(f" Path exists between {a} and {b}.\n")
    else:
        console.write(f" No path found between {a} and {b}.\n")


def minimum_distance(graph: StopGraph, console: Console, config: CLIConfig) -> None:
    a, b = console.ask(
        " Enter the names of the Bus Stops to find the minimum distance: ", count=2
    )
    distance = graph.shortest_distance(a, b)
    if distance != UNREACHABLE:
        console.write(
            f" Minimum distance between {a} and {b} is "
            f"{distance} {config.distance_unit}.\n"
        )
    else:
        console.write(f" No path found between {a} and {b}.\n")


ACTIONS: Dict[int, Action] = {
    1: display_stops,
    2: display_map,
    3: add_stop,
    4: remove_stop,
    5: add_route,
    6: remove_route,
    7: check_path,
    8: minimum_distance,
}


@dataclass
class BusMenu:
    """Menu loop over one graph for the length of a session."""

    graph: StopGraph
    console: Console = field(default_factory=Console)
    config: CLIConfig = field(default_factory=lambda: get_config().cli)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def run(self) -> int:
        """Run until the exit option is chosen or input ends."""
        while True:
            self.console.write(format_options())
            try:
                (raw,) = self.console.ask(self.config.prompt)
            except EOFError:
                self.console.write("\n")
                return 0

            try:
                choice = int(raw)
            except ValueError:
                choice = -1

            if choice == EXIT_CHOICE:
                self.console.write(" Exiting Bus System App. Thank you!\n")
                return 0

            action = ACTIONS.get(choice)
            if action is None:
                self._logger.debug("Invalid menu choice", extra={"choice": raw})
                self.console.write(" Invalid choice. Please try again.\n")
                continue

            try:
                action(self.graph, self.console, self.config)
            except EOFError:
                self.console.write("\n")
                return 0
            except BusNetworkError as e:
                self.console.write(f" {e}\n")


def main() -> int:
    """Console entry point."""
    configure_logging()
    container = Container.create_default()
    graph = container.resolve(StopGraph)
    return BusMenu(graph=graph).run()


if __name__ == "__main__":
    sys.exit(main())
