"""Terminal menu for landmark routing.

Lists every landmark (shortest name first), asks for the current
location and the destination by index, then prints the optimal route
and the first ranked alternatives.

Usage:
    python -m landmark_router.cli            # interactive menu
    python -m landmark_router.cli --graph    # print the adjacency list
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, List, Optional, Sequence, Tuple

from .container import get_container
from .domain.errors import GraphError
from .monitoring import configure_logging
from .services import RoutingService

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

HEADER = """
 _                    _                      _
| |    __ _ _ __   __| |_ __ ___   __ _ _ __| | __
| |   / _` | '_ \\ / _` | '_ ` _ \\ / _` | '__| |/ /
| |__| (_| | | | | (_| | | | | | | (_| | |  |   <
|_____\\__,_|_| |_|\\__,_|_| |_| |_|\\__,_|_|  |_|\\_\\
                 R O U T E R
"""


def read_index(
    prompt: str, count: int, input_fn: InputFn = input, output: OutputFn = print
) -> int:
    """Ask for a 1-based index until a valid one is entered.

    Returns:
        The zero-based index.
    """
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            output("Sorry, invalid input. Please try again.")
            continue
        if 1 <= value <= count:
            return value - 1
        output(f"Please enter a number between 1 and {count}")


def select_landmarks(
    names: Sequence[str], input_fn: InputFn = input, output: OutputFn = print
) -> Tuple[str, str]:
    """Print the numbered landmark list and ask for source and destination."""
    output("ALL LANDMARKS\n")
    for position, name in enumerate(names, start=1):
        output(f"{position:>4}. {name}")

    source_index = read_index(
        "\nPlease select your current location (by index): ",
        len(names),
        input_fn,
        output,
    )
    destination_index = read_index(
        "\nSelect your destination (by index): ", len(names), input_fn, output
    )
    while destination_index == source_index:
        destination_index = read_index(
            "\nDestination and current location cannot be the same. "
            "Please select another location (by index): ",
            len(names),
            input_fn,
            output,
        )

    source, destination = names[source_index], names[destination_index]
    output(f"Selected source: {source}, destination: {destination}\n")
    return source, destination


def run_cli(
    service: RoutingService,
    input_fn: InputFn = input,
    output: OutputFn = print,
    limit: Optional[int] = None,
) -> int:
    """Run one interactive query. Returns a process exit code."""
    output(HEADER)

    names = service.landmark_names(sort_by_length=True)
    if len(names) < 2:
        output("The landmark graph needs at least two landmarks.")
        return 1

    source, destination = select_landmarks(names, input_fn, output)
    result, error = service.resolve_safe(source, destination)
    if error:
        output(f"❌ {error}")
        return 1

    assert result is not None
    output(service.format_result(result, limit=limit))
    return 0


def print_graph(service: RoutingService, output: OutputFn = print) -> None:
    output("GRAPH: ADJACENCY LIST\n")
    for line in service.graph_repository.load().adjacency_lines():
        output(line)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    configure_logging()

    service: RoutingService = get_container().resolve(RoutingService)
    try:
        if "--graph" in args:
            print_graph(service)
            return 0
        return run_cli(service)
    except GraphError as e:
        logger.error("Could not load the landmark graph", extra={"error": str(e)})
        print(f"Error reading the landmark data: {e}")
        return 1
    except (KeyboardInterrupt, EOFError):
        print()
        return 130
    finally:
        service.shutdown(wait=False)


if __name__ == "__main__":
    sys.exit(main())
