"""Gradio web form for landmark routing.

Two searchable dropdowns pick the current location and the destination;
the optimal route is shown as text and every alternative route goes in
a table ranked by distance.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

import gradio as gr

from .domain.models import Route
from .services import RoutingService

TABLE_HEADERS: List[str] = ["Alternate Routes", "Distance", "Approximate Time"]

Row = List[str]


def table_row(route: Route) -> Row:
    return [
        route.as_text(" ➔ "),
        f"{route.distance_m:.2f}m",
        f"{route.time_min:.2f} min(s)",
    ]


def search_routes(
    service: RoutingService, source: Optional[str], destination: Optional[str]
) -> Tuple[str, List[Row]]:
    """Handler behind the "Find routes" button.

    Returns:
        The optimal-route text and the rows of the alternatives table.
        Errors come back as a message with an empty table.
    """
    if not source or not destination:
        return "❌ Please select both your current location and a destination", []
    if source.strip().casefold() == destination.strip().casefold():
        return "❌ Destination and current location cannot be the same", []

    result, error = service.resolve_safe(source, destination)
    if error:
        return f"❌ {error}", []

    assert result is not None
    optimal = result.optimal
    text = (
        f"Optimal Route: {optimal.as_text(' ➔ ')}\n"
        f"Distance: {optimal.distance_m:.2f}m\n"
        f"Approximate Time: {optimal.time_min:.2f} min(s)"
    )
    return text, [table_row(route) for route in result.alternatives]


def build_app(service: RoutingService) -> gr.Blocks:
    """Build the Gradio Blocks UI around ``service``."""
    names = service.landmark_names(sort_by_length=False)

    with gr.Blocks(title="Landmark Router") as app:
        gr.Markdown(
            """
# 🧭 Landmark Router
Pick where you are and where you want to go. Start typing to filter landmarks.
"""
        )

        with gr.Row():
            source_dd = gr.Dropdown(
                names, value=None, label="📍 Current location", filterable=True
            )
            destination_dd = gr.Dropdown(
                names, value=None, label="🏁 Destination", filterable=True
            )

        btn = gr.Button("🚀 Find routes")
        optimal_box = gr.Textbox(label="Optimal route", lines=3)
        table = gr.Dataframe(headers=TABLE_HEADERS, interactive=False, wrap=True)

        btn.click(
            lambda source, destination: search_routes(service, source, destination),
            inputs=[source_dd, destination_dd],
            outputs=[optimal_box, table],
        )

    return app
