# -*- coding: utf-8 -*-
"""Launch the landmark routing web form."""

from landmark_router.container import get_container
from landmark_router.gui import build_app
from landmark_router.monitoring import configure_logging
from landmark_router.services import RoutingService

configure_logging()
SERVICE: RoutingService = get_container().resolve(RoutingService)

app = build_app(SERVICE)

if __name__ == "__main__":
    app.launch()
