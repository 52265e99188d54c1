"""Render observability: configuration, events and default observer."""

from sqlchain.observability._config import ObservabilityConfig
from sqlchain.observability._observer import (
    RenderEvent,
    RenderObserver,
    create_event,
    default_render_observer,
    format_render_event,
)

__all__ = (
    "ObservabilityConfig",
    "RenderEvent",
    "RenderObserver",
    "create_event",
    "default_render_observer",
    "format_render_event",
)
