"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for badge layout, rendering and configuration logs.

Event Naming Convention:
    <component>.<category>.<action>

    component: badge, config, render
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - badge.*: Layout and shape drawing
    - config.*: Configuration loading
    - render.*: Image rendering (CLI)
    """

    # ========== Badge Events ==========
    BADGE_DRAWN = "badge.drawn"
    """Badge (and optional border) painted onto a surface."""

    BADGE_BORDER_CLAMPED = "badge.border.clamped"
    """Negative border size treated as no border."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Badge configuration loaded and validated."""

    CONFIG_INVALID = "config.invalid"
    """Badge configuration failed validation."""

    # ========== Render Events ==========
    RENDER_SAVED = "render.saved"
    """Rendered image written to disk."""

    RENDER_FAILED = "render.failed"
    """Image could not be read or written."""
