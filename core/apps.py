"""App configuration for the core Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app, which serves the enumeration API."""

    name = "core"
    verbose_name = "Waterfall format pane API"
