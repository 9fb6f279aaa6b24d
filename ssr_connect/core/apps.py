"""Core app configuration."""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the core app."""

    name = "ssr_connect.core"
    verbose_name = "Core"
