"""
Infrastructure Layer

Wiring shared by every app: the service container that views use to obtain
their services.
"""

from .container import ServiceContainer, container

__all__ = ["ServiceContainer", "container"]
