"""
Realtime Database triggers.
"""

from typing import Any, Callable, Optional

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions


def normalize_path(path: str) -> str:
    """Strip empty segments and surrounding slashes from a database path."""
    return "/".join(segment for segment in path.split("/") if segment)


def default_instance() -> str:
    return f"{resolve_project_id()}-default-rtdb"


class RefBuilder(TriggerBuilder):
    """Builder for functions triggered by writes under a database reference."""

    event_prefix = "providers/google.firebase.database/eventTypes/"
    service = "firebaseio.com"

    def on_write(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "ref.write")

    def on_create(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "ref.create")

    def on_update(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "ref.update")

    def on_delete(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "ref.delete")


class InstanceBuilder:
    """Builder bound to one Realtime Database instance."""

    def __init__(self, instance: Optional[str], options: DeploymentOptions):
        self.instance = instance
        self.options = options

    def ref(self, path: str) -> RefBuilder:
        path = normalize_path(path)
        return RefBuilder(
            lambda: f"projects/_/instances/{self.instance or default_instance()}/refs/{path}",
            self.options,
        )


def instance_with_options(instance: str, options: DeploymentOptions) -> InstanceBuilder:
    return InstanceBuilder(instance, options)


def ref_with_options(path: str, options: DeploymentOptions) -> RefBuilder:
    return InstanceBuilder(None, options).ref(path)
