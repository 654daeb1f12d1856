"""
Firebase Authentication user triggers.
"""

from typing import Any, Callable

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions


class UserBuilder(TriggerBuilder):
    """Builder for functions triggered by user account lifecycle events."""

    event_prefix = "providers/firebase.auth/eventTypes/"
    service = "firebaseauth.googleapis.com"

    def on_create(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "user.create")

    def on_delete(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "user.delete")


def user_with_options(options: DeploymentOptions) -> UserBuilder:
    return UserBuilder(lambda: f"projects/{resolve_project_id()}", options)
