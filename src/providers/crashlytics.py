"""
Crashlytics issue triggers.
"""

from typing import Any, Callable

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions


class IssueBuilder(TriggerBuilder):
    """Builder for functions triggered by Crashlytics issue events."""

    event_prefix = "providers/firebase.crashlytics/eventTypes/"
    service = "fabric.io"

    def on_new(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "issue.new")

    def on_regressed(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "issue.regressed")

    def on_velocity_alert(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "issue.velocityAlert")


def issue_with_options(options: DeploymentOptions) -> IssueBuilder:
    return IssueBuilder(lambda: f"projects/{resolve_project_id()}", options)
