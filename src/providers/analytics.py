"""
Google Analytics for Firebase event triggers.
"""

from typing import Any, Callable

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions


class AnalyticsEventBuilder(TriggerBuilder):
    event_prefix = "providers/google.firebase.analytics/eventTypes/"
    service = "app-measurement.com"

    def on_log(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "event.log")


def event_with_options(
    analytics_event_type: str, options: DeploymentOptions
) -> AnalyticsEventBuilder:
    return AnalyticsEventBuilder(
        lambda: f"projects/{resolve_project_id()}/events/{analytics_event_type}",
        options,
    )
