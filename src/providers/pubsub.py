"""
Cloud Pub/Sub topic and scheduled triggers.
"""

import logging
from typing import Any, Callable, Dict, Optional

from cloud_functions import CloudFunction, TriggerBuilder, make_cloud_function
from environment import resolve_project_id
from errors import InvalidConfigError
from models import DeploymentOptions

logger = logging.getLogger(__name__)

PUBLISH_EVENT = "google.pubsub.topic.publish"
SERVICE = "pubsub.googleapis.com"
SCHEDULED_LABEL = "deployment-scheduled"


class TopicBuilder(TriggerBuilder):
    """Builder for functions triggered by messages published to a topic."""

    service = SERVICE

    def on_publish(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, PUBLISH_EVENT)


class ScheduleBuilder:
    """Builder for functions run on a Cloud Scheduler schedule."""

    def __init__(self, schedule: str, options: DeploymentOptions):
        self.schedule = schedule
        self.options = options
        self._time_zone: Optional[str] = None
        self._retry_config: Optional[Dict[str, Any]] = None

    def time_zone(self, time_zone: str) -> "ScheduleBuilder":
        self._time_zone = time_zone
        return self

    def retry_config(self, config: Dict[str, Any]) -> "ScheduleBuilder":
        self._retry_config = dict(config)
        return self

    def on_run(self, handler: Callable[..., Any]) -> CloudFunction:
        schedule: Dict[str, Any] = {"schedule": self.schedule}
        if self._time_zone:
            schedule["timeZone"] = self._time_zone
        if self._retry_config:
            schedule["retryConfig"] = self._retry_config

        logger.debug(f"Scheduling function with {schedule}")
        return make_cloud_function(
            handler,
            PUBLISH_EVENT,
            f"projects/{resolve_project_id()}/topics",
            SERVICE,
            self.options,
            labels={SCHEDULED_LABEL: "true"},
            schedule=schedule,
        )


def topic_with_options(topic: str, options: DeploymentOptions) -> TopicBuilder:
    """
    Select the Pub/Sub topic to listen to.

    Raises:
        InvalidConfigError: If the topic name contains a slash
    """
    if "/" in topic:
        raise InvalidConfigError.single("topic", "may not contain a /", topic)
    return TopicBuilder(lambda: f"projects/{resolve_project_id()}/topics/{topic}", options)


def schedule_with_options(schedule: str, options: DeploymentOptions) -> ScheduleBuilder:
    return ScheduleBuilder(schedule, options)
