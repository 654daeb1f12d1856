"""
Deployable function descriptors produced by the trigger-family providers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Union

from config import MEMORY_LOOKUP
from models import DeploymentOptions

logger = logging.getLogger(__name__)


@dataclass
class CloudFunction:
    """A handler together with the trigger it is deployed with."""

    handler: Callable[..., Any]
    trigger: Dict[str, Any]
    options: DeploymentOptions = field(default_factory=DeploymentOptions)

    def __call__(self, *args, **kwargs):
        return self.handler(*args, **kwargs)

    @property
    def event_type(self) -> Optional[str]:
        return self.trigger.get("eventTrigger", {}).get("eventType")

    @property
    def resource(self) -> Optional[str]:
        return self.trigger.get("eventTrigger", {}).get("resource")


def options_to_trigger(
    options: DeploymentOptions, schedule: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """
    Convert deployment options into the trigger annotation read by deploy tooling.

    Args:
        options: Validated deployment options
        schedule: Optional schedule annotation for scheduled functions

    Returns:
        Dictionary with regions, availableMemoryMb, timeout, failurePolicy
        and schedule keys for the options that are set
    """
    trigger: Dict[str, Any] = {}
    if options.regions:
        trigger["regions"] = list(options.regions)
    if options.failure_policy is not None and options.failure_policy.retries:
        trigger["failurePolicy"] = {"retry": dict(options.failure_policy.retry)}
    # 0 leaves the platform default in place
    if options.timeout_seconds:
        trigger["timeout"] = f"{options.timeout_seconds}s"
    if options.memory:
        trigger["availableMemoryMb"] = MEMORY_LOOKUP[options.memory]
    if schedule:
        trigger["schedule"] = dict(schedule)
    return trigger


def make_cloud_function(
    handler: Callable[..., Any],
    event_type: str,
    resource: str,
    service: str,
    options: DeploymentOptions,
    labels: Optional[Dict[str, str]] = None,
    schedule: Optional[Dict[str, Any]] = None,
) -> CloudFunction:
    """Build an event-triggered CloudFunction descriptor."""
    trigger = options_to_trigger(options, schedule)
    trigger["eventTrigger"] = {
        "eventType": event_type,
        "resource": resource,
        "service": service,
    }
    if labels:
        trigger["labels"] = dict(labels)

    logger.debug(f"Built {event_type} function for {resource}")
    return CloudFunction(handler=handler, trigger=trigger, options=options)


def make_https_function(
    handler: Callable[..., Any],
    options: DeploymentOptions,
    labels: Optional[Dict[str, str]] = None,
) -> CloudFunction:
    """Build an HTTPS-triggered CloudFunction descriptor."""
    trigger = options_to_trigger(options)
    # retries never apply to synchronous requests
    trigger.pop("failurePolicy", None)
    trigger["httpsTrigger"] = {}
    if labels:
        trigger["labels"] = dict(labels)
    return CloudFunction(handler=handler, trigger=trigger, options=options)


class TriggerBuilder:
    """Base for provider builders bound to one trigger resource.

    The resource may be given as a callable; it is then resolved when a
    handler is attached, so selecting a trigger never needs a project id.
    """

    event_prefix = ""
    service = ""

    def __init__(
        self, resource: Union[str, Callable[[], str]], options: DeploymentOptions
    ):
        self._resource = resource
        self.options = options

    @property
    def resource(self) -> str:
        if callable(self._resource):
            return self._resource()
        return self._resource

    def _on_event(self, handler: Callable[..., Any], event: str) -> CloudFunction:
        return make_cloud_function(
            handler,
            self.event_prefix + event,
            self.resource,
            self.service,
            self.options,
        )
