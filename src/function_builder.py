"""
Fluent builder that attaches deployment options to a trigger family.

Example:
    region("us-east1").run_with({"memory": "1GB"}).pubsub.topic("jobs")
"""

import logging
from typing import Any, Callable, Mapping, Optional

from dispatch import TriggerFactories, default_factories
from models import DeploymentOptions
from validators import validate_regions, validate_runtime_options

logger = logging.getLogger(__name__)


def region(*regions: str) -> "FunctionBuilder":
    """
    Configure the regions that the function is deployed to.

    Args:
        *regions: One or more region names, e.g. ``region("us-east1", "us-central1")``

    Returns:
        A new FunctionBuilder

    Raises:
        InvalidConfigError: If no region is given or any region is unsupported
    """
    validate_regions(list(regions))
    return FunctionBuilder(DeploymentOptions().with_regions(regions))


def run_with(runtime_options: Mapping[str, Any]) -> "FunctionBuilder":
    """
    Configure runtime options for the function.

    Args:
        runtime_options: Mapping with three optional fields:
            failure_policy: ``True``/``False`` or ``{"retry": {}}``; ``True``
                is equivalent to an empty retry object.
            memory: one of '128MB', '256MB', '512MB', '1GB', '2GB'.
            timeout_seconds: number between 0 and 540.

    Returns:
        A new FunctionBuilder

    Raises:
        InvalidConfigError: If any option is invalid
    """
    validate_runtime_options(runtime_options)
    return FunctionBuilder(DeploymentOptions().with_runtime_options(runtime_options))


class FunctionBuilder:
    """Holds the latest validated DeploymentOptions snapshot.

    Chained calls replace the snapshot with a new immutable value; trigger
    surfaces read whatever snapshot is current when one of their methods runs.
    A builder may keep being configured or dispatched after a first dispatch.
    """

    def __init__(
        self,
        options: Optional[DeploymentOptions] = None,
        factories: Optional[TriggerFactories] = None,
    ):
        self._options = options if options is not None else DeploymentOptions()
        self._factories = factories if factories is not None else default_factories()

    @property
    def options(self) -> DeploymentOptions:
        return self._options

    def region(self, *regions: str) -> "FunctionBuilder":
        """Configure the regions that the function is deployed to."""
        validate_regions(list(regions))
        self._options = self._options.with_regions(regions)
        logger.debug(f"Regions set to {list(regions)}")
        return self

    def run_with(self, runtime_options: Mapping[str, Any]) -> "FunctionBuilder":
        """Configure runtime options for the function; see ``run_with``."""
        validate_runtime_options(runtime_options)
        self._options = self._options.with_runtime_options(runtime_options)
        logger.debug(f"Runtime options updated with {dict(runtime_options)}")
        return self

    @property
    def https(self) -> "HttpsSurface":
        if self._options.failure_policy is not None:
            logger.warning(
                "RuntimeOptions.failure_policy is not supported in https functions."
            )
        return HttpsSurface(self)

    @property
    def database(self) -> "DatabaseSurface":
        return DatabaseSurface(self)

    @property
    def firestore(self) -> "FirestoreSurface":
        return FirestoreSurface(self)

    @property
    def crashlytics(self) -> "CrashlyticsSurface":
        return CrashlyticsSurface(self)

    @property
    def analytics(self) -> "AnalyticsSurface":
        return AnalyticsSurface(self)

    @property
    def remote_config(self) -> "RemoteConfigSurface":
        return RemoteConfigSurface(self)

    @property
    def storage(self) -> "StorageSurface":
        return StorageSurface(self)

    @property
    def pubsub(self) -> "PubsubSurface":
        return PubsubSurface(self)

    @property
    def auth(self) -> "AuthSurface":
        return AuthSurface(self)

    @property
    def test_lab(self) -> "TestLabSurface":
        return TestLabSurface(self)


class _Surface:
    """Read-only view of one trigger family on a builder."""

    family = ""

    def __init__(self, builder: FunctionBuilder):
        self._builder = builder

    @property
    def _options(self) -> DeploymentOptions:
        return self._builder.options

    @property
    def _factory(self) -> Any:
        return getattr(self._builder._factories, self.family)


class HttpsSurface(_Surface):
    family = "https"

    def on_request(self, handler: Callable) -> Any:
        """Handle HTTP requests with a function taking a flask Request."""
        return self._factory.on_request_with_options(handler, self._options)

    def on_call(self, handler: Callable) -> Any:
        """Declare a callable function taking ``(data, context)``."""
        return self._factory.on_call_with_options(handler, self._options)


class DatabaseSurface(_Surface):
    family = "database"

    def instance(self, instance: str) -> Any:
        """Select the Realtime Database instance that triggers the function."""
        return self._factory.instance_with_options(instance, self._options)

    def ref(self, path: str) -> Any:
        """
        Select the Realtime Database reference to listen to.

        Path components in curly brackets are wildcards, e.g.
        ``ref("messages/{message_id}")``.
        """
        return self._factory.ref_with_options(path, self._options)


class FirestoreSurface(_Surface):
    family = "firestore"

    def document(self, path: str) -> Any:
        """Select the document to listen to, e.g. ``document("users/{uid}")``."""
        return self._factory.document_with_options(path, self._options)

    def namespace(self, namespace: str) -> Any:
        return self._factory.namespace_with_options(namespace, self._options)

    def database(self, database: str) -> Any:
        return self._factory.database_with_options(database, self._options)


class CrashlyticsSurface(_Surface):
    family = "crashlytics"

    def issue(self) -> Any:
        """Handle events related to Crashlytics issues."""
        return self._factory.issue_with_options(self._options)


class AnalyticsSurface(_Surface):
    family = "analytics"

    def event(self, analytics_event_type: str) -> Any:
        return self._factory.event_with_options(analytics_event_type, self._options)


class RemoteConfigSurface(_Surface):
    family = "remote_config"

    def on_update(self, handler: Callable) -> Any:
        """Handle all updates (including rollbacks) to a Remote Config project."""
        return self._factory.on_update_with_options(handler, self._options)


class StorageSurface(_Surface):
    family = "storage"

    def bucket(self, bucket: Optional[str] = None) -> Any:
        """Choose which bucket's events to handle; defaults to the project bucket."""
        return self._factory.bucket_with_options(self._options, bucket)

    def object(self) -> Any:
        """Handle object events in the default bucket."""
        return self._factory.object_with_options(self._options)


class PubsubSurface(_Surface):
    family = "pubsub"

    def topic(self, topic: str) -> Any:
        """Select the Pub/Sub topic to listen to; it must be in the same project."""
        return self._factory.topic_with_options(topic, self._options)

    def schedule(self, schedule: str) -> Any:
        return self._factory.schedule_with_options(schedule, self._options)


class AuthSurface(_Surface):
    family = "auth"

    def user(self) -> Any:
        """Handle events related to Firebase Authentication users."""
        return self._factory.user_with_options(self._options)


class TestLabSurface(_Surface):
    family = "test_lab"

    def test_matrix(self) -> Any:
        """Handle events related to Test Lab test matrices."""
        return self._factory.test_matrix_with_options(self._options)
