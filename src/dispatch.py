"""
Factory interfaces for the trigger families a FunctionBuilder dispatches to.

Each family is described by a Protocol; FunctionBuilder only talks to these
interfaces, so any object (a provider module, a test double) exposing the
right ``*_with_options`` callables can stand in for the bundled providers.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol

from models import DeploymentOptions


class HttpsFactory(Protocol):
    def on_request_with_options(self, handler: Callable, options: DeploymentOptions) -> Any: ...

    def on_call_with_options(self, handler: Callable, options: DeploymentOptions) -> Any: ...


class DatabaseFactory(Protocol):
    def instance_with_options(self, instance: str, options: DeploymentOptions) -> Any: ...

    def ref_with_options(self, path: str, options: DeploymentOptions) -> Any: ...


class FirestoreFactory(Protocol):
    def document_with_options(self, path: str, options: DeploymentOptions) -> Any: ...

    def namespace_with_options(self, namespace: str, options: DeploymentOptions) -> Any: ...

    def database_with_options(self, database: str, options: DeploymentOptions) -> Any: ...


class CrashlyticsFactory(Protocol):
    def issue_with_options(self, options: DeploymentOptions) -> Any: ...


class AnalyticsFactory(Protocol):
    def event_with_options(self, analytics_event_type: str, options: DeploymentOptions) -> Any: ...


class RemoteConfigFactory(Protocol):
    def on_update_with_options(self, handler: Callable, options: DeploymentOptions) -> Any: ...


class StorageFactory(Protocol):
    def bucket_with_options(self, options: DeploymentOptions, bucket: Optional[str] = None) -> Any: ...

    def object_with_options(self, options: DeploymentOptions) -> Any: ...


class PubsubFactory(Protocol):
    def topic_with_options(self, topic: str, options: DeploymentOptions) -> Any: ...

    def schedule_with_options(self, schedule: str, options: DeploymentOptions) -> Any: ...


class AuthFactory(Protocol):
    def user_with_options(self, options: DeploymentOptions) -> Any: ...


class TestLabFactory(Protocol):
    def test_matrix_with_options(self, options: DeploymentOptions) -> Any: ...


@dataclass(frozen=True)
class TriggerFactories:
    """One factory per trigger family."""

    https: HttpsFactory
    database: DatabaseFactory
    firestore: FirestoreFactory
    crashlytics: CrashlyticsFactory
    analytics: AnalyticsFactory
    remote_config: RemoteConfigFactory
    storage: StorageFactory
    pubsub: PubsubFactory
    auth: AuthFactory
    test_lab: TestLabFactory


def default_factories() -> TriggerFactories:
    """Return the bundled provider modules as a TriggerFactories set."""
    from providers import (
        analytics,
        auth,
        crashlytics,
        database,
        firestore,
        https,
        pubsub,
        remote_config,
        storage,
        testlab,
    )

    return TriggerFactories(
        https=https,
        database=database,
        firestore=firestore,
        crashlytics=crashlytics,
        analytics=analytics,
        remote_config=remote_config,
        storage=storage,
        pubsub=pubsub,
        auth=auth,
        test_lab=testlab,
    )
