"""
Cloud Storage object triggers.
"""

from typing import Any, Callable, Optional

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from errors import InvalidConfigError
from models import DeploymentOptions


class ObjectBuilder(TriggerBuilder):
    """Builder for functions triggered by changes to objects in a bucket."""

    event_prefix = "google.storage.object."
    service = "storage.googleapis.com"

    def on_archive(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "archive")

    def on_delete(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "delete")

    def on_finalize(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "finalize")

    def on_metadata_update(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "metadataUpdate")


class BucketBuilder:
    """Builder bound to one storage bucket."""

    def __init__(self, bucket: Optional[str], options: DeploymentOptions):
        self.bucket = bucket
        self.options = options

    def object(self) -> ObjectBuilder:
        return ObjectBuilder(
            lambda: f"projects/_/buckets/{self.bucket or default_bucket()}",
            self.options,
        )


def default_bucket() -> str:
    return f"{resolve_project_id()}.appspot.com"


def bucket_with_options(
    options: DeploymentOptions, bucket: Optional[str] = None
) -> BucketBuilder:
    """
    Choose which bucket's events to handle; defaults to the project bucket,
    resolved when a handler is attached.

    Raises:
        InvalidConfigError: If the bucket name contains a slash
    """
    if bucket and "/" in bucket:
        raise InvalidConfigError.single(
            "bucket", "may not contain a / (pass the bucket name only)", bucket
        )
    return BucketBuilder(bucket or None, options)


def object_with_options(options: DeploymentOptions) -> ObjectBuilder:
    return bucket_with_options(options).object()
