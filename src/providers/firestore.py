"""
Cloud Firestore document triggers.
"""

from typing import Any, Callable, Optional

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions
from providers.database import normalize_path

DEFAULT_DATABASE = "(default)"


class DocumentBuilder(TriggerBuilder):
    """Builder for functions triggered by changes to a document."""

    event_prefix = "providers/cloud.firestore/eventTypes/"
    service = "firestore.googleapis.com"

    def on_write(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "document.write")

    def on_create(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "document.create")

    def on_update(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "document.update")

    def on_delete(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "document.delete")


class DatabaseBuilder:
    """Builder bound to a Firestore database and optional namespace."""

    def __init__(
        self,
        database: str,
        options: DeploymentOptions,
        namespace: Optional[str] = None,
    ):
        self.database = database
        self.options = options
        self._namespace = namespace

    def namespace(self, namespace: str) -> "DatabaseBuilder":
        return DatabaseBuilder(self.database, self.options, namespace)

    def document(self, path: str) -> DocumentBuilder:
        path = normalize_path(path)
        return DocumentBuilder(lambda: f"{self._root()}/{path}", self.options)

    def _root(self) -> str:
        root = f"projects/{resolve_project_id()}/databases/{self.database}/documents"
        if self._namespace:
            root = f"{root}@{self._namespace}"
        return root


def database_with_options(database: str, options: DeploymentOptions) -> DatabaseBuilder:
    return DatabaseBuilder(database, options)


def namespace_with_options(namespace: str, options: DeploymentOptions) -> DatabaseBuilder:
    return DatabaseBuilder(DEFAULT_DATABASE, options, namespace)


def document_with_options(path: str, options: DeploymentOptions) -> DocumentBuilder:
    return DatabaseBuilder(DEFAULT_DATABASE, options).document(path)
