"""
Remote Config template update triggers.
"""

from typing import Any, Callable

from cloud_functions import CloudFunction, make_cloud_function
from environment import resolve_project_id
from models import DeploymentOptions


def on_update_with_options(
    handler: Callable[..., Any], options: DeploymentOptions
) -> CloudFunction:
    """Handle all updates (including rollbacks) to the project's Remote Config."""
    return make_cloud_function(
        handler,
        "google.firebase.remoteconfig.update",
        f"projects/{resolve_project_id()}",
        "firebaseremoteconfig.googleapis.com",
        options,
    )
