"""
Resolution of the GCP project that trigger resources belong to.
"""

import logging
import os
from typing import Optional

import google.auth
from google.auth.exceptions import DefaultCredentialsError

from config import PROJECT_ENV_VARS
from errors import ProjectNotFoundError

logger = logging.getLogger(__name__)


def resolve_project_id(project_id: Optional[str] = None) -> str:
    """
    Resolve the project id used in trigger resource names.

    Priority: explicit argument > environment variables > application
    default credentials.

    Args:
        project_id: Explicit project id, returned unchanged when given

    Returns:
        GCP project ID

    Raises:
        ProjectNotFoundError: If no project id can be determined
    """
    if project_id:
        return project_id

    for var in PROJECT_ENV_VARS:
        value = os.environ.get(var, "").strip()
        if value:
            return value

    try:
        _, default_project = google.auth.default(
            scopes=["https://www.googleapis.com/auth/cloud-platform"]
        )
    except DefaultCredentialsError as e:
        logger.debug(f"Application default credentials unavailable: {e}")
        default_project = None

    if not default_project:
        raise ProjectNotFoundError(
            "Unable to determine the GCP project; set GCLOUD_PROJECT or "
            "configure application default credentials"
        )
    return default_project
