"""
Test Lab test matrix triggers.
"""

from typing import Any, Callable

from cloud_functions import CloudFunction, TriggerBuilder
from environment import resolve_project_id
from models import DeploymentOptions


class MatrixBuilder(TriggerBuilder):
    service = "testing.googleapis.com"

    def on_complete(self, handler: Callable[..., Any]) -> CloudFunction:
        return self._on_event(handler, "google.testing.testMatrix.complete")


def test_matrix_with_options(options: DeploymentOptions) -> MatrixBuilder:
    return MatrixBuilder(
        lambda: f"projects/{resolve_project_id()}/testMatrices/{{matrix}}", options
    )
