"""
Configuration constants and CLI configuration for the function options builder.
"""

from dataclasses import dataclass
from typing import List, Optional

# Regions a function can be deployed to.
SUPPORTED_REGIONS = (
    "us-central1",
    "us-east1",
    "us-east4",
    "europe-west1",
    "europe-west2",
    "asia-east2",
    "asia-northeast1",
)

# Memory tiers, smallest first.
VALID_MEMORY_OPTIONS = ("128MB", "256MB", "512MB", "1GB", "2GB")

MEMORY_LOOKUP = {
    "128MB": 128,
    "256MB": 256,
    "512MB": 512,
    "1GB": 1024,
    "2GB": 2048,
}

MIN_TIMEOUT_SECONDS = 0
MAX_TIMEOUT_SECONDS = 540

RUNTIME_OPTION_FIELDS = ("failure_policy", "memory", "timeout_seconds")

PROJECT_ENV_VARS = ("GCLOUD_PROJECT", "GOOGLE_CLOUD_PROJECT")

TRIGGER_CHOICES = (
    "https",
    "callable",
    "database",
    "firestore",
    "pubsub",
    "schedule",
    "auth",
    "storage",
    "analytics",
    "crashlytics",
    "remote_config",
    "test_lab",
)


@dataclass
class CliConfig:
    """Configuration for a single CLI invocation."""

    trigger: str
    regions: Optional[List[str]] = None
    memory: Optional[str] = None
    timeout_seconds: Optional[int] = None
    retry: Optional[bool] = None
    resource: Optional[str] = None
    verbose: bool = False
    log_file: Optional[str] = None

    @classmethod
    def from_args(cls, args) -> "CliConfig":
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed argparse arguments

        Returns:
            CliConfig instance
        """
        return cls(
            trigger=args.trigger,
            regions=args.region,
            memory=args.memory,
            timeout_seconds=args.timeout,
            retry=args.retry,
            resource=args.resource,
            verbose=args.verbose,
            log_file=args.log_file,
        )

    def runtime_options(self) -> dict:
        """Return the runtime option fragment described by the arguments."""
        options = {}
        if self.memory is not None:
            options["memory"] = self.memory
        if self.timeout_seconds is not None:
            options["timeout_seconds"] = self.timeout_seconds
        if self.retry is not None:
            options["failure_policy"] = self.retry
        return options
