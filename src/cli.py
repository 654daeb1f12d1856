"""Console entry point that validates function options and prints the trigger."""

from __future__ import annotations

import argparse
import json
import logging
from typing import Any, Callable, Dict, List

from cloud_functions import CloudFunction
from config import SUPPORTED_REGIONS, TRIGGER_CHOICES, VALID_MEMORY_OPTIONS, CliConfig
from errors import InvalidConfigError, ProjectNotFoundError
from function_builder import FunctionBuilder
from log_utils import setup_logging

logger = logging.getLogger(__name__)


def noop_handler(*args: Any, **kwargs: Any) -> None:
    """Placeholder handler used when only the trigger is of interest."""
    return None


def _require_resource(config: CliConfig) -> str:
    if not config.resource:
        raise InvalidConfigError.single(
            "--resource", f"is required for the {config.trigger} trigger"
        )
    return config.resource


DISPATCH: Dict[str, Callable[[FunctionBuilder, CliConfig], CloudFunction]] = {
    "https": lambda b, c: b.https.on_request(noop_handler),
    "callable": lambda b, c: b.https.on_call(noop_handler),
    "database": lambda b, c: b.database.ref(_require_resource(c)).on_write(noop_handler),
    "firestore": lambda b, c: b.firestore.document(_require_resource(c)).on_write(
        noop_handler
    ),
    "pubsub": lambda b, c: b.pubsub.topic(_require_resource(c)).on_publish(noop_handler),
    "schedule": lambda b, c: b.pubsub.schedule(_require_resource(c)).on_run(noop_handler),
    "auth": lambda b, c: b.auth.user().on_create(noop_handler),
    "storage": lambda b, c: b.storage.bucket(c.resource).object().on_finalize(
        noop_handler
    ),
    "analytics": lambda b, c: b.analytics.event(_require_resource(c)).on_log(
        noop_handler
    ),
    "crashlytics": lambda b, c: b.crashlytics.issue().on_new(noop_handler),
    "remote_config": lambda b, c: b.remote_config.on_update(noop_handler),
    "test_lab": lambda b, c: b.test_lab.test_matrix().on_complete(noop_handler),
}


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Validate Cloud Function deployment options and print the trigger"
    )
    parser.add_argument(
        "--trigger",
        required=True,
        choices=TRIGGER_CHOICES,
        help="Trigger family to attach the options to",
    )
    parser.add_argument(
        "--resource",
        help=(
            "Trigger selection argument: database or document path, topic, "
            "schedule, bucket or analytics event name"
        ),
    )
    parser.add_argument(
        "--region",
        nargs="+",
        metavar="REGION",
        help=f"Deployment regions ({', '.join(SUPPORTED_REGIONS)})",
    )
    parser.add_argument(
        "--memory", help=f"Memory tier ({', '.join(VALID_MEMORY_OPTIONS)})"
    )
    parser.add_argument("--timeout", type=int, help="Timeout in seconds (0-540)")
    retry = parser.add_mutually_exclusive_group()
    retry.add_argument(
        "--retry", dest="retry", action="store_true", default=None,
        help="Retry failed invocations",
    )
    retry.add_argument(
        "--no-retry", dest="retry", action="store_false", default=None,
        help="Disable retries",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--verbose", action="store_true")
    return parser


def build_function(config: CliConfig) -> CloudFunction:
    """Apply the CLI configuration to a builder and dispatch to the trigger."""
    builder = FunctionBuilder()
    if config.regions is not None:
        builder.region(*config.regions)
    builder.run_with(config.runtime_options())
    return DISPATCH[config.trigger](builder, config)


def main(argv: List[str] | None = None) -> int:
    """CLI main for console_scripts entry point."""
    parser = build_parser()
    args = parser.parse_args(args=argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    config = CliConfig.from_args(args)

    try:
        function = build_function(config)
    except InvalidConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except ProjectNotFoundError as e:
        logger.error(str(e))
        return 1

    print(json.dumps(function.trigger, indent=2, sort_keys=True))
    return 0
