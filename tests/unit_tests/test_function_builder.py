"""
Unit tests for FunctionBuilder and its trigger-family surfaces.
"""

import dataclasses
import unittest
from unittest.mock import MagicMock, patch

from dispatch import TriggerFactories
from errors import InvalidConfigError
from function_builder import FunctionBuilder, region, run_with
from models import DeploymentOptions, FailurePolicy, merge


def mock_factories() -> TriggerFactories:
    return TriggerFactories(
        **{f.name: MagicMock(name=f.name) for f in dataclasses.fields(TriggerFactories)}
    )


class TestEntryPoints(unittest.TestCase):
    """Test the region and run_with free functions."""

    def test_region_creates_builder(self):
        builder = region("us-east1", "us-central1")
        self.assertIsInstance(builder, FunctionBuilder)
        self.assertEqual(builder.options.regions, ("us-east1", "us-central1"))

    def test_region_requires_a_region(self):
        with self.assertRaises(InvalidConfigError):
            region()

    def test_region_rejects_unsupported(self):
        with self.assertRaises(InvalidConfigError):
            region("us-east1", "atlantis-1")

    def test_run_with_creates_builder(self):
        builder = run_with({"memory": "1GB", "timeout_seconds": 540})
        self.assertEqual(builder.options.memory, "1GB")
        self.assertEqual(builder.options.timeout_seconds, 540)

    def test_run_with_rejects_invalid(self):
        with self.assertRaises(InvalidConfigError):
            run_with({"memory": "3GB"})

    def test_free_functions_return_fresh_builders(self):
        self.assertIsNot(region("us-east1"), region("us-east1"))


class TestFunctionBuilderChaining(unittest.TestCase):
    """Test chained region and run_with calls."""

    def setUp(self):
        self.factories = mock_factories()

    def test_default_builder_has_empty_snapshot(self):
        builder = FunctionBuilder(factories=self.factories)
        self.assertEqual(builder.options, DeploymentOptions())

    def test_chained_calls_return_same_builder(self):
        builder = FunctionBuilder(factories=self.factories)
        self.assertIs(builder.region("us-east1"), builder)
        self.assertIs(builder.run_with({"memory": "1GB"}), builder)

    def test_run_with_after_region_keeps_regions(self):
        builder = FunctionBuilder(factories=self.factories)
        builder.region("us-east1").run_with({"memory": "1GB"})
        self.assertEqual(builder.options.regions, ("us-east1",))
        self.assertEqual(builder.options.memory, "1GB")

    def test_memory_survives_later_region_call(self):
        builder = run_with({"memory": "1GB"}).region("europe-west2")
        self.assertEqual(builder.options.memory, "1GB")

    def test_sequence_matches_merge(self):
        """Test runWith(f1).runWith(f2) equals merge(merge(defaults, f1), f2)."""
        pairs = [
            ({"memory": "1GB"}, {"timeout_seconds": 60}),
            ({"memory": "1GB", "timeout_seconds": 30}, {"memory": "2GB"}),
            ({"failure_policy": True}, {"failure_policy": False, "memory": "128MB"}),
        ]
        for f1, f2 in pairs:
            builder = FunctionBuilder(factories=self.factories).run_with(f1).run_with(f2)
            expected = merge(merge(DeploymentOptions(), f1), f2)
            self.assertEqual(builder.options, expected)

    def test_region_twice_is_idempotent(self):
        once = FunctionBuilder(factories=self.factories).region("us-east1")
        twice = FunctionBuilder(factories=self.factories).region("us-east1").region("us-east1")
        self.assertEqual(once.options, twice.options)
        self.assertEqual(twice.options.regions, ("us-east1",))

    def test_failed_call_leaves_snapshot_unchanged(self):
        builder = FunctionBuilder(factories=self.factories).run_with({"memory": "512MB"})
        before = builder.options
        with self.assertRaises(InvalidConfigError):
            builder.run_with({"memory": "4GB", "timeout_seconds": 10})
        with self.assertRaises(InvalidConfigError):
            builder.region("nowhere-1")
        self.assertEqual(builder.options, before)

    def test_true_and_empty_retry_are_equivalent(self):
        from_bool = FunctionBuilder(factories=self.factories).run_with({"failure_policy": True})
        from_object = FunctionBuilder(factories=self.factories).run_with(
            {"failure_policy": {"retry": {}}}
        )
        self.assertEqual(from_bool.options.failure_policy, FailurePolicy.retry_default())
        self.assertEqual(from_bool.options, from_object.options)


class TestDispatch(unittest.TestCase):
    """Test trigger-family surfaces forward the snapshot to their factory."""

    def setUp(self):
        self.factories = mock_factories()
        self.builder = FunctionBuilder(factories=self.factories).region("us-east1").run_with(
            {"memory": "256MB"}
        )
        self.handler = MagicMock()

    def test_https(self):
        opts = self.builder.options
        result = self.builder.https.on_request(self.handler)
        self.factories.https.on_request_with_options.assert_called_once_with(self.handler, opts)
        self.assertIs(result, self.factories.https.on_request_with_options.return_value)

        self.builder.https.on_call(self.handler)
        self.factories.https.on_call_with_options.assert_called_once_with(self.handler, opts)

    def test_database(self):
        opts = self.builder.options
        self.builder.database.instance("my-db")
        self.factories.database.instance_with_options.assert_called_once_with("my-db", opts)
        self.builder.database.ref("users/{uid}")
        self.factories.database.ref_with_options.assert_called_once_with("users/{uid}", opts)

    def test_firestore(self):
        opts = self.builder.options
        self.builder.firestore.document("users/{uid}")
        self.builder.firestore.namespace("ns")
        self.builder.firestore.database("db")
        factory = self.factories.firestore
        factory.document_with_options.assert_called_once_with("users/{uid}", opts)
        factory.namespace_with_options.assert_called_once_with("ns", opts)
        factory.database_with_options.assert_called_once_with("db", opts)

    def test_crashlytics_analytics_remote_config(self):
        opts = self.builder.options
        self.builder.crashlytics.issue()
        self.factories.crashlytics.issue_with_options.assert_called_once_with(opts)
        self.builder.analytics.event("purchase")
        self.factories.analytics.event_with_options.assert_called_once_with("purchase", opts)
        self.builder.remote_config.on_update(self.handler)
        self.factories.remote_config.on_update_with_options.assert_called_once_with(
            self.handler, opts
        )

    def test_storage(self):
        opts = self.builder.options
        self.builder.storage.bucket("my-bucket")
        self.factories.storage.bucket_with_options.assert_called_once_with(opts, "my-bucket")
        self.builder.storage.object()
        self.factories.storage.object_with_options.assert_called_once_with(opts)

    def test_storage_default_bucket(self):
        self.builder.storage.bucket()
        self.factories.storage.bucket_with_options.assert_called_once_with(
            self.builder.options, None
        )

    def test_pubsub_auth_test_lab(self):
        opts = self.builder.options
        self.builder.pubsub.topic("jobs")
        self.factories.pubsub.topic_with_options.assert_called_once_with("jobs", opts)
        self.builder.pubsub.schedule("every 5 minutes")
        self.factories.pubsub.schedule_with_options.assert_called_once_with(
            "every 5 minutes", opts
        )
        self.builder.auth.user()
        self.factories.auth.user_with_options.assert_called_once_with(opts)
        self.builder.test_lab.test_matrix()
        self.factories.test_lab.test_matrix_with_options.assert_called_once_with(opts)

    def test_surface_reads_latest_snapshot(self):
        """Test a surface taken before a chained call sees the newer options."""
        surface = self.builder.pubsub
        self.builder.run_with({"memory": "2GB"})
        surface.topic("jobs")
        passed = self.factories.pubsub.topic_with_options.call_args[0][1]
        self.assertEqual(passed.memory, "2GB")

    def test_dispatch_can_be_repeated_and_chaining_continues(self):
        self.builder.auth.user()
        self.builder.run_with({"timeout_seconds": 10}).auth.user()
        calls = self.factories.auth.user_with_options.call_args_list
        self.assertEqual(len(calls), 2)
        self.assertIsNone(calls[0][0][0].timeout_seconds)
        self.assertEqual(calls[1][0][0].timeout_seconds, 10)

    def test_surfaces_do_not_change_the_builder(self):
        before = self.builder.options
        self.builder.database.ref("a")
        self.builder.storage.object()
        self.assertEqual(self.builder.options, before)


class TestHttpsFailurePolicyWarning(unittest.TestCase):
    """Test the warning emitted when failure policy meets an https trigger."""

    def setUp(self):
        self.factories = mock_factories()

    def test_warns_once_and_still_dispatches(self):
        builder = FunctionBuilder(factories=self.factories).run_with({"failure_policy": True})
        with self.assertLogs("function_builder", level="WARNING") as cm:
            surface = builder.https
        self.assertEqual(len(cm.records), 1)
        self.assertIn("failure_policy is not supported in https", cm.output[0])

        handler = MagicMock()
        surface.on_request(handler)
        surface.on_call(handler)
        self.factories.https.on_request_with_options.assert_called_once()
        self.factories.https.on_call_with_options.assert_called_once()

    def test_no_warning_without_failure_policy(self):
        builder = FunctionBuilder(factories=self.factories).run_with({"memory": "1GB"})
        with patch("function_builder.logger") as mock_logger:
            builder.https
        mock_logger.warning.assert_not_called()

    def test_other_families_do_not_warn(self):
        builder = FunctionBuilder(factories=self.factories).run_with({"failure_policy": True})
        with patch("function_builder.logger") as mock_logger:
            builder.pubsub.topic("jobs")
        mock_logger.warning.assert_not_called()


if __name__ == "__main__":
    unittest.main()
