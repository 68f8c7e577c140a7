"""
Unit tests for the Publish Orchestrator
"""
import io
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest.mock import patch, MagicMock
from box import Box

from minigame_publisher.tasks.publish.credentials import Authenticated, Credentials, Unauthenticated
from minigame_publisher.tasks.publish.errors import PublishConfigurationError
from minigame_publisher.tasks.publish.orchestrator import PublishOrchestrator
from minigame_publisher.tasks.publish.results import ExitStatus, Failure, Success, UploadResult
from tests.fixtures.configs import TEST_BUCKET, get_publish_config


class TestPublishOrchestrator(unittest.TestCase):
    """Test the PublishOrchestrator class"""

    def setUp(self):
        """Set up test environment"""
        self.tmp = TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.config = get_publish_config(self.root, assets=("a.html", "b.html"))
        self.out = io.StringIO()

    def tearDown(self):
        self.tmp.cleanup()

    def test_validate_config_valid(self):
        """Test config validation with valid config"""
        orchestrator = PublishOrchestrator(self.config, out=self.out)
        # Should not raise an exception
        orchestrator.validate_config()

    def test_validate_config_missing_publish(self):
        """Test config validation with missing publish section"""
        orchestrator = PublishOrchestrator(Box({}), out=self.out)

        with self.assertRaises(ValueError) as context:
            orchestrator.validate_config()

        self.assertIn("Publish configuration must be provided", str(context.exception))

    def test_validate_config_missing_bucket(self):
        """Test config validation with missing bucket"""
        del self.config.publish["bucket"]
        orchestrator = PublishOrchestrator(self.config, out=self.out)

        with self.assertRaises(ValueError) as context:
            orchestrator.validate_config()

        self.assertIn("Publish bucket must be provided", str(context.exception))

    def test_validate_config_missing_assets(self):
        """Test config validation with an empty asset list"""
        self.config.publish.assets = []
        orchestrator = PublishOrchestrator(self.config, out=self.out)

        with self.assertRaises(ValueError) as context:
            orchestrator.validate_config()

        self.assertIn("Publish assets must be provided", str(context.exception))

    def test_build_manifest(self):
        """Test the manifest follows the configured asset order and directory"""
        orchestrator = PublishOrchestrator(self.config, out=self.out)
        manifest = orchestrator.build_manifest()

        self.assertEqual([entry.name for entry in manifest], ["a.html", "b.html"])
        self.assertEqual(manifest[0].local_path, self.root / "mini-games" / "a.html")

    def test_defaults_for_optional_keys(self):
        """Test optional keys fall back to the built-in defaults"""
        config = Box({"publish": {"bucket": TEST_BUCKET, "assets": ["a.html"]}}, box_dots=True)
        orchestrator = PublishOrchestrator(config, out=self.out)

        self.assertEqual(orchestrator.storage_folder, "mini-games")
        self.assertEqual(orchestrator.build_manifest()[0].local_path, Path("mini-games") / "a.html")

    def test_defaults_come_from_publish_schema(self):
        """Test the schema defaults reach the resolver and the uploader"""
        config = Box({"publish": {"bucket": TEST_BUCKET, "assets": ["a.html"]}}, box_dots=True)
        orchestrator = PublishOrchestrator(config, out=self.out)
        credentials = Credentials(bucket=TEST_BUCKET, client_email="x", certificate=MagicMock())

        self.assertNotIn("cache_max_age", config.publish)
        self.assertEqual(orchestrator.config.publish.credentials_path, "service-account-key.json")

        with patch("minigame_publisher.tasks.publish.orchestrator.UploadFirebase") as mock_upload_cls:
            orchestrator.upload_assets(orchestrator.build_manifest(), credentials)

        kwargs = mock_upload_cls.call_args.kwargs
        self.assertEqual(kwargs["storage_folder"], "mini-games")
        self.assertEqual(kwargs["cache_max_age"], 3600)
        self.assertEqual(kwargs["max_workers"], 1)

    def test_configured_values_override_schema_defaults(self):
        """Test explicit values are kept when defaults are applied"""
        self.config.publish.cache_max_age = 60
        self.config.publish.max_workers = 4
        orchestrator = PublishOrchestrator(self.config, out=self.out)
        credentials = Credentials(bucket=TEST_BUCKET, client_email="x", certificate=MagicMock())

        with patch("minigame_publisher.tasks.publish.orchestrator.UploadFirebase") as mock_upload_cls:
            orchestrator.upload_assets(orchestrator.build_manifest(), credentials)

        kwargs = mock_upload_cls.call_args.kwargs
        self.assertEqual(kwargs["cache_max_age"], 60)
        self.assertEqual(kwargs["max_workers"], 4)

    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.upload_assets")
    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.report_manual_upload")
    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.resolve_credentials")
    def test_execute_unauthenticated(self, mock_resolve, mock_report, mock_upload):
        """Test the manual path is taken and nothing is uploaded without credentials"""
        unauthenticated = Unauthenticated(searched_path=self.root / "service-account-key.json")
        mock_resolve.return_value = unauthenticated

        status = PublishOrchestrator(self.config, out=self.out).execute()

        self.assertEqual(status, ExitStatus.MANUAL_ACTION_REQUIRED)
        mock_report.assert_called_once()
        self.assertIs(mock_report.call_args.args[1], unauthenticated)
        mock_upload.assert_not_called()

    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.upload_assets")
    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.report_manual_upload")
    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.resolve_credentials")
    def test_execute_authenticated_aggregates_results(self, mock_resolve, mock_report, mock_upload):
        """Test the exit status reflects the upload results"""
        credentials = Credentials(bucket=TEST_BUCKET, client_email="x", certificate=MagicMock())
        mock_resolve.return_value = Authenticated(credentials)
        orchestrator = PublishOrchestrator(self.config, out=self.out)
        manifest = orchestrator.build_manifest()

        cases = [
            ([Success("u1"), Success("u2")], ExitStatus.SUCCESS),
            ([Success("u1"), Failure("boom", "upload")], ExitStatus.PARTIAL_SUCCESS),
            ([Failure("boom", "upload"), Failure("boom", "upload")], ExitStatus.FAILURE),
        ]
        for outcomes, expected in cases:
            with self.subTest(expected=expected):
                mock_upload.return_value = [
                    UploadResult(entry, outcome) for entry, outcome in zip(manifest, outcomes)
                ]
                self.assertEqual(orchestrator.execute(), expected)
                self.assertIs(mock_upload.call_args.args[1], credentials)

        mock_report.assert_not_called()

    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.upload_assets")
    @patch("minigame_publisher.tasks.publish.orchestrator.PublishOrchestrator.resolve_credentials")
    def test_execute_error(self, mock_resolve, mock_upload):
        """Test configuration errors propagate before any upload"""
        mock_resolve.side_effect = PublishConfigurationError("bad key")

        orchestrator = PublishOrchestrator(self.config, out=self.out)

        with self.assertRaises(PublishConfigurationError) as context:
            orchestrator.execute()

        self.assertIn("bad key", str(context.exception))
        mock_upload.assert_not_called()


if __name__ == "__main__":
    unittest.main()
