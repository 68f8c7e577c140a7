"""
Pytest configuration file.
Contains fixtures that are available to all tests.
"""
import json
import pytest
from unittest.mock import MagicMock, patch

from tests.fixtures.configs import get_publish_config, service_account_info


@pytest.fixture
def publish_root(tmp_path):
    """Working directory for a single publish run"""
    (tmp_path / "mini-games").mkdir()
    return tmp_path


@pytest.fixture
def publish_config(publish_root):
    """Publish configuration with a single asset"""
    return get_publish_config(publish_root)


@pytest.fixture
def credentials_file(publish_root):
    """A well-formed service account key on disk"""
    path = publish_root / "service-account-key.json"
    path.write_text(json.dumps(service_account_info()), encoding="utf-8")
    return path


@pytest.fixture
def mock_certificate():
    """Stand-in for firebase_admin's certificate loader"""
    with patch("minigame_publisher.tasks.publish.credentials.credentials.Certificate") as certificate:
        certificate.return_value = MagicMock(name="certificate")
        yield certificate


@pytest.fixture
def mock_firebase():
    """
    Patch the firebase_admin entry points used by the uploader.

    Yields the mock bucket; ``bucket.blob(path)`` returns one mock blob per path,
    available afterwards through ``bucket.blobs``.
    """
    bucket = MagicMock(name="bucket")
    bucket.blobs = {}

    def make_blob(path):
        return bucket.blobs.setdefault(path, MagicMock(name=f"blob:{path}"))

    bucket.blob.side_effect = make_blob

    with patch("minigame_publisher.tasks.publish.upload.firebase.firebase_admin") as firebase_admin, \
            patch("minigame_publisher.tasks.publish.upload.firebase.storage") as storage:
        storage.bucket.return_value = bucket
        bucket.firebase_admin = firebase_admin
        bucket.storage = storage
        yield bucket
