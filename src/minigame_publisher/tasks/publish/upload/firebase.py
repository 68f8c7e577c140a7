from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, TextIO

import firebase_admin
from firebase_admin import storage

from minigame_publisher.tasks.publish.credentials import Credentials
from minigame_publisher.tasks.publish.errors import PublishConfigurationError
from minigame_publisher.tasks.publish.manifest import AssetEntry, Manifest
from minigame_publisher.tasks.publish.report import print_publish_summary
from minigame_publisher.tasks.publish.results import (
    FILE_NOT_FOUND,
    STAGE_MAKE_PUBLIC,
    STAGE_MISSING,
    STAGE_UPLOAD,
    Failure,
    Success,
    UploadResult,
)
from minigame_publisher.tasks.publish.urls import direct_url, storage_path
from minigame_publisher.utils.logging import VerboseLevel, get_logger

CONTENT_TYPE = "text/html"
APP_NAME = "minigame-publisher"


class UploadFirebase:
    """
    Uploads manifest assets to a Firebase Storage bucket and makes them public.

    Each entry is handled in isolation: a missing file or a failed API call is
    recorded for that entry and the run moves on. Only bucket initialisation
    failures abort the run.
    """

    def __init__(
        self,
        credentials: Credentials,
        storage_folder: str,
        cache_max_age: int,
        max_workers: int,
        out: Optional[TextIO] = None,
        verbose_level: VerboseLevel = VerboseLevel.INFO,
    ):
        self.credentials = credentials
        self.storage_folder = storage_folder
        self.cache_control = f"public, max-age={cache_max_age}"
        self.max_workers = max(1, max_workers)
        self.out = out
        self.logger = get_logger(__name__, verbose_level)
        self.app = None
        self.bucket = None

    def _connect(self):
        bucket_name = self.credentials.bucket
        try:
            self.app = firebase_admin.initialize_app(
                self.credentials.certificate,
                {"storageBucket": bucket_name},
                name=APP_NAME,
            )
            # Only a handle; object-level calls surface access problems per entry.
            self.bucket = storage.bucket(app=self.app)
        except Exception as e:
            self._disconnect()
            raise PublishConfigurationError(
                f"Could not initialize storage bucket '{bucket_name}': {e}"
            ) from e

        self.logger.info(f"Initialized Firebase app with storage bucket {bucket_name}")

    def _disconnect(self):
        if self.app is not None:
            firebase_admin.delete_app(self.app)
            self.app = None
        self.bucket = None

    def _upload_file(self, blob, entry: AssetEntry):
        blob.cache_control = self.cache_control
        blob.upload_from_filename(str(entry.local_path), content_type=CONTENT_TYPE)

    def _make_public(self, blob):
        blob.make_public()

    def _publish_entry(self, entry: AssetEntry) -> UploadResult:
        if not entry.exists():
            self.logger.warning(f"❌ File not found: {entry.local_path}")
            return UploadResult(entry, Failure(f"{FILE_NOT_FOUND}: {entry.local_path}", STAGE_MISSING))

        path = storage_path(self.storage_folder, entry.name)
        blob = self.bucket.blob(path)

        try:
            self._upload_file(blob, entry)
        except Exception as e:
            self.logger.error(f"❌ Failed to upload {entry.name}: {e}")
            return UploadResult(entry, Failure(f"upload failed: {e}", STAGE_UPLOAD))

        # Upload success does not imply public access; the grant is its own call.
        try:
            self._make_public(blob)
        except Exception as e:
            self.logger.error(f"❌ Uploaded {entry.name} but could not make it public: {e}")
            return UploadResult(entry, Failure(f"make public failed: {e}", STAGE_MAKE_PUBLIC))

        public_url = direct_url(self.credentials.bucket, path)
        self.logger.info(f"✅ Uploaded: {entry.name} -> {public_url}")
        return UploadResult(entry, Success(public_url))

    def execute(self, manifest: Manifest) -> List[UploadResult]:
        """
        Publish every manifest entry, in manifest order.

        :raises PublishConfigurationError: If the bucket cannot be initialised.
        """
        self._connect()
        try:
            self.logger.info(f"📤 Uploading {len(manifest)} mini-game files to Firebase Storage...")
            if self.max_workers > 1:
                with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                    results = list(executor.map(self._publish_entry, manifest))
            else:
                results = [self._publish_entry(entry) for entry in manifest]
        finally:
            self._disconnect()

        print_publish_summary(results, self.credentials.bucket, self.storage_folder, self.out)
        return results
