"""
Operator-facing console output.

These lines are read by people following the manual path and by scripts
scraping the URLs, so the URL lines are kept to a fixed shape:
three-space indent, then the URL.
"""

import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from minigame_publisher.tasks.publish.manifest import Manifest
from minigame_publisher.tasks.publish.results import Failure, UploadResult
from minigame_publisher.tasks.publish.urls import project_id_from_bucket, public_urls
from minigame_publisher.utils.logging import VerboseLevel, get_logger

FIREBASE_CONSOLE_URL = "https://console.firebase.google.com"


def print_public_urls(
    names: Sequence[str], bucket: str, storage_folder: str, out: TextIO
) -> None:
    """Print both public URL forms for each name, Firebase API form first."""
    for name in names:
        urls = public_urls(bucket, storage_folder, name)
        print(f"   {urls.api}", file=out)
        print(f"   {urls.direct}", file=out)


class ManualFallbackReporter:
    """
    Prints manual upload instructions when no service account key is available.

    Each asset is still checked on disk so the operator knows whether the
    local files are ready to upload. Missing files are reported, never raised.
    """

    def __init__(
        self,
        bucket: str,
        storage_folder: str,
        assets_dir: Path,
        project_id: Optional[str] = None,
        out: Optional[TextIO] = None,
        verbose_level: VerboseLevel = VerboseLevel.INFO,
    ):
        self.bucket = bucket
        self.storage_folder = storage_folder
        self.assets_dir = Path(assets_dir)
        self.project_id = project_id or project_id_from_bucket(bucket)
        self.out = out or sys.stdout
        self.logger = get_logger(__name__, verbose_level)

    def _print(self, line: str = "") -> None:
        print(line, file=self.out)

    def execute(self, manifest: Manifest, searched_path: Optional[Path] = None) -> None:
        if searched_path is not None:
            self._print(f"⚠️  Service account key not found at: {searched_path}")
        self._print()
        self._print("📋 MANUAL UPLOAD INSTRUCTIONS:")
        self._print("================================")
        self._print()
        self._print("Since no service account key is available, please upload manually:")
        self._print()
        self._print(f"1. Go to Firebase Console: {FIREBASE_CONSOLE_URL}")
        self._print(f"2. Select your project: {self.project_id}")
        self._print(f"3. Navigate to Storage (bucket: {self.bucket})")
        self._print(f'4. Create a folder called "{self.storage_folder}"')
        self._print(f"5. Upload the following files from {self.assets_dir}/:")
        self._print()

        missing = 0
        for entry in manifest:
            if entry.exists():
                self._print(f"   ✅ {entry.name} (present)")
            else:
                missing += 1
                self._print(f"   ❌ {entry.name} (NOT FOUND)")

        self._print()
        self._print("6. After uploading, make sure each file has public read access")
        self._print("   or configure Storage rules to allow public reads.")
        self._print()
        self._print("📍 Expected Storage URLs after upload:")
        print_public_urls([entry.name for entry in manifest], self.bucket, self.storage_folder, self.out)

        if missing:
            self.logger.warning(f"{missing} of {len(manifest)} assets are missing locally")


def print_publish_summary(
    results: Sequence[UploadResult], bucket: str, storage_folder: str, out: Optional[TextIO] = None
) -> None:
    """
    Print the itemised outcome of a publish run.

    The URL block lists every entry that was present on disk, whether or not
    its upload went through, in manifest order.
    """
    out = out or sys.stdout
    succeeded = sum(1 for result in results if result.succeeded)

    print(file=out)
    print(f"🎉 Upload complete: {succeeded}/{len(results)} published", file=out)
    for result in results:
        if isinstance(result.outcome, Failure):
            print(f"   ❌ {result.entry.name}: {result.outcome.reason}", file=out)
        else:
            print(f"   ✅ {result.entry.name}: {result.outcome.public_url}", file=out)

    print(file=out)
    print("📍 Firebase Storage URLs (for MiniGameWebView):", file=out)
    print_public_urls(
        [result.entry.name for result in results if not result.missing_locally],
        bucket,
        storage_folder,
        out,
    )
