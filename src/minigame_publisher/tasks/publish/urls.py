"""
Public URL forms for published objects.

Both forms depend only on the bucket and the object path, so they can be
printed before anything is uploaded and will match what a successful upload
reports afterwards. Clients should load assets through the Firebase API form;
the direct form is informational.
"""

from typing import NamedTuple
from urllib.parse import quote

DIRECT_URL_TEMPLATE = "https://storage.googleapis.com/{bucket}/{path}"
API_URL_TEMPLATE = "https://firebasestorage.googleapis.com/v0/b/{bucket}/o/{path}?alt=media"

FIREBASE_BUCKET_SUFFIXES = (".firebasestorage.app", ".appspot.com")


class PublicUrls(NamedTuple):
    direct: str
    api: str


def storage_path(storage_folder: str, name: str) -> str:
    return f"{storage_folder.strip('/')}/{name}"


def direct_url(bucket: str, path: str) -> str:
    return DIRECT_URL_TEMPLATE.format(bucket=bucket, path=quote(path, safe="/"))


def api_url(bucket: str, path: str) -> str:
    # The object path is a single URL segment here, so '/' becomes %2F.
    return API_URL_TEMPLATE.format(bucket=bucket, path=quote(path, safe=""))


def public_urls(bucket: str, storage_folder: str, name: str) -> PublicUrls:
    path = storage_path(storage_folder, name)
    return PublicUrls(direct=direct_url(bucket, path), api=api_url(bucket, path))


def project_id_from_bucket(bucket: str) -> str:
    """Best-effort Firebase project id for a default project bucket."""
    for suffix in FIREBASE_BUCKET_SUFFIXES:
        if bucket.endswith(suffix):
            return bucket[: -len(suffix)]
    return bucket
