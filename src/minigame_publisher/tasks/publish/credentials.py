"""
Credential discovery for automated publishing.

The resolver probes one well-known path for a service-account key. No key
means the run falls back to manual instructions; a key that cannot be loaded
is an operator mistake and aborts the run.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from firebase_admin import credentials

from minigame_publisher.tasks.publish.errors import PublishConfigurationError

REQUIRED_SERVICE_ACCOUNT_FIELDS = ("type", "project_id", "private_key", "client_email")


@dataclass(frozen=True)
class Credentials:
    """Everything needed to talk to the target bucket. Never logged or serialised."""

    bucket: str
    client_email: str = field(repr=False)
    certificate: Any = field(repr=False, compare=False)


@dataclass(frozen=True)
class Authenticated:
    credentials: Credentials


@dataclass(frozen=True)
class Unauthenticated:
    searched_path: Path


ResolveResult = Union[Authenticated, Unauthenticated]


class CredentialResolver:
    def __init__(self, credentials_path: Union[str, Path], bucket: str):
        self.credentials_path = Path(credentials_path)
        self.bucket = bucket

    def _read_service_account(self) -> dict:
        try:
            with open(self.credentials_path, "r", encoding="utf-8") as f:
                info = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise PublishConfigurationError(
                f"Could not read service account key at {self.credentials_path}: {e}"
            ) from e
        except json.JSONDecodeError as e:
            raise PublishConfigurationError(
                f"Service account key at {self.credentials_path} is not valid JSON: {e}"
            ) from e

        if not isinstance(info, dict):
            raise PublishConfigurationError(
                f"Service account key at {self.credentials_path} must be a JSON object"
            )
        missing = [key for key in REQUIRED_SERVICE_ACCOUNT_FIELDS if not info.get(key)]
        if missing:
            raise PublishConfigurationError(
                f"Service account key at {self.credentials_path} is missing fields: {', '.join(missing)}"
            )
        if info["type"] != "service_account":
            raise PublishConfigurationError(
                f"Service account key at {self.credentials_path} has type '{info['type']}', "
                "expected 'service_account'"
            )
        return info

    def resolve(self) -> ResolveResult:
        """
        Probe for the credential artifact.

        :returns: ``Unauthenticated`` when the artifact is absent, ``Authenticated`` otherwise.
        :raises PublishConfigurationError: If the artifact exists but cannot be loaded.
        """
        if not self.credentials_path.exists():
            return Unauthenticated(searched_path=self.credentials_path)

        info = self._read_service_account()
        try:
            certificate = credentials.Certificate(info)
        except ValueError as e:
            raise PublishConfigurationError(
                f"Service account key at {self.credentials_path} was rejected: {e}"
            ) from e

        return Authenticated(
            Credentials(
                bucket=self.bucket,
                client_email=info["client_email"],
                certificate=certificate,
            )
        )
