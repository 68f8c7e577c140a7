"""
Publish Orchestrator Module

This module provides the PublishOrchestrator class, which handles the orchestration
of the mini-game publishing process. The workflow includes validating configuration,
building the asset manifest, resolving credentials, and then either uploading the
assets to Firebase Storage or printing manual upload instructions.
"""

import sys
from typing import List, Optional, TextIO

from box import Box

from minigame_publisher.config.config_loader import ConfigValidator
from minigame_publisher.tasks.publish.credentials import (
    Authenticated,
    CredentialResolver,
    Credentials,
    ResolveResult,
    Unauthenticated,
)
from minigame_publisher.tasks.publish.manifest import Manifest, build_manifest
from minigame_publisher.tasks.publish.report import ManualFallbackReporter
from minigame_publisher.tasks.publish.results import ExitStatus, UploadResult, exit_status_for
from minigame_publisher.tasks.publish.upload.firebase import UploadFirebase
from minigame_publisher.utils.logging import get_logger
from minigame_publisher.utils.orchestrator import BaseOrchestrator


class PublishOrchestrator(BaseOrchestrator):
    """
    Orchestrates the publish workflow.
    """
    def __init__(self, config: Box, out: Optional[TextIO] = None):
        # Optional keys take their values from the publish schema.
        super().__init__(ConfigValidator().apply_defaults(config, "publish"))
        self.logger = get_logger(__name__, self.verbose_level)
        self.out = out or sys.stdout

    def validate_config(self):
        """
        Validate the publish configuration.
        """
        if not hasattr(self.config, 'publish') or not self.config.publish:
            raise ValueError("Publish configuration must be provided")
        if not self.config.publish.get('bucket'):
            raise ValueError("Publish bucket must be provided")
        if not self.config.publish.get('assets'):
            raise ValueError("Publish assets must be provided")

    @property
    def bucket(self) -> str:
        return self.config.publish.get('bucket')

    @property
    def storage_folder(self) -> str:
        return self.config.publish.storage_folder

    def build_manifest(self) -> Manifest:
        manifest = build_manifest(
            self.config.publish.get('assets'),
            self.config.publish.assets_dir,
        )
        self.logger.debug(f"Manifest: {[entry.name for entry in manifest]}")
        return manifest

    def resolve_credentials(self) -> ResolveResult:
        resolver = CredentialResolver(
            self.config.publish.credentials_path,
            self.bucket,
        )
        return resolver.resolve()

    def report_manual_upload(self, manifest: Manifest, unauthenticated: Unauthenticated):
        reporter = ManualFallbackReporter(
            bucket=self.bucket,
            storage_folder=self.storage_folder,
            assets_dir=self.config.publish.assets_dir,
            project_id=self.config.publish.get('project_id'),
            out=self.out,
            verbose_level=self.verbose_level,
        )
        reporter.execute(manifest, searched_path=unauthenticated.searched_path)

    def upload_assets(self, manifest: Manifest, credentials: Credentials) -> List[UploadResult]:
        upload_handler = UploadFirebase(
            credentials=credentials,
            storage_folder=self.storage_folder,
            cache_max_age=self.config.publish.cache_max_age,
            max_workers=self.config.publish.max_workers,
            out=self.out,
            verbose_level=self.verbose_level,
        )
        return upload_handler.execute(manifest)

    def execute(self) -> ExitStatus:
        try:
            self.logger.info("Starting publish workflow")
            print("🎮 Mini-Game Upload Script", file=self.out)
            print("==========================", file=self.out)

            self.validate_config()
            manifest = self.build_manifest()
            resolved = self.resolve_credentials()

            if isinstance(resolved, Unauthenticated):
                self.report_manual_upload(manifest, resolved)
                status = ExitStatus.MANUAL_ACTION_REQUIRED
            elif isinstance(resolved, Authenticated):
                results = self.upload_assets(manifest, resolved.credentials)
                status = exit_status_for(results)
            else:
                raise TypeError(f"Unexpected credential resolution result: {resolved!r}")

            if status == ExitStatus.SUCCESS:
                self.logger.info("✅ Publish workflow completed successfully")
            else:
                self.logger.warning(f"Publish workflow finished with status {status.name}")
            return status
        except Exception as e:
            self.logger.error(f"❌ Error in publishing workflow: {e}")
            raise
