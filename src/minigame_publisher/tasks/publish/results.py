"""
Outcome types produced by a publish run.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Sequence, Union

from minigame_publisher.tasks.publish.manifest import AssetEntry

FILE_NOT_FOUND = "file not found"

STAGE_MISSING = "missing"
STAGE_UPLOAD = "upload"
STAGE_MAKE_PUBLIC = "make_public"


class ExitStatus(IntEnum):
    """Process exit codes; calling automation branches on these."""

    SUCCESS = 0
    FAILURE = 1
    PARTIAL_SUCCESS = 2
    MANUAL_ACTION_REQUIRED = 3


@dataclass(frozen=True)
class Success:
    public_url: str


@dataclass(frozen=True)
class Failure:
    reason: str
    stage: str


@dataclass(frozen=True)
class UploadResult:
    entry: AssetEntry
    outcome: Union[Success, Failure]

    @property
    def succeeded(self) -> bool:
        return isinstance(self.outcome, Success)

    @property
    def missing_locally(self) -> bool:
        return isinstance(self.outcome, Failure) and self.outcome.stage == STAGE_MISSING


def exit_status_for(results: Sequence[UploadResult]) -> ExitStatus:
    """
    Aggregate per-entry results into a process exit status.

    All succeeded (including an empty run) is SUCCESS, none succeeded is
    FAILURE, anything in between is PARTIAL_SUCCESS.
    """
    succeeded = sum(1 for result in results if result.succeeded)
    if succeeded == len(results):
        return ExitStatus.SUCCESS
    if succeeded == 0:
        return ExitStatus.FAILURE
    return ExitStatus.PARTIAL_SUCCESS
