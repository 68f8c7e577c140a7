"""
Module: orchestrator.py

This module defines the BaseOrchestrator class shared by task orchestrators. It holds the
validated configuration, resolves the verbosity level and provides a configured logger.
"""

from abc import ABC, abstractmethod
from box import Box
from minigame_publisher.utils.logging import get_logger
from minigame_publisher.utils.logging import VerboseLevel


class BaseOrchestrator(ABC):
    """
    Abstract base class for task orchestration.

    Subclasses validate their own section of the configuration and implement ``execute``.
    """

    def __init__(self, config: Box) -> None:
        """
        Initialize the BaseOrchestrator.

        :param config: Configuration object with an optional 'verbose_level' key.
        :type config: Box
        """

        self.config = config
        self.verbose_level = VerboseLevel(
            self.config.get("verbose_level", VerboseLevel.INFO)
        )
        self.logger = get_logger(__name__, self.verbose_level)

    @abstractmethod
    def validate_config(self) -> None:
        """Raise ``ValueError`` if the task configuration is unusable."""

    @abstractmethod
    def execute(self):
        """Run the task."""
