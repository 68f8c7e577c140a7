from minigame_publisher.utils.logging import VerboseLevel, get_logger, set_logger_level
from minigame_publisher.utils.version import __version__, get_version

__all__ = ["VerboseLevel", "get_logger", "set_logger_level", "__version__", "get_version"]
