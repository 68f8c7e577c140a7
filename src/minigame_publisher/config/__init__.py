from minigame_publisher.config.config_loader import ConfigValidator
from minigame_publisher.config.defaults import default_config

__all__ = ["ConfigValidator", "default_config"]
