"""Built-in configuration used when no configuration file is given."""

from box import Box

from minigame_publisher.config.config_loader import ConfigValidator

DEFAULT_BUCKET = "hoodgames-61259.firebasestorage.app"

# Ordered; the console report and the publish summary follow this order.
DEFAULT_ASSETS = (
    "tap_count.html",
    "hold_duration.html",
    "rhythm_tap.html",
)


def default_config() -> Box:
    """Return a fresh, validated copy of the built-in publish configuration."""
    return ConfigValidator().validate_data(
        {"task": "publish", "publish": {"bucket": DEFAULT_BUCKET, "assets": list(DEFAULT_ASSETS)}},
        "publish",
    )
