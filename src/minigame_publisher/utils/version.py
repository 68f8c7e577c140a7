"""Version information for the mini-game publisher."""

import importlib.metadata
import platform
import sys
from datetime import datetime
from typing import Dict, Any, Optional, TextIO

__version__ = "0.1.0"

DISTRIBUTION_NAME = "minigame-publisher"

def get_version() -> str:
    """Return the installed version of the publisher.

    Falls back to the in-tree version when the distribution is not installed.

    Returns:
        str: The current version number.
    """
    try:
        return importlib.metadata.version(DISTRIBUTION_NAME)
    except importlib.metadata.PackageNotFoundError:
        return __version__

def get_version_info() -> Dict[str, Any]:
    """Collect version information about the publisher and its storage client.

    Returns:
        Dict[str, Any]: Dictionary containing version and platform information.
    """
    info = {
        "version": get_version(),
        "python": platform.python_version(),
        "platform": platform.platform(),
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
    }

    try:
        import firebase_admin
        info["firebase_admin"] = firebase_admin.__version__
    except ImportError:
        pass

    return info

def display_version_info(file: Optional[TextIO] = None) -> None:
    """Display detailed version information about the publisher."""
    out = file or sys.stdout
    info = get_version_info()

    print(f"Mini-Game Publisher v{info['version']}", file=out)
    print(f"Python Version: {info['python']}", file=out)
    print(f"Platform: {info['platform']}", file=out)
    print(f"Time: {info['timestamp']}", file=out)
    print(f"Firebase Admin Version: {info.get('firebase_admin', 'Not installed')}", file=out)
