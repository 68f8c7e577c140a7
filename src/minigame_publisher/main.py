import argparse
import sys
from typing import Optional, Sequence

from box import Box
import yaml

from minigame_publisher.config.config_loader import ConfigValidator
from minigame_publisher.config.defaults import default_config
from minigame_publisher.tasks.publish.results import ExitStatus
from minigame_publisher.utils.version import display_version_info


def load_config(config_path: Optional[str]) -> Box:
    """Load and validate a configuration file, or fall back to the built-in defaults."""
    if not config_path:
        return default_config()

    # Load the YAML file (to extract the task value)
    with open(config_path, "r") as f:
        raw_data = yaml.safe_load(f)
    raw_config = Box(raw_data or {}, box_dots=True)

    task = raw_config.get("task")
    if not task:
        raise ValueError("Missing 'task' key in configuration.")

    validator = ConfigValidator()
    return validator.validate(config_path, task)


def execute_task(config: Box) -> ExitStatus:
    # Map task types to their corresponding modules
    task_module_map = {
        'publish': 'publish'
    }

    task = config.get("task")
    if task not in task_module_map:
        raise ValueError(f"Unknown task '{task}'")

    task_module = __import__(f"minigame_publisher.tasks.{task_module_map[task]}", fromlist=[""])
    return task_module.execute(config)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Publish mini-game HTML files to Firebase Storage')
    parser.add_argument('--config', '-c', help='Path to publish config (defaults to the built-in mini-game set)')
    parser.add_argument('--credentials', help='Path to the service account key (overrides the config)')
    parser.add_argument('--version', '-v', action='store_true', help='Display version information')
    parser.add_argument('--validate', action='store_true', help='Validate configuration without execution')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.version:
        display_version_info()
        return ExitStatus.SUCCESS

    # Handle validation only
    if args.validate:
        print(f"Validating configuration: {args.config or '<built-in defaults>'}")
        try:
            load_config(args.config)
        except Exception as e:
            print(f"ERROR: Invalid configuration: {e}")
            return ExitStatus.FAILURE
        print("Configuration is valid!")
        return ExitStatus.SUCCESS

    try:
        config = load_config(args.config)
        if args.credentials:
            config.publish.credentials_path = args.credentials
        return execute_task(config)
    except Exception as e:
        print(f"ERROR: {e}")
        return ExitStatus.FAILURE


if __name__ == '__main__':
    sys.exit(int(main()))
