from box import Box

from minigame_publisher.tasks.publish.orchestrator import PublishOrchestrator
from minigame_publisher.tasks.publish.results import ExitStatus


def execute(config: Box) -> ExitStatus:
    orchestrator = PublishOrchestrator(config)
    return orchestrator.execute()
