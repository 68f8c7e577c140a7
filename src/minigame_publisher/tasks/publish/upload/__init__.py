from minigame_publisher.tasks.publish.upload.firebase import UploadFirebase

__all__ = ["UploadFirebase"]
