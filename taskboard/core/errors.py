"""Typed failures raised by the session manager and the task store."""


class TaskboardError(Exception):
    """Base class for every taskboard failure."""


class ValidationError(TaskboardError):
    """A credential or field broke a rule. The message is meant for display."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthRequiredError(TaskboardError):
    def __init__(self, message: str = "No token provided"):
        super().__init__(message)


class NotFoundError(TaskboardError):
    def __init__(self, task_id: str):
        super().__init__(f"Task not found: {task_id}")
        self.task_id = task_id


class CorruptStateError(TaskboardError):
    """A persisted value could not be parsed."""

    def __init__(self, key: str, reason: str = ""):
        super().__init__(f"Corrupt value under '{key}': {reason}" if reason else f"Corrupt value under '{key}'")
        self.key = key
