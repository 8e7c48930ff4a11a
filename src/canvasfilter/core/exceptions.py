"""
Exception hierarchy for canvasfilter.

Validation failures on the command surface are returned wrapped in ``Err``;
loader and configuration failures are raised.
"""


class CanvasFilterError(Exception):
    """Base class for every canvasfilter error."""


class CommandUnavailableError(CanvasFilterError):
    """A command was invoked while the active view is not a canvas."""

    def __init__(self, command_id: str):
        self.command_id = command_id
        super().__init__(f"Command '{command_id}' is not available in the current view")


class UnknownCommandError(CanvasFilterError):
    def __init__(self, command_id: str):
        self.command_id = command_id
        super().__init__(f"Unknown command: {command_id}")


class EmptySelectionError(CanvasFilterError):
    """A selection-dependent command ran with nothing selected."""

    def __init__(self, message: str = "Please select at least one node"):
        super().__init__(message)


class UnknownTagChoiceError(CanvasFilterError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"No pending tag choice for token: {token}")


class CanvasLoadError(CanvasFilterError):
    """A canvas file could not be read or validated."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load canvas {path}: {reason}")


class ConfigError(CanvasFilterError):
    pass
