"""
Errors raised by the steps of the resource generation flow.

Each step wraps whatever its collaborator raised so the handler can log
which step failed while still answering the caller with one generic error.
"""


class ResourceGenerationError(Exception):
    step = "unknown"
    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        cause = self.__cause__
        if cause is None:
            return f"[{self.step}] {self.message}"
        return f"[{self.step}] {self.message}: {type(cause).__name__}: {cause}"


class CompletionError(ResourceGenerationError):
    step = "completion"


class RenderError(ResourceGenerationError):
    step = "render"


class UploadError(ResourceGenerationError):
    step = "upload"


class PersistError(ResourceGenerationError):
    step = "persist"
