"""Request-fatal errors rendered by the API as ``{error[, details]}``"""


class LearningMapError(Exception):
    """Base error carrying a user-facing message and an HTTP status"""

    status_code: int = 500

    def __init__(self, message: str, *, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_content(self) -> dict[str, str]:
        content = {'error': self.message}
        if self.details is not None:
            content['details'] = self.details
        return content


class InvalidModelOutputError(LearningMapError):
    """The model answered with text that is not valid JSON"""


class MissingNodesError(LearningMapError):
    """The model answered with JSON that has no ``nodes`` array"""


class UpstreamModelError(LearningMapError):
    """The call to the model itself failed"""
