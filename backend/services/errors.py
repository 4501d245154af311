"""Service-level exceptions.

Each carries the HTTP status the API layer should answer with, so route
handlers never need to know which collaborator failed.
"""


class ResumeMatchError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InputValidationError(ResumeMatchError):
    status_code = 400


class DocumentParseError(ResumeMatchError):
    status_code = 400


class ConfigurationError(ResumeMatchError):
    status_code = 500


class LLMError(ResumeMatchError):
    """The LLM provider failed or returned nothing usable."""

    status_code = 502

    def __init__(self, message: str, provider_status: int | None = None):
        super().__init__(message)
        self.provider_status = provider_status


class UpstreamResponseError(ResumeMatchError):
    """The LLM answered, but the reply was malformed or truncated."""

    status_code = 502


class AnalysisTimeoutError(ResumeMatchError):
    status_code = 504
