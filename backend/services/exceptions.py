"""Error taxonomy for the analysis engine and its storage collaborator."""


class ResumeEngineError(Exception):
    """Base class; ``message`` is safe to show to the caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ResumeEngineError):
    """Input is missing or too short. Caller's fault, never retried."""


class AnalysisError(ResumeEngineError):
    """Unexpected failure while analyzing a resume."""


class ComparisonError(ResumeEngineError):
    """Unexpected failure while comparing a resume with a job description."""


class NotFoundError(ResumeEngineError):
    """No stored record with the requested id."""
