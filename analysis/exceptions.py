"""
Exceptions raised by the analysis engine.

Every failure is terminal for the call that raised it; nothing here is
retried or masked inside the engine.
"""


class AnalysisError(Exception):
    """
    Base class for analysis engine failures.
    """


class NotFoundError(AnalysisError):
    """
    A referenced record does not exist.
    """


class ApplicationNotFoundError(NotFoundError):
    def __init__(self, application_id):
        self.application_id = application_id
        super().__init__(f"Application {application_id} not found.")


class ProjectNotFoundError(NotFoundError):
    def __init__(self, project_id):
        self.project_id = project_id
        super().__init__(f"Project {project_id} not found.")


class AnalysisNotFoundError(NotFoundError):
    def __init__(self, application_id):
        self.application_id = application_id
        super().__init__(
            f"Analysis result not found for application {application_id}."
        )


class ModelResponseError(AnalysisError):
    """
    The model's output broke its textual contract.

    ``raw_response`` holds the offending text for diagnosis.
    """

    def __init__(self, message: str, raw_response: str):
        self.raw_response = raw_response
        super().__init__(f"{message} Response: {raw_response!r}")


class MalformedResponseError(ModelResponseError):
    def __init__(self, raw_response: str):
        super().__init__(
            "Model response is not in '<score>|<reason>' format.", raw_response
        )


class MalformedScoreError(ModelResponseError):
    def __init__(self, score_text: str, raw_response: str):
        self.score_text = score_text
        super().__init__(f"Score {score_text!r} is not a number.", raw_response)


class ScoreOutOfRangeError(ModelResponseError):
    def __init__(self, score, raw_response: str):
        self.score = score
        super().__init__(
            f"Score must be between 0 and 100, got {score}.", raw_response
        )


class EmptyReasonError(ModelResponseError):
    def __init__(self, raw_response: str):
        super().__init__("Compatibility reason is empty.", raw_response)


class InvalidRoleAssignmentError(ModelResponseError):
    def __init__(self, line: str, raw_response: str):
        self.line = line
        super().__init__(f"Invalid role assignment line {line!r}.", raw_response)


class TeamNotCompleteError(AnalysisError):
    """
    The approved roster does not match the project's team size.
    """

    def __init__(self, required: int, actual: int):
        self.required = required
        self.actual = actual
        super().__init__(
            "The number of approved applicants does not match the project team size. "
            f"Required: {required}, approved: {actual}."
        )


class AnalysisFailedError(AnalysisError):
    """
    The model capability itself failed (transport, provider or configuration).
    """
