"""Exception hierarchy shared by the service, API and CLI layers."""

GENERIC_GENERATION_FAILURE = "Failed to generate quiz questions. Please try again."
MALFORMED_OUTPUT_MESSAGE = "The model returned malformed output. Please try again."
MISSING_CREDENTIAL_MESSAGE = "Generation API key is not configured"


class QuizcraftError(Exception):
    """Base class for errors that carry a user-facing message."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(QuizcraftError):
    """A required setting (usually the model credential) is missing."""

    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE):
        super().__init__(message)


class GenerationError(QuizcraftError):
    """The external model call failed or returned nothing usable."""

    def __init__(self, message: str = GENERIC_GENERATION_FAILURE):
        super().__init__(message)


class MalformedOutputError(GenerationError):
    """The model answered, but not with the JSON shape that was asked for."""

    def __init__(self, message: str = MALFORMED_OUTPUT_MESSAGE):
        super().__init__(message)


class RequestValidationFailed(QuizcraftError):
    status_code = 400


class IncompleteSubmissionError(QuizcraftError):
    """Not every question has an answer yet."""

    status_code = 400

    def __init__(self, answered: int, total: int):
        super().__init__(
            f"All questions must be answered before submitting ({answered} of {total} answered)"
        )
        self.answered = answered
        self.total = total


class AuthenticationRequired(QuizcraftError):
    status_code = 401

    def __init__(self, message: str = "Sign in required"):
        super().__init__(message)


class PermissionDeniedError(QuizcraftError):
    status_code = 403

    def __init__(self, message: str = "You do not own this quiz"):
        super().__init__(message)


class QuizNotFoundError(QuizcraftError):
    status_code = 404

    def __init__(self, quiz_id: str):
        super().__init__(f"Quiz {quiz_id} not found")
        self.quiz_id = quiz_id
