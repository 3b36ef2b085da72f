class QuizError(Exception):
    """Base exception for the quiz server."""


class MissingParameterError(QuizError):
    """Raised when a required command parameter is absent."""


class NotANumberError(QuizError):
    """Raised when a parameter that must be an integer is not one."""


class NotFoundError(QuizError):
    """Raised when a quiz id does not exist in the store."""


class QuizValidationError(QuizError):
    """Raised when a quiz fails store validation.

    Carries one message per violated rule.
    """

    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__('; '.join(self.messages))


class StoreError(QuizError):
    """Raised when the underlying database fails."""


class TransportError(QuizError):
    """Raised when a session's connection goes away while it is in use."""
