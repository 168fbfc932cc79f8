class FeedbackAppError(Exception):
    """Base class for errors raised by the feedback services."""


class NotFound(FeedbackAppError):
    pass


class ClassificationFailed(FeedbackAppError):
    """The remote sentiment classifier could not produce an answer."""


class RateLimited(ClassificationFailed):
    pass


class PaymentRequired(ClassificationFailed):
    pass
