class BoredApiError(Exception):
    """Base class for every failure raised by the activity client."""


class HttpError(BoredApiError):
    """The request or the body read failed below the JSON decoding boundary."""

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"HttpError({self.detail})"


class ApiError(BoredApiError):
    """The service answered with an explicit error message."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"ApiError({self.message})"


class BadResponse(BoredApiError):
    """The body parsed as JSON but does not have the activity shape."""

    def __init__(self, field: str, reason: str):
        super().__init__(field, reason)
        self.field = field
        self.reason = reason

    def __str__(self) -> str:
        return f"BadResponse({self.field}: {self.reason})"


class InvalidCriterionValue(BoredApiError, ValueError):
    """A criterion value was rejected before any request was sent."""

    def __init__(self, criterion: str, value: object, reason: str):
        super().__init__(criterion, value, reason)
        self.criterion = criterion
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        return f"InvalidCriterionValue({self.criterion}={self.value!r}: {self.reason})"
