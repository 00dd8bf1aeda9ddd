# ABOUTME: Exception raised when a forecast response cannot be turned into daily records.
# ABOUTME: Non-OK status codes are not errors and never raise this.


class MalformedResponse(ValueError):
    """The response is not valid JSON or is missing a field required after the status check."""
