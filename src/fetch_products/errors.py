"""Errors raised by the product API client."""


class RemoteServiceError(Exception):
    """The product API returned a non-success response or could not be reached.

    ``status_code`` is None for transport failures (timeouts, refused
    connections, undecodable bodies).
    """

    def __init__(self, message: str, status_code: int | None = None):
        self.status_code = status_code
        self.message = message
        if status_code is None:
            super().__init__(f"Product API error: {message}")
        else:
            super().__init__(f"Product API error: {status_code} {message}")
