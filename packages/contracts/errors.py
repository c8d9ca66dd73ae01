from __future__ import annotations


class ImageBase64Error(Exception):
    """Base class for failures raised by encode/decode.

    Local filesystem failures are not wrapped: the built-in ``OSError`` is
    forwarded unchanged.
    """


class InvalidInputError(ImageBase64Error, ValueError):
    pass


class NetworkError(ImageBase64Error):
    pass


class EmptyResponseError(ImageBase64Error):
    def __init__(self, message: str = "Error retrieving image - Empty Body!") -> None:
        super().__init__(message)


class HTTPStatusError(ImageBase64Error):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"Error retrieving image - Status Code {status_code}")
        self.status_code = status_code
