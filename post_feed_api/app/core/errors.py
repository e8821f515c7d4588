"""
Error taxonomy of the feed operations.

Operations raise these exceptions; the handler registered in
``main.create_app`` turns each into an HTTP response carrying
``status_code``.  ``PostNotFound`` yields an empty body, the others a
``{"detail": "<description>"}`` JSON body.
"""


class FeedError(Exception):
    """Base class for errors raised by the post operations."""

    status_code = 500

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail)
        self.detail = detail


class ClientInputError(FeedError):
    """The request body could not be read as a post."""

    status_code = 400


class ServerFault(FeedError):
    """Reading the request or encoding the response failed."""

    status_code = 500


class PostNotFound(FeedError):
    """No post exists with the requested identifier."""

    status_code = 404
