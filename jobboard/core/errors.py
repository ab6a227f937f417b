"""
Error taxonomy shared by the stores and the HTTP layer.

Each error carries the HTTP status the API answers with; anything that is
not a JobboardError is treated as an internal failure (500).
"""

from __future__ import annotations


class JobboardError(Exception):
    status_code = 500

    def __init__(self, message: str = "", status_code: int | None = None):
        self.message = message or self.default_message()
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    @classmethod
    def default_message(cls) -> str:
        return "Internal Server Error"


class BadRequestError(JobboardError):
    status_code = 400

    @classmethod
    def default_message(cls) -> str:
        return "Bad Request"


class EmptyUpdateError(BadRequestError):
    @classmethod
    def default_message(cls) -> str:
        return "No data"


class DuplicateError(BadRequestError):
    pass


class ReferenceNotFoundError(BadRequestError):
    pass


class EmptyResultError(BadRequestError):
    @classmethod
    def default_message(cls) -> str:
        return "No results"


class UnauthorizedError(JobboardError):
    status_code = 401

    @classmethod
    def default_message(cls) -> str:
        return "Unauthorized"


class NotFoundError(JobboardError):
    status_code = 404

    @classmethod
    def default_message(cls) -> str:
        return "Not Found"
