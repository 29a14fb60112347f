from __future__ import annotations

from customer_sync.domain.models import ApiError


class DomainError(Exception):
    pass


class DomainValidationError(DomainError):
    pass


class DomainInvariantError(DomainError):
    pass


class DuplicateCustomerError(DomainInvariantError):
    pass


class RemoteError(DomainError):
    def __init__(self, api_error: ApiError, *, status_code: int | None = None) -> None:
        super().__init__(api_error.message)
        self.api_error = api_error
        self.status_code = status_code


class RemoteReadError(RemoteError):
    pass


class RemoteWriteError(RemoteError):
    pass
