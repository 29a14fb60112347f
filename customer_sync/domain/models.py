from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


@dataclass(frozen=True)
class Customer:
    first_name: str
    last_name: str
    email: str
    business_name: str | None = None


CustomerCollection = tuple[Customer, ...]


@dataclass(frozen=True)
class ApiError:
    code: str
    message: str


@dataclass(frozen=True)
class CacheSnapshot:
    """Published view of one cache entry.

    ``data`` and ``error`` may both be present after a failed revalidation that
    had prior data; consumers decide which one to show first.
    """

    key: str
    data: CustomerCollection | None = None
    error: ApiError | None = None
    is_loading: bool = False
    is_validating: bool = False


class FormField(StrEnum):
    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    BUSINESS_NAME = "business_name"
    EMAIL = "email"


@dataclass(frozen=True)
class FormState:
    first_name: str = ""
    last_name: str = ""
    business_name: str = ""
    email: str = ""


@dataclass(frozen=True)
class FieldErrors:
    first_name: bool = False
    last_name: bool = False
    email: bool = False

    def any(self) -> bool:
        return self.first_name or self.last_name or self.email


@dataclass(frozen=True)
class CreateCustomerCommand:
    first_name: str
    last_name: str
    email: str
    business_name: str | None = None


@dataclass(frozen=True)
class SubmitResult:
    accepted: bool
    created: bool = False
    field_errors: FieldErrors = field(default_factory=FieldErrors)
    submit_error: str = ""


@dataclass(frozen=True)
class SubmissionSnapshot:
    state: str
    dialog_open: bool
    form: FormState
    field_errors: FieldErrors
    is_submitting: bool
    submit_error: str
