from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from customer_sync.domain.models import CreateCustomerCommand, Customer


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    code: str
    message: str


class HealthResponse(BaseModel):
    status: str


class CustomerPayload(_CamelModel):
    first_name: str = Field(alias="firstName")
    last_name: str = Field(alias="lastName")
    email: str
    business_name: str | None = Field(default=None, alias="businessName")

    @classmethod
    def from_domain(cls, customer: Customer) -> CustomerPayload:
        return cls(
            first_name=customer.first_name,
            last_name=customer.last_name,
            email=customer.email,
            business_name=customer.business_name,
        )

    def to_domain(self) -> Customer:
        return Customer(
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            business_name=self.business_name,
        )


class CreateCustomerRequest(_CamelModel):
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")
    email: str = ""
    business_name: str | None = Field(default=None, alias="businessName")

    @classmethod
    def from_command(cls, command: CreateCustomerCommand) -> CreateCustomerRequest:
        return cls(
            first_name=command.first_name,
            last_name=command.last_name,
            email=command.email,
            business_name=command.business_name,
        )

    def to_wire(self) -> dict[str, object]:
        # businessName is omitted entirely rather than sent as null.
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


CUSTOMER_COLLECTION_ADAPTER: TypeAdapter[list[CustomerPayload]] = TypeAdapter(list[CustomerPayload])
