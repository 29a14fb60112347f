from __future__ import annotations

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from customer_sync.api.handlers.customers import create_customer_handler, list_customers_handler
from customer_sync.api.handlers.deps import ApiDeps
from customer_sync.api.schemas import CreateCustomerRequest, CustomerPayload, ErrorResponse, HealthResponse
from customer_sync.domain.contracts import CUSTOMERS_COLLECTION_PATH
from customer_sync.domain.errors import DomainValidationError, DuplicateCustomerError
from customer_sync.repositories.stub import InMemoryCustomerRepository


def _error(status_code: int, *, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(code=code, message=message).model_dump(),
    )


def build_app(
    run_id: str,
    api_deps: ApiDeps | None = None,
    collection_path: str = CUSTOMERS_COLLECTION_PATH,
) -> FastAPI:
    logger = logging.getLogger("runtime")
    deps = api_deps or ApiDeps(repository=InMemoryCustomerRepository())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        del app
        logger.info("stub service started", extra={"service": "api", "run_id": run_id})
        yield
        logger.info("stub service stopped", extra={"service": "api", "run_id": run_id})

    app = FastAPI(title="customer-sync-stub", version="0.1.0", lifespan=lifespan)

    @app.exception_handler(DomainValidationError)
    async def _on_validation_error(request: Request, exc: DomainValidationError) -> JSONResponse:
        del request
        return _error(422, code="validation_error", message=str(exc))

    @app.exception_handler(RequestValidationError)
    async def _on_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        del request, exc
        return _error(422, code="validation_error", message="request body must be a customer object")

    @app.exception_handler(DuplicateCustomerError)
    async def _on_duplicate_customer(request: Request, exc: DuplicateCustomerError) -> JSONResponse:
        del request
        return _error(409, code="duplicate_email", message=str(exc))

    @app.get("/health", response_model=HealthResponse, tags=["System"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.get(
        collection_path,
        response_model=list[CustomerPayload],
        response_model_by_alias=True,
        response_model_exclude_none=True,
        tags=["Customers"],
    )
    async def list_customers() -> list[CustomerPayload]:
        return await list_customers_handler(api_deps=deps)

    @app.post(
        collection_path,
        status_code=201,
        response_model=CustomerPayload,
        response_model_by_alias=True,
        response_model_exclude_none=True,
        responses={409: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
        tags=["Customers"],
    )
    async def create_customer(request: CreateCustomerRequest) -> CustomerPayload:
        return await create_customer_handler(request=request, api_deps=deps)

    return app
