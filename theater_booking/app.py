import asyncio
from contextlib import asynccontextmanager, suppress
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger

from theater_booking.api.v1 import routes_booking, routes_health, routes_movie, routes_theater
from theater_booking.core.config import settings
from theater_booking.core.context import BookingContext
from theater_booking.core.exceptions import BookingError, InvalidInputError
from theater_booking.core.logging import setup_logging
from theater_booking.workers.booking_worker import booking_worker
from theater_booking.workers.lifecycle_ticker import LifecycleTicker


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    context: BookingContext = app.state.context
    tasks = [
        asyncio.create_task(booking_worker(context)),
        asyncio.create_task(LifecycleTicker(context, settings.LIFECYCLE_TICK_SECONDS).run()),
    ]
    logger.info(f"{settings.PROJECT_NAME} started ({settings.ENV})")
    yield
    for task in tasks:
        task.cancel()
    for task in tasks:
        with suppress(asyncio.CancelledError):
            await task
    logger.info(f"{settings.PROJECT_NAME} stopped")


def create_app(context: BookingContext | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        description=settings.PROJECT_DESCRIPTION,
        lifespan=lifespan
    )
    app.state.context = context or BookingContext()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(
        routes_health.router,
        prefix=settings.API_V1_PREFIX
    )
    app.include_router(
        routes_theater.router,
        prefix=settings.API_V1_PREFIX
    )
    app.include_router(
        routes_movie.router,
        prefix=settings.API_V1_PREFIX
    )
    app.include_router(
        routes_booking.router,
        prefix=settings.API_V1_PREFIX
    )

    @app.exception_handler(BookingError)
    async def booking_error_handler(request, ex: BookingError):
        return JSONResponse(status_code=ex.status_code, content=ex.to_dict())

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, ex: RequestValidationError):
        first = ex.errors()[0]
        field = ".".join(str(part) for part in first["loc"] if part != "body")
        message = f"{field}: {first['msg']}" if field else first["msg"]
        invalid = InvalidInputError(f"Invalid input data: {message}")
        return JSONResponse(status_code=invalid.status_code, content=invalid.to_dict())

    @app.get("/")
    async def root():
        return {"message": "Theater booking backend is running"}
    return app


app = create_app()
