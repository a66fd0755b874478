from contextlib import asynccontextmanager
import logging

from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from medilink.core.config import get_settings
from medilink.core.errors import AppError, InternalError
from medilink.database import create_db_and_tables

# Import models so SQLModel metadata is populated before create_all()
from medilink.models import user as _user_models  # noqa: F401
from medilink.models import page as _page_models  # noqa: F401
from medilink.models import medical as _medical_models  # noqa: F401
from medilink.models import product as _product_models  # noqa: F401
from medilink.models import order as _order_models  # noqa: F401
from medilink.models import notification as _notification_models  # noqa: F401
from medilink.models import address as _address_models  # noqa: F401


# Routers
from medilink.routers.pages import router as pages_router
from medilink.routers.medicines import router as medicines_router
from medilink.routers.allergies import router as allergies_router
from medilink.routers.diagnoses import router as diagnoses_router
from medilink.routers.emergency_contacts import router as contacts_router
from medilink.routers.notifications import router as notifications_router
from medilink.routers.users import router as users_router
from medilink.routers.products import router as products_router
from medilink.routers.orders import router as orders_router
from medilink.routers.admin_stats import router as admin_stats_router
from medilink.routers.admin_users import router as admin_users_router
from medilink.routers.addresses import router as addresses_router

settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("medilink")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
      - Verify DB connectivity and create tables.
    """
    logger.info("Startup: connecting to database...")
    try:
        create_db_and_tables()
        logger.info("Startup: DB connection OK, tables verified.")
    except Exception as e:
        logger.error(f"Startup: DB connection FAILED: {e}")
        raise
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


# --- Error responses: always {"error": "<message>"} ---


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
        return _error_response(exc.status_code, InternalError.default_message)
    return _error_response(exc.status_code, exc.message)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    if not errors:
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if loc:
        message = f"{loc}: {message}"
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return _error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        InternalError.default_message,
    )


# --- CORS configuration ---

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API prefix, e.g. /api
app.include_router(pages_router, prefix=settings.API_PREFIX)
app.include_router(medicines_router, prefix=settings.API_PREFIX)
app.include_router(allergies_router, prefix=settings.API_PREFIX)
app.include_router(diagnoses_router, prefix=settings.API_PREFIX)
app.include_router(contacts_router, prefix=settings.API_PREFIX)
app.include_router(notifications_router, prefix=settings.API_PREFIX)
app.include_router(users_router, prefix=settings.API_PREFIX)
app.include_router(products_router, prefix=settings.API_PREFIX)
app.include_router(orders_router, prefix=settings.API_PREFIX)
app.include_router(admin_stats_router, prefix=settings.API_PREFIX)
app.include_router(admin_users_router, prefix=settings.API_PREFIX)
app.include_router(addresses_router, prefix=settings.API_PREFIX)


@app.get("/")
def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "medilink-backend"}
