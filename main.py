from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.core.config import settings
from app.core.database import engine, Base
from app.core.exceptions import AppError
from app.api.routes import auth, attendance, tasks
from app import models  # noqa: F401  (registers tables on Base.metadata)
import logging
import time

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task board and daily attendance API"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration outside production."""
    started = time.perf_counter()
    response = await call_next(request)
    if not settings.is_production:
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} {elapsed_ms:.0f}ms")
    return response


# Error handlers
@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        message = f"{field}: {first.get('msg')}" if field else first.get("msg", message)
    return JSONResponse(status_code=400, content={"message": message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    if settings.is_production:
        logger.error(f"Unhandled error on {request.method} {request.url.path}: {type(exc).__name__}")
    else:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "Server error"})


# Include routers
app.include_router(auth.router, prefix="/api")
app.include_router(attendance.router, prefix="/api")
app.include_router(tasks.router, prefix="/api")


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create tables; a database that cannot be reached aborts startup."""
    logger.info("Starting up...")
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        logger.critical(f"Database connection failed: {e}")
        raise
    logger.info("Application started")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"ok": True, "service": settings.APP_NAME}


@app.get("/api/health")
async def health_check():
    """Health check endpoint."""
    return {
        "ok": True,
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=not settings.is_production)
