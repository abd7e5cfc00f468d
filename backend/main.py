from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from init_db import init_database
from api import trips, clients
from config.settings import LOG_DIR, LOG_LEVEL
from constants import ServerConfig
from utils.logging_utils import set_logging_context, clear_logging_context
import logging
from logging.handlers import RotatingFileHandler
import sys
import uuid

# Configure logging with rotating file handler
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "booking.log"

log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)

console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)

root_logger = logging.getLogger()
root_logger.setLevel(LOG_LEVEL)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")

REQUEST_ID_HEADER = "X-Request-ID"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the schema on startup."""
    logger.info(f"Starting {ServerConfig.SERVICE_NAME} {ServerConfig.VERSION}")
    init_database()
    yield
    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServerConfig.SERVICE_NAME,
    description="Trips, clients and trip registrations",
    version=ServerConfig.VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logging_context(request: Request, call_next):
    """Tag every log record of a request with its request id, method and path."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers[REQUEST_ID_HEADER] = request_id
    return response

# Include API routers
app.include_router(trips.router, prefix="/api", tags=["trips"])
app.include_router(clients.router, prefix="/api", tags=["clients"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": ServerConfig.SERVICE_NAME,
        "version": ServerConfig.VERSION
    }


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {ServerConfig.SERVICE_NAME} on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
