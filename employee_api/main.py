import logging

from fastapi import FastAPI

from employee_api.core.logging import setup_logging

setup_logging()

from employee_api import __version__
from employee_api.api.error_handlers import register_error_handlers
from employee_api.api.middleware.cors import setup_cors
from employee_api.api.middleware.request_id import RequestIdMiddleware
from employee_api.api.routes import employees, health
from employee_api.core.config import settings

logger = logging.getLogger(__name__)

try:
    settings.validate_secrets()
except ValueError as e:
    logger.critical("Settings validation failed: %s", e)
    raise SystemExit(f"FATAL: {e}") from e


app = FastAPI(
    title="Employee Records API",
    version=__version__,
)

register_error_handlers(app)
setup_cors(app)
app.add_middleware(RequestIdMiddleware)

app.include_router(health.router, prefix="/api")
app.include_router(employees.router, prefix="/api")
