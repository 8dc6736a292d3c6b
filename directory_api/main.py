import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .config import SETTINGS
from .db import SessionLocal, init_db
from .errors import register_error_handlers
from .logging_setup import configure_logging
from .resources import build_registry
from .routers import departments, employees, debug
from .utils.seed import seed_store

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: connect store -> seed -> register resources -> serve
    configure_logging(SETTINGS["logging"]["level"])
    init_db()
    db = SessionLocal()
    try:
        seed_store(db, SETTINGS)
    finally:
        db.close()
    app.state.resources = build_registry(SETTINGS)
    logger.info("Employee directory ready")
    yield

# Initialize FastAPI application
app = FastAPI(title="Employee Directory API", version="1.0.0", lifespan=lifespan)
register_error_handlers(app)

# Register routers
namespace = SETTINGS["api"]["namespace"]
app.include_router(departments.router, prefix=namespace)
app.include_router(employees.router, prefix=namespace)
app.include_router(debug.router)

# Health check endpoint
@app.get("/health")
def health():
    return {"status": "ok"}
