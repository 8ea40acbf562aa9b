# linkbuilder/main.py
"""
FastAPI application for the campaign link builder.
Serves reference data, form options and marketing placements under /api.
"""
import logging
from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from linkbuilder.core.config import APP_NAME, LOG_LEVEL, LOG_TO_FILE, ALLOWED_ORIGINS, JWT_SECRET_KEY
from linkbuilder.core.logging_config import setup_logging
from linkbuilder.db.session import init_db, test_db_connection
from linkbuilder.api.v1.router import api_router

setup_logging(app_name=APP_NAME, level=LOG_LEVEL, log_to_file=LOG_TO_FILE)

log = logging.getLogger("linkbuilder")
log.info("=" * 80)
log.info("🚀 Application starting")
log.info("=" * 80)

# Initialize database
try:
    init_db()
    if test_db_connection():
        log.info("✅ Database initialized")
except Exception as e:
    log.error(f"❌ Database error: {e}")

# FastAPI app
app = FastAPI(
    title="Link Builder - Campaign Tracking API",
    description="Build validated marketing placements and tracking links",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# ────────────────────────────────────────────
# CORS Configuration
# ────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_origin_regex=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    max_age=86400,
)

# Include API routes
app.include_router(api_router, prefix="/api")

# ────────────────────────────────────────────
# Public routes
# ────────────────────────────────────────────

@app.get("/healthz", tags=["System"])
def health():
    """Health check endpoint"""
    db_ok = test_db_connection()
    return {
        "status": "ok" if db_ok else "degraded",
        "database_ok": db_ok,
        "jwt_enabled": bool(JWT_SECRET_KEY),
    }

# ────────────────────────────────────────────
# Exception Handlers
# ────────────────────────────────────────────

@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions"""
    if exc.status_code >= 500:
        log.error(f"❌ {request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=exc.headers
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Malformed request bodies are a 400 keyed by field"""
    errors = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        errors.setdefault(".".join(loc) or "body", error.get("msg", "Invalid value"))
    log.info(f"⚠️ {request.method} {request.url.path} rejected: {sorted(errors)}")
    return JSONResponse(status_code=400, content={"detail": errors})


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8100)
