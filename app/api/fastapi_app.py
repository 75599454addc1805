from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.health import router as health_router
from app.api.identify.routes import router as identify_router
from app.api.payments.routes import router as payments_router
from app.core import ServiceError, configure_logging, log_warning

configure_logging()

app = FastAPI(
    title="LyricSnap API",
    version="0.1.0",
    description="Song identification (link or recording) and lyrics lookup.",
)

# Browser clients call the API directly from any origin
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    log_warning(f"{request.url.path} -> {exc.status_code} {exc.error}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


# Identification routes
app.include_router(identify_router, tags=["identify"])

# Payment routes
app.include_router(payments_router, prefix="/payments", tags=["payments"])

app.include_router(health_router, tags=["health"])
