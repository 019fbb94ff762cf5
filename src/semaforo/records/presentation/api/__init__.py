"""
API package.
"""
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import sessionmaker

from .routes import traffic, predictions
from .routes.records import envelope
from ...infrastructure import traffic_store, prediction_store, ToleranceMatcher
from ....common.exceptions import PersistenceError, ValidationError

def init_stores(session_factory: sessionmaker):
    """Wires both stores and the matcher to one session factory."""
    traffic.init_store(traffic_store(session_factory))
    predictions.init_store(prediction_store(session_factory), ToleranceMatcher(session_factory))

async def handle_validation_error(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={**envelope("Invalid request", success=False), "error": str(exc)})

async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={**envelope("Invalid request body", success=False), "error": str(exc)})

async def handle_persistence_error(request: Request, exc: PersistenceError):
    return JSONResponse(status_code=500, content={**envelope("Storage error", success=False), "error": str(exc)})

def create_app(session_factory: Optional[sessionmaker] = None) -> FastAPI:
    app = FastAPI(title="Semaforo API")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(PersistenceError, handle_persistence_error)

    app.include_router(traffic.router, prefix="/api/traffics", tags=["traffic"])
    app.include_router(predictions.router, prefix="/api/predictions", tags=["predictions"])

    @app.get("/health")
    def health():
        return {"status": "OK"}

    if session_factory is not None:
        init_stores(session_factory)

    return app
