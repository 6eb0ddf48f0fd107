# chatroom_server/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from tortoise.exceptions import BaseORMException

from chatroom_server.config import settings
from chatroom_server.core.db import open_store
from chatroom_server.core.errors import AppError, AuthError, StoreError, ValidationError
from chatroom_server.api.routers import chatrooms, users

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS for the browser client
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    # One store handle per process, shared by every request
    app.state.store = await open_store(settings.database_url)

@app.on_event("shutdown")
async def on_shutdown():
    store = getattr(app.state, "store", None)
    if store is not None:
        await store.close()
        app.state.store = None

# ===== Error mapping =====
def _error_response(exc: AppError) -> JSONResponse:
    headers = {"WWW-Authenticate": "Basic"} if isinstance(exc, AuthError) else None
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()}, headers=headers)

@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return _error_response(exc)

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Framework and static-file errors (unknown paths, wrong methods) share the app's error body
    codes = {404: "NOT_FOUND", 405: "METHOD_NOT_ALLOWED"}
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": {"code": codes.get(exc.status_code, f"HTTP_{exc.status_code}"), "message": message}},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Malformed or incomplete bodies are client errors (400), not FastAPI's default 422
    problems = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        problems.append(f"{loc}: {err.get('msg')}" if loc else str(err.get("msg")))
    return _error_response(ValidationError("; ".join(problems) or "Invalid request"))

@app.exception_handler(BaseORMException)
async def store_error_handler(request: Request, exc: BaseORMException):
    logger.exception("[store] %s %s failed", request.method, request.url.path, exc_info=exc)
    return _error_response(StoreError("Store operation failed"))

# REST
app.include_router(chatrooms.router)
app.include_router(users.router)

@app.get("/healthz")
def healthz():
    return {"ok": True}

# Client assets; registered last so the API routes above take precedence
app.mount("/", StaticFiles(directory=settings.static_dir, html=True, check_dir=False), name="static")

def run() -> None:
    """Console entry point: serve the app with uvicorn using the configured host and port."""
    import uvicorn

    uvicorn.run(
        "chatroom_server.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )

if __name__ == "__main__":
    run()
