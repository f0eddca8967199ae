import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from homelet.core.config import get_settings
from homelet.core.errors import HomeletError
from homelet.core.logging import configure_logging, get_logger
from homelet.db.base import Base
from homelet.db.session import engine
from homelet.api.routers import (
    auth as auth_router,
    users as users_router,
    properties as properties_router,
    bookings as bookings_router,
    favorites as favorites_router,
    landlord as landlord_router,
    admin as admin_router,
)

settings = get_settings()
configure_logging(settings.LOG_LEVEL)
logger = get_logger("app")

app = FastAPI(title=settings.PROJECT_NAME)

# ---------------------------
# CORS
# ---------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.BACKEND_CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------
# Domain errors -> JSON
# ---------------------------
@app.exception_handler(HomeletError)
async def homelet_error_handler(request: Request, exc: HomeletError):
    logger.info(
        "%s %s -> %s %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.code,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
    )


# ---------------------------
# Startup
# ---------------------------
@app.on_event("startup")
async def on_startup():
    if settings.CREATE_TABLES_ON_STARTUP:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)


# ---------------------------
# Routers
# ---------------------------
app.include_router(auth_router.router, prefix="/api/auth", tags=["auth"])
app.include_router(users_router.router, prefix="/api/users", tags=["users"])
app.include_router(properties_router.router, prefix="/api/properties", tags=["properties"])
app.include_router(bookings_router.router, prefix="/api/bookings", tags=["bookings"])
app.include_router(favorites_router.router, prefix="/api/favorites", tags=["favorites"])
app.include_router(landlord_router.router, prefix="/api/landlord", tags=["landlord"])
app.include_router(admin_router.router, prefix="/api/admin", tags=["admin"])


# ---------------------------
# Health check
# ---------------------------
@app.get("/ping")
async def ping():
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run("homelet.main:app", host="0.0.0.0", port=8000, reload=True)
