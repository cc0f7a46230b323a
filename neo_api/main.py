from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .platform.lifespan import app_lifespan
from .platform.errors import register_exception_handlers
from .routes.accounts import router as accounts_router
from .routes.email import router as email_router
from .routes.exercise_gif import router as exercise_gif_router
from .routes.summary import router as summary_router
from .security import verify_api_key

app: FastAPI = FastAPI(
    title="NEO Functions",
    version="1.0.0",
    description="Server-side helpers for the NEO fitness app",
    lifespan=app_lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=[
        "authorization",
        "x-client-info",
        "apikey",
        "content-type",
        "x-api-key",
    ],
)
register_exception_handlers(app)


@app.api_route("/", methods=["GET", "HEAD"], include_in_schema=False)
@app.api_route("/healthz", methods=["GET", "HEAD"], include_in_schema=False)
async def healthz() -> dict[str, str]:
    """Lightweight endpoint used for health checks."""
    return {"status": "ok"}


for router in (
    exercise_gif_router,
    summary_router,
    email_router,
    accounts_router,
):
    app.include_router(
        router, prefix="/functions", dependencies=[Depends(verify_api_key)]
    )
