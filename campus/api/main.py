from fastapi import FastAPI

from campus import __version__
from campus.common.logger import setup_from_settings
from campus.core.config import get_settings
from campus.core.rbac import get_registry
from campus.api.routers import roles

settings = get_settings()
setup_from_settings(settings)

# Build the role table at startup so a bad table fails fast
get_registry()

app = FastAPI(
    title=settings.app_name,
    description="Campus administration authorization API",
    version=__version__,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.include_router(roles.router, prefix="/api")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": __version__}
