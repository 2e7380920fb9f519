import logging

from fastapi import FastAPI

from .api.exceptions import register_exception_handlers
from .api.routes import interest_router, router as accounts_router
from .core.config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title=settings.app_name)

app.include_router(accounts_router)
app.include_router(interest_router)
register_exception_handlers(app)

@app.get("/health")
def read_health() -> dict[str, str]:
    return {"status": "ok"}
