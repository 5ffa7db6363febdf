import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from intercom_relay.api.router import api_router
from intercom_relay.api.routes.pages import router as pages_router
from intercom_relay.core.config import get_settings
from intercom_relay.core.errors import register_exception_handlers
from intercom_relay.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

if not settings.intercom_access_token:
    logger.warning("INTERCOM_ACCESS_TOKEN is not set; Intercom will reject relayed requests")

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    debug=settings.app_debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(api_router, prefix=settings.api_prefix)
app.include_router(pages_router)
