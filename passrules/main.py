from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from passrules.api import rules
from passrules.core.config import settings
from passrules.core.replacement.prefix_dictionary import PrefixDictionary
from passrules.middlewares.access_logger import AccessLoggingMiddleware
from passrules.middlewares.logging import setup_logging
from passrules.utils.exception_handlers import (
    generic_exception_handler,
    http_exception_handler,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # load the word-prefix dictionary before the first request needs it
    prefixes = PrefixDictionary.shared()
    logging.getLogger(__name__).info(
        f"✅ Prefix dictionary ready ({len(prefixes)} mappings)"
    )
    yield


# ✅ SETUP LOGGING FIRST
setup_logging()

app = FastAPI(
    title="Password Rules API",
    description="Derive candidate passwords from sentences with composable rules",
    version="1.0.0",
    lifespan=lifespan,
    debug=(not settings.ENV == "production"),
)


# ===============
# Middlewares
# ===============
app.add_middleware(AccessLoggingMiddleware)


# ===============
# Routers
# ===============
app.include_router(rules.router)


# ===============
# Health Checks
# ===============
@app.get("/health")
def health():
    return {"status": "ok"}


# ===============
# Global Error Handlers
# ===============
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)
