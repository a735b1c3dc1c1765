from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging

logger = logging.getLogger("access")


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        x_forwarded_for = request.headers.get("x-forwarded-for")
        if x_forwarded_for:
            ip = x_forwarded_for.split(",")[0].strip()
        else:
            ip = request.client.host if request.client else "-"

        path = request.url.path
        user_agent = request.headers.get("user-agent", "")

        # health probes without a user agent are noise
        if path == "/health" and not user_agent:
            return await call_next(request)

        response = await call_next(request)
        logger.info(
            f"🛰️ {request.method} {path} -> {response.status_code}",
            extra={"ip": ip, "path": path, "user_agent": user_agent},
        )
        return response
