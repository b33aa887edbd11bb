# picstash/core/logging_middleware.py
import time

from fastapi import Request
from loguru import logger


def describe(request: Request) -> str:
    """METHOD path?query"""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{request.method} {target}"


async def log_requests(request: Request, call_next):
    """Log each request with its status and duration"""
    target = describe(request)
    started = time.perf_counter()

    with logger.contextualize(client=request.client.host if request.client else "-"):
        logger.info(f"-> {target}")
        try:
            response = await call_next(request)
        except Exception:
            elapsed = (time.perf_counter() - started) * 1000
            logger.exception(f"!! {target} failed after {elapsed:.1f}ms")
            raise

        elapsed = (time.perf_counter() - started) * 1000
        level = "WARNING" if response.status_code >= 400 else "INFO"
        logger.log(level, f"<- {target} {response.status_code} ({elapsed:.1f}ms)")
        return response
