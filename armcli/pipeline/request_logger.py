import time

from knack.log import get_logger

REDACTED = "<redacted>"
_SENSITIVE_HEADERS = {"authorization"}


def _safe_headers(headers) -> dict:
    return {
        key: REDACTED if key.lower() in _SENSITIVE_HEADERS else value
        for key, value in headers.items()
    }


def create(logger=None):
    logger = logger or get_logger(__name__)

    def request_logger_interceptor(request, call_next):
        logger.info("Request: %s %s", request.method, request.url)
        logger.debug("Request headers: %s", _safe_headers(request.headers))
        start = time.perf_counter()
        response = call_next(request)
        logger.info(
            "Response: %s %s -> %s (%.3fs)",
            request.method,
            request.url,
            response.status_code,
            time.perf_counter() - start,
        )
        return response

    return request_logger_interceptor
