import uuid
import time
from flask import g, request
from loguru import logger

REQUEST_ID_HEADER = "X-Request-ID"


def start_request():
    g.request_id = uuid.uuid4().hex[:12]
    g.start_time = time.time()


def end_request(response):
    start_time = getattr(g, "start_time", None)
    duration_ms = int((time.time() - start_time) * 1000) if start_time else 0
    request_id = getattr(g, "request_id", "unknown")

    logger.info(
        "[REQUEST] {} {} {} {}ms id={}",
        request.method,
        request.path,
        response.status_code,
        duration_ms,
        request_id,
    )
    response.headers[REQUEST_ID_HEADER] = request_id
    return response
