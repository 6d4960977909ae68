"""
Monitoring and Observability Module
Prometheus metrics for backend calls and session changes, plus logging setup
"""

from prometheus_client import Counter, Histogram
import logging
import re
from typing import Optional

# ============================================================================
# PROMETHEUS METRICS
# ============================================================================

api_requests_total = Counter(
    'homematch_api_requests_total',
    'Total backend API requests issued by the client',
    ['method', 'endpoint', 'outcome']  # ok, auth_expired, request_failed
)

api_request_duration_seconds = Histogram(
    'homematch_api_request_duration_seconds',
    'Backend API request duration in seconds',
    ['method', 'endpoint'],
    buckets=(0.01, 0.025, 0.05, 0.075, 0.1, 0.25, 0.5, 0.75, 1.0, 2.5, 5.0, 7.5, 10.0)
)

session_transitions_total = Counter(
    'homematch_session_transitions_total',
    'Session state transitions',
    ['state']
)

_ID_SEGMENT = re.compile(r'/[^/?]*\d[^/?]*')


def clean_endpoint(path: str) -> str:
    """
    Collapse id-like path segments so metric labels stay bounded

    /properties/123/compatibility/u1?x=1 -> /properties/{id}/compatibility/{id}
    """
    path = path.split('?', 1)[0]
    return _ID_SEGMENT.sub('/{id}', path) or '/'


class MetricsTracker:
    """Helper class for tracking custom metrics"""

    @staticmethod
    def track_request(method: str, endpoint: str, outcome: str, duration: float):
        label = clean_endpoint(endpoint)
        api_requests_total.labels(method=method, endpoint=label, outcome=outcome).inc()
        api_request_duration_seconds.labels(method=method, endpoint=label).observe(duration)

    @staticmethod
    def track_session_transition(state: str):
        session_transitions_total.labels(state=state).inc()


# ============================================================================
# LOGGING
# ============================================================================

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
    '"logger": "%(name)s", "message": "%(message)s"}'
)
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None, json_format: Optional[bool] = None) -> logging.Logger:
    """
    Configure the package logger

    Args:
        level: Log level name, defaults to settings.LOG_LEVEL
        json_format: Use the structured JSON line format, defaults to settings.LOG_JSON

    Returns:
        The configured "homematch" logger
    """
    from homematch.core.config import settings

    logger = logging.getLogger("homematch")
    if not logger.handlers:
        handler = logging.StreamHandler()
        use_json = settings.LOG_JSON if json_format is None else json_format
        handler.setFormatter(logging.Formatter(JSON_FORMAT if use_json else TEXT_FORMAT))
        logger.addHandler(handler)
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    return logger
