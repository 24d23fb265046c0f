"""
InvoiceDesk - Gunicorn WSGI Server Configuration

Thread-based workers sized from the CPU count, request size limits,
worker restart cycles and stdout logging.
"""

import multiprocessing
import os
import logging

IS_PRODUCTION = os.getenv("PRODUCTION") == "true"

logging.basicConfig(
    level=logging.INFO if IS_PRODUCTION else logging.DEBUG,
    format='[%(asctime)s] %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# =============================================================================
# SERVER BINDING
# =============================================================================

PORT = int(os.getenv("PORT", 8000))
bind = [f"0.0.0.0:{PORT}"]

wsgi_app = "invoicedesk.wsgi:application"


# =============================================================================
# WORKERS
# =============================================================================

def calculate_workers():
    cpu_count = multiprocessing.cpu_count()
    return min((cpu_count * 2) + 1, 9)


workers = int(os.getenv("WEB_CONCURRENCY", calculate_workers()))
worker_class = "gthread"
threads = int(os.getenv("GUNICORN_THREADS", 4))

# Restart workers after N requests; jitter spreads the restarts out.
max_requests = int(os.getenv("GUNICORN_MAX_REQUESTS", 1000))
max_requests_jitter = int(os.getenv("GUNICORN_MAX_REQUESTS_JITTER", 100))


# =============================================================================
# TIMEOUTS & LIMITS
# =============================================================================

timeout = 60
graceful_timeout = int(os.getenv("GUNICORN_GRACEFUL_TIMEOUT", 10))
keepalive = 5

limit_request_line = 8190
limit_request_fields = 100
limit_request_field_size = 8190


# =============================================================================
# PROXY
# =============================================================================

forwarded_allow_ips = os.getenv("FORWARDED_ALLOW_IPS", "*")

if IS_PRODUCTION:
    secure_scheme_headers = {
        "X-FORWARDED-PROTO": "https",
    }


# =============================================================================
# LOGGING
# =============================================================================

accesslog = "-"
errorlog = "-"
loglevel = "info" if IS_PRODUCTION else "debug"
capture_output = True

access_log_format = (
    '%(h)s %(l)s %(u)s %(t)s "%(r)s" %(s)s %(b)s '
    '"%(f)s" "%(a)s" request_id=%({x-request-id}o)s response_time=%(D)s_us'
)

proc_name = "invoicedesk"


# =============================================================================
# HOOKS
# =============================================================================

def when_ready(server):
    logger.info(f"Gunicorn ready at {server.address} with {workers} workers")
    logger.info("GET /health/ready/ for readiness, /health/live/ for liveness")


def on_exit(server):
    logger.info("Gunicorn shutting down")
