"""Health check endpoints for load balancers and orchestration."""

import os
import time
from typing import Any, Dict

import psutil
from django.conf import settings
from django.core.cache import cache
from django.db import connections
from django.db.utils import OperationalError
from django.http import JsonResponse
from django.utils import timezone

APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
APP_START_TIME = time.time()

NO_CACHE = "no-cache, no-store, must-revalidate, max-age=0"


def _get_uptime() -> Dict[str, Any]:
    uptime_seconds = int(time.time() - APP_START_TIME)
    days, remainder = divmod(uptime_seconds, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, seconds = divmod(remainder, 60)

    parts = []
    if days > 0:
        parts.append(f"{days}d")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    parts.append(f"{seconds}s")

    return {"seconds": uptime_seconds, "formatted": " ".join(parts)}


def _get_process_metrics() -> Dict[str, Any]:
    """Memory and thread usage of the serving process."""
    process = psutil.Process()
    memory_info = process.memory_info()
    return {
        "memory": {
            "rss_mb": round(memory_info.rss / 1024 / 1024, 2),
            "percent": round(process.memory_percent(), 2),
        },
        "num_threads": process.num_threads(),
    }


def _check_database() -> Dict[str, Any]:
    start = time.perf_counter()
    try:
        with connections["default"].cursor() as cursor:
            cursor.execute("SELECT 1")
            row = cursor.fetchone()
    except OperationalError as e:
        return {"ok": False, "error": str(e)}
    return {
        "ok": row is not None and row[0] == 1,
        "latency_ms": round((time.perf_counter() - start) * 1000, 2),
    }


def _check_cache() -> Dict[str, Any]:
    start = time.perf_counter()
    cache_key = "_health_check"
    cache.set(cache_key, "ok", 10)
    ok = cache.get(cache_key) == "ok"
    cache.delete(cache_key)
    return {"ok": ok, "latency_ms": round((time.perf_counter() - start) * 1000, 2)}


def _no_cache(response: JsonResponse) -> JsonResponse:
    # Stale health responses cause false failures upstream.
    response["Cache-Control"] = NO_CACHE
    response["Pragma"] = "no-cache"
    return response


def health_check(request):
    """
    Status with database and cache checks plus process metrics.
    Returns 503 when either check fails.
    """
    checks = {"database": _check_database(), "cache": _check_cache()}
    healthy = all(check["ok"] for check in checks.values())

    response = JsonResponse(
        {
            "status": "healthy" if healthy else "degraded",
            "version": APP_VERSION,
            "environment": "production" if settings.IS_PRODUCTION else "development",
            "timestamp": timezone.now().isoformat(),
            "uptime": _get_uptime(),
            "checks": checks,
            "metrics": _get_process_metrics(),
        },
        status=200 if healthy else 503,
    )
    return _no_cache(response)


def liveness_check(request):
    """Responsiveness only; never touches the database."""
    start = time.perf_counter()
    response_data = {
        "status": "alive",
        "timestamp": timezone.now().isoformat(),
        "uptime": _get_uptime(),
        "version": APP_VERSION,
    }
    response_data["response_time_ms"] = round((time.perf_counter() - start) * 1000, 2)
    return _no_cache(JsonResponse(response_data))


def readiness_check(request):
    database = _check_database()
    if not database["ok"]:
        return _no_cache(JsonResponse({"status": "not_ready", "database": "down"}, status=503))
    return _no_cache(JsonResponse({"status": "ready", "database": "up"}))
