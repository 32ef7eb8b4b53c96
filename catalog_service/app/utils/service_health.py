"""
Catalog Service Health Check Utilities
======================================

Health check functionality for the Catalog service. Checks are coroutines so
they can read the in-memory stores under their locks.
"""

import time
from typing import Any, Awaitable, Callable, Dict

from ..core.storage import CatalogStorageManager

HealthCheck = Callable[[], Awaitable[Dict[str, Any]]]


class CatalogServiceHealthChecker:
    """Catalog Service specific health checker"""

    def __init__(self, service_name: str = "catalog_service") -> None:
        self.service_name = service_name
        self.checks: Dict[str, HealthCheck] = {}
        self.start_time = time.time()

    def add_check(self, name: str, check_func: HealthCheck) -> None:
        """Add a health check coroutine function"""
        self.checks[name] = check_func

    async def run_checks(self) -> Dict[str, Any]:
        """Run all health checks and aggregate their status"""
        results = {}
        check_start_time = time.time()

        for name, check_func in self.checks.items():
            individual_start = time.time()
            try:
                result = await check_func()
                result["duration_ms"] = round(
                    (time.time() - individual_start) * 1000, 2
                )
                results[name] = result
            except Exception as e:
                results[name] = {
                    "status": "error",
                    "error": str(e),
                    "duration_ms": round((time.time() - individual_start) * 1000, 2),
                }

        total_time = (time.time() - check_start_time) * 1000
        uptime = time.time() - self.start_time

        return {
            "service": self.service_name,
            "status": "healthy"
            if all(r.get("status") == "healthy" for r in results.values())
            else "unhealthy",
            "checks": results,
            "total_duration_ms": round(total_time, 2),
            "uptime_seconds": round(uptime, 2),
            "timestamp": time.time(),
        }

    def add_catalog_checks(self, storage: CatalogStorageManager) -> None:
        """Add Catalog Service specific health checks"""

        async def basic_check() -> Dict[str, Any]:
            return {
                "status": "healthy",
                "message": "Catalog Service is running",
                "component": "core",
            }

        async def storage_check() -> Dict[str, Any]:
            return {
                "status": "healthy",
                "message": "In-memory stores accessible",
                "component": "storage",
                **await storage.stats(),
            }

        self.add_check("basic", basic_check)
        self.add_check("storage", storage_check)


async def create_catalog_service_health_check(
    storage: CatalogStorageManager, service_name: str = "catalog_service"
) -> Dict[str, Any]:
    """Run the standard Catalog Service health checks"""
    health_checker = CatalogServiceHealthChecker(service_name)
    health_checker.add_catalog_checks(storage)
    return await health_checker.run_checks()
