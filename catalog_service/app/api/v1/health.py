from typing import Any, Dict

from fastapi import APIRouter

from ...core.storage import CatalogStorageManager
from ...utils.service_health import create_catalog_service_health_check
from ..dependencies import StorageDep

router = APIRouter()


@router.get("/health")
async def health_check(
    storage: CatalogStorageManager = StorageDep,
) -> Dict[str, Any]:
    """Health check endpoint reporting the state of the in-memory stores."""
    return await create_catalog_service_health_check(storage)
