from datetime import datetime, timezone
from typing import ClassVar, Optional, Tuple

from pydantic import BaseModel, ConfigDict


def utc_now() -> datetime:
    """Naive UTC timestamp used for every stored ``created_at``/``updated_at``."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class CatalogBaseModel(BaseModel):
    """Base entity with the fields every store manages itself."""

    model_config = ConfigDict(from_attributes=True)

    # Fields a store update copies over from the incoming entity
    MUTABLE_FIELDS: ClassVar[Tuple[str, ...]] = ()
    # Fields that only live on a returned copy and never reach the store
    TRANSIENT_FIELDS: ClassVar[Tuple[str, ...]] = ()

    id: int = 0
    created_at: Optional[datetime] = None
