"""Health Probe — reports API and database liveness.

Invariants:
    - GET /up always returns 200; database trouble shows up as db=false, never as an error
    - An uninitialized session manager reports db=false
"""

import logging

from fastapi import APIRouter, Depends

from questlines.infrastructure.database import (
    DatabaseSessionManager, get_optional_db_manager,
)
from questlines.schemas.questline import HealthStatus

logger = logging.getLogger(__name__)
router = APIRouter(tags=["health"])


@router.get("/up", response_model=HealthStatus)
async def up(
    db: DatabaseSessionManager | None = Depends(get_optional_db_manager),
):
    """Liveness of the process and its database connection."""
    db_ok = await db.health_check() if db else False
    if not db_ok:
        logger.warning("Health check: database unreachable")
    return HealthStatus(api=True, db=db_ok)
