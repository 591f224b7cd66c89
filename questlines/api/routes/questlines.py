"""Questline Routes — CRUD and export endpoints for questline aggregates.

Invariants:
    - Request bodies are validated by Pydantic before reaching the handler
      (malformed JSON or wrong types → 400 via the global handler)
    - PUT rejects a path/body id mismatch before the repository is called
    - Export fetches first, then checks the format (unknown id → 404 for any format)
    - Errors are raised as QuestlinesError and rendered by api/error_handlers.py

Design Decisions:
    - Repository injected per request via Depends: tests swap the session manager,
      routes never see a module-level store
    - Export format read from `fmt`, falling back to `format` (sent by the bundled frontend)
"""

import logging
import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, Query, Response, status

from questlines.core.domain_types import ExportFormat, QuestlineId
from questlines.core.errors import ErrorContext, ValidationError
from questlines.core.repository_protocols import QuestlineStore
from questlines.infrastructure.database import DatabaseSessionManager, get_db_manager
from questlines.schemas.questline import (
    MessageResponse, QuestlineInfo, QuestlinePayload, QuestlineResponse,
)
from questlines.services.questline_repository import QuestlineRepository

logger = logging.getLogger(__name__)
_HEADER_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")
router = APIRouter(prefix="/questlines", tags=["questlines"])


def get_questline_repository(
    db: DatabaseSessionManager = Depends(get_db_manager),
) -> QuestlineStore:
    """FastAPI dependency: repository bound to the active session manager."""
    return QuestlineRepository(db)


@router.get("", response_model=list[QuestlineInfo])
async def list_questlines(
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """List questline summaries, most recently updated first."""
    return await repo.list_summaries()


@router.post(
    "", response_model=QuestlineResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_questline(
    body: QuestlinePayload,
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """Create a questline; the server assigns its id."""
    return await repo.create(body)


@router.get("/{questline_id}", response_model=QuestlineResponse)
async def get_questline(
    questline_id: str,
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """Get one questline with quests, objectives and dependencies."""
    return await repo.get(QuestlineId(questline_id))


@router.put("/{questline_id}", response_model=QuestlineResponse)
async def update_questline(
    questline_id: str,
    body: QuestlinePayload,
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """Replace a questline's name and its entire child set."""
    if body.id != questline_id:
        raise ValidationError(
            "ID mismatch between URL param and body", "id",
            ErrorContext(operation="update", questline_id=questline_id),
        )
    return await repo.update(body)


@router.delete("/{questline_id}", response_model=MessageResponse)
async def delete_questline(
    questline_id: str,
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """Delete a questline and everything it owns. Unknown ids succeed."""
    await repo.delete(QuestlineId(questline_id))
    return MessageResponse(message="Questline deleted successfully")


@router.get("/{questline_id}/export")
async def export_questline(
    questline_id: str,
    fmt: str | None = Query(None),
    format_: str | None = Query(None, alias="format"),
    repo: QuestlineStore = Depends(get_questline_repository),
):
    """Download a questline as an attachment."""
    questline = await repo.get(QuestlineId(questline_id))

    requested = fmt or format_ or ExportFormat.JSON.value
    try:
        export_format = ExportFormat(requested)
    except ValueError:
        raise ValidationError(
            "Unsupported format", "fmt",
            ErrorContext(operation="export", questline_id=questline_id),
        )

    filename = f"{questline.name}.{export_format.value}"
    logger.info(
        f"Exporting questline to {filename}",
        extra={"questline_id": questline_id, "operation": "export"},
    )
    return Response(
        content=questline.model_dump_json(by_alias=True, indent=2),
        media_type=export_format.media_type,
        headers={"Content-Disposition": _attachment_disposition(filename)},
    )


def _attachment_disposition(filename: str) -> str:
    """Content-Disposition value; RFC 5987 form when the name is not plain ASCII."""
    # Control characters are illegal in header values
    filename = _HEADER_CONTROL_CHARS.sub(" ", filename)
    filename = filename.replace('"', "'").replace("\\", "_")
    if not filename.isascii():
        return f"attachment; filename*=utf-8''{quote(filename)}"
    return f'attachment; filename="{filename}"'
