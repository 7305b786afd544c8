from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
import uuid

from app.api.dependencies import get_highlight_service, to_http_error
from app.core.auth import get_current_user
from app.core.exceptions import DomainError
from app.domains.highlights.schemas import (
    HighlightCreate, HighlightNoteUpdate, HighlightResponse, MessageResponse,
    to_response, to_response_list
)
from app.domains.highlights.services import HighlightService
from app.domains.identity.entities import User

router = APIRouter(prefix="/highlights", tags=["highlights"])


@router.post("", response_model=HighlightResponse, status_code=status.HTTP_201_CREATED)
async def create_highlight(
    highlight_data: HighlightCreate,
    current_user: User = Depends(get_current_user),
    highlight_service: HighlightService = Depends(get_highlight_service)
):
    """Создание выделения"""
    try:
        highlight = await highlight_service.create_highlight(
            owner_id=current_user.uuid,
            document_external_id=highlight_data.document_external_id,
            text=highlight_data.text,
            page_number=highlight_data.page_number,
            region=highlight_data.region.to_region()
        )
    except DomainError as e:
        raise to_http_error(e)
    
    return to_response(highlight)


@router.get("/search/{document_external_id:path}", response_model=List[HighlightResponse])
async def search_highlights(
    document_external_id: str,
    q: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    highlight_service: HighlightService = Depends(get_highlight_service)
):
    """Поиск выделений документа по тексту"""
    try:
        highlights = await highlight_service.list_highlights(
            current_user.uuid,
            document_external_id,
            q
        )
    except DomainError as e:
        raise to_http_error(e)
    
    return to_response_list(highlights)


@router.get("/{document_external_id:path}", response_model=List[HighlightResponse])
async def get_document_highlights(
    document_external_id: str,
    q: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    highlight_service: HighlightService = Depends(get_highlight_service)
):
    """Получение выделений документа"""
    try:
        highlights = await highlight_service.list_highlights(
            current_user.uuid,
            document_external_id,
            q
        )
    except DomainError as e:
        raise to_http_error(e)
    
    return to_response_list(highlights)


@router.put("/{highlight_id}", response_model=HighlightResponse)
async def update_highlight_note(
    highlight_id: uuid.UUID,
    note_data: HighlightNoteUpdate,
    current_user: User = Depends(get_current_user),
    highlight_service: HighlightService = Depends(get_highlight_service)
):
    """Изменение заметки к выделению"""
    try:
        highlight = await highlight_service.update_note(
            current_user.uuid,
            highlight_id,
            note_data.note
        )
    except DomainError as e:
        raise to_http_error(e)
    
    return to_response(highlight)


@router.delete("/{highlight_id}", response_model=MessageResponse)
async def delete_highlight(
    highlight_id: uuid.UUID,
    current_user: User = Depends(get_current_user),
    highlight_service: HighlightService = Depends(get_highlight_service)
):
    """Удаление выделения"""
    try:
        await highlight_service.delete_highlight(current_user.uuid, highlight_id)
    except DomainError as e:
        raise to_http_error(e)
    
    return MessageResponse(message="Highlight deleted successfully")
