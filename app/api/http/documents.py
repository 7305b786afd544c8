from fastapi import APIRouter, Depends, File, Query, UploadFile, status
from typing import List, Optional

from app.api.dependencies import get_document_service, to_http_error
from app.core.auth import get_current_user
from app.core.config import settings
from app.core.exceptions import DomainError, ValidationError
from app.domains.documents.schemas import (
    DocumentResponse, DocumentDetailResponse, DocumentUploadResponse,
    DocumentRenameRequest, DocumentStorageResponse, MessageResponse,
    to_response, to_response_list
)
from app.domains.documents.services import DocumentService, check_upload_size
from app.domains.identity.entities import User

router = APIRouter(prefix="/pdfs", tags=["pdfs"])


@router.get("", response_model=List[DocumentResponse])
async def get_user_documents(
    q: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение списка документов, q - фильтр по имени"""
    documents = await document_service.list_documents(current_user.uuid, q)
    return to_response_list(documents)


@router.get("/search", response_model=List[DocumentResponse])
async def search_documents(
    q: Optional[str] = Query(None),
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Поиск документов по имени"""
    documents = await document_service.list_documents(current_user.uuid, q)
    return to_response_list(documents)


@router.post("/upload", response_model=DocumentUploadResponse, status_code=status.HTTP_201_CREATED)
async def upload_document(
    pdf: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Загрузка нового PDF"""
    try:
        if pdf is None:
            raise ValidationError("No file uploaded.")

        if pdf.size is not None:
            check_upload_size(pdf.size)
        # Не больше лимита плюс один байт
        content = await pdf.read(settings.max_upload_bytes + 1)
        document = await document_service.upload_document(
            owner_id=current_user.uuid,
            filename=pdf.filename,
            content=content
        )
    except DomainError as e:
        raise to_http_error(e)

    return DocumentUploadResponse(external_id=document.external_id)


# external_id приходит уже декодированным сервером и может содержать "/"
@router.get("/{external_id:path}/storage", response_model=DocumentStorageResponse)
async def get_document_storage(
    external_id: str,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Сведения о файле во внешнем хранилище"""
    try:
        details = await document_service.describe_storage(
            current_user.uuid,
            external_id
        )
    except DomainError as e:
        raise to_http_error(e)

    return DocumentStorageResponse(**details)


@router.put("/{external_id:path}/rename", response_model=MessageResponse)
async def rename_document(
    external_id: str,
    rename_data: DocumentRenameRequest,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Переименование документа"""
    try:
        await document_service.rename_document(
            current_user.uuid,
            external_id,
            rename_data.new_name
        )
    except DomainError as e:
        raise to_http_error(e)

    return MessageResponse(message="PDF renamed successfully")


@router.get("/{external_id:path}", response_model=DocumentDetailResponse)
async def get_document(
    external_id: str,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа и адреса для просмотра"""
    try:
        document, url = await document_service.get_document_with_url(
            current_user.uuid,
            external_id
        )
    except DomainError as e:
        raise to_http_error(e)

    return DocumentDetailResponse(
        id=document.uuid,
        external_id=document.external_id,
        display_name=document.display_name,
        url=url
    )


@router.delete("/{external_id:path}", response_model=MessageResponse)
async def delete_document(
    external_id: str,
    current_user: User = Depends(get_current_user),
    document_service: DocumentService = Depends(get_document_service)
):
    """Удаление документа вместе с файлом и выделениями"""
    try:
        await document_service.delete_document(
            current_user.uuid,
            external_id
        )
    except DomainError as e:
        raise to_http_error(e)

    return MessageResponse(message="PDF deleted successfully")
