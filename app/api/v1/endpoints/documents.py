"""Document API: upload to the file store plus metadata, list, and delete."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile

from app.api.v1.dependencies.onboarding import (
    get_onboarding_orchestrator,
    get_onboarding_orchestrator_for_write,
    get_owned_business_profile,
)
from app.application.dtos.business_profile import BusinessProfileResult
from app.application.use_cases.onboarding import OnboardingOrchestrator
from app.core.config import get_settings
from app.core.limiter import limit_upload, limit_writes
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.document import DocumentDeleteResponse, OnboardingDocumentResponse

router = APIRouter()


@router.post("", response_model=OnboardingDocumentResponse, status_code=201)
@limit_upload
async def upload_document(
    request: Request,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[
        OnboardingOrchestrator, Depends(get_onboarding_orchestrator_for_write)
    ],
    doc_type: str = Form(...),
    file: UploadFile = File(...),
    section: str | None = Form(None),
    expiry_date: date | None = Form(None),
):
    """Upload a document for the caller's business (bytes first, then metadata)."""
    settings = get_settings()
    if not file.filename:
        raise HTTPException(status_code=400, detail="Filename required")
    content_type = file.content_type or "application/octet-stream"
    allowed = settings.allowed_mime_types_list
    if allowed and content_type not in allowed:
        raise HTTPException(
            status_code=415, detail=f"Unsupported content type: {content_type}"
        )
    data = await file.read()
    if len(data) > settings.max_upload_size:
        raise HTTPException(
            status_code=413,
            detail=f"File exceeds maximum size of {settings.max_upload_size} bytes",
        )
    created = await orchestrator.upload_document(
        business_profile_id=profile.id,
        file_data=data,
        filename=file.filename,
        doc_type=doc_type,
        section=section or None,
        expiry_date=expiry_date,
        content_type=content_type,
    )
    return OnboardingDocumentResponse.model_validate(created)


@router.get("", response_model=list[OnboardingDocumentResponse])
async def list_documents(
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[OnboardingOrchestrator, Depends(get_onboarding_orchestrator)],
    section: str | None = None,
):
    """List the caller's documents, optionally only those tagged with a section."""
    docs = await orchestrator.list_documents(profile.id, section=section)
    return [OnboardingDocumentResponse.model_validate(d) for d in docs]


@router.delete("/{document_id}", response_model=DocumentDeleteResponse)
@limit_writes
async def delete_document(
    request: Request,
    document_id: str,
    profile: Annotated[BusinessProfileResult, Depends(get_owned_business_profile)],
    orchestrator: Annotated[
        OnboardingOrchestrator, Depends(get_onboarding_orchestrator_for_write)
    ],
):
    """Delete a document's metadata record. The stored file is left in place."""
    doc = await orchestrator.get_document(document_id)
    if doc is None or doc.business_profile_id != profile.id:
        raise ResourceNotFoundException("onboarding_document", document_id)
    deleted = await orchestrator.delete_document(document_id)
    return DocumentDeleteResponse(id=document_id, deleted=deleted)
