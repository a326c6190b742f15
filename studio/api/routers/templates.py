"""
Timeline template API endpoints.

Routes:
- GET /timeline-templates - List templates
- GET /timeline-templates/{session_type} - Get one template
- PUT /timeline-templates/{session_type} - Create or replace a template

Dependencies: studio.application.services, studio.models
System role: Template administration HTTP API
"""

import logging

from fastapi import APIRouter, Depends

from studio.application.services.template_service import TemplateService
from studio.api.deps.dependencies import get_template_service
from studio.models.template import TemplateResponse, UpsertTemplateRequest

from .timeline.timeline_error_handling import handle_timeline_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/timeline-templates", tags=["timeline-templates"])


@router.get("", response_model=list[TemplateResponse])
@handle_timeline_errors
async def list_templates(
    template_service: TemplateService = Depends(get_template_service),
) -> list[TemplateResponse]:
    """List every configured timeline template."""
    templates = await template_service.list_templates()
    return [TemplateResponse.from_template(template) for template in templates]


@router.get("/{session_type}", response_model=TemplateResponse)
@handle_timeline_errors
async def get_template(
    session_type: str,
    template_service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    """
    Get the template for a session type.

    Raises:
        HTTPException(409): No template configured
    """
    template = await template_service.get_template(session_type)
    return TemplateResponse.from_template(template)


@router.put("/{session_type}", response_model=TemplateResponse)
@handle_timeline_errors
async def upsert_template(
    session_type: str,
    request: UpsertTemplateRequest,
    template_service: TemplateService = Depends(get_template_service),
) -> TemplateResponse:
    """
    Create or replace the template for a session type.

    Existing timelines keep their entries until regenerated.
    """
    template = await template_service.upsert_template(
        session_type,
        [task.to_domain() for task in request.tasks],
    )
    return TemplateResponse.from_template(template)
