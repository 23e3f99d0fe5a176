from fastapi import APIRouter, HTTPException, Request
from fastapi import status
from typing import Dict, Any
import logging

from app.schemas.tracking_schema import TrackApplicationRequest, UpdateStatusRequest
from app.services.tracking_service import (
    tracking_service,
    ApplicationNotFoundError,
    InvalidStatusTransitionError,
)
from app.helpers.response_builder import (
    build_track_application_response,
    build_application_status_response,
    build_application_detail,
)

router = APIRouter(prefix="/track-application", tags=["Application Tracking"])

logger = logging.getLogger(__name__)


@router.post("", status_code=status.HTTP_201_CREATED)
async def track_application(payload: TrackApplicationRequest, request: Request) -> Dict[str, Any]:
    """Record a click-through to a lender's application page."""
    try:
        application = await tracking_service.track_application(
            payload,
            user_ip=request.client.host if request.client else None,
            user_agent=request.headers.get("user-agent", ""),
        )
        return build_track_application_response(application)
    except Exception as e:
        logger.error(f"Error tracking loan application: {e}")
        raise HTTPException(status_code=500, detail="Failed to track application")


@router.patch("/{application_id}/status")
async def update_application_status(application_id: str, payload: UpdateStatusRequest) -> Dict[str, Any]:
    try:
        application = await tracking_service.update_status(application_id, payload.status)
        return build_application_status_response(application)
    except ApplicationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStatusTransitionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Error updating application status: {e}")
        raise HTTPException(status_code=500, detail="Failed to update application status")


@router.get("/{application_id}")
async def get_tracked_application(application_id: str) -> Dict[str, Any]:
    try:
        application = await tracking_service.get_application(application_id)
        return build_application_detail(application)
    except ApplicationNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception as e:
        logger.error(f"Error retrieving tracked application {application_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve application")
