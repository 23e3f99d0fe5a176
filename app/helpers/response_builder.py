from typing import Any, Dict

from beanie.odm.fields import PydanticObjectId

from app.database.models.loan_application_model import LoanApplication


def convert_objectid(obj):
    """Convert PydanticObjectId fields to strings."""
    if isinstance(obj, dict):
        return {key: convert_objectid(value) for key, value in obj.items()}
    elif isinstance(obj, list):
        return [convert_objectid(item) for item in obj]
    elif isinstance(obj, PydanticObjectId):
        return str(obj)
    return obj


def build_track_application_response(application: LoanApplication) -> Dict[str, Any]:
    return {
        "success": True,
        "id": str(application.id),
        "message": "Application tracked successfully",
        "timestamp": application.created_at.isoformat(),
    }


def build_application_status_response(application: LoanApplication) -> Dict[str, Any]:
    return {
        "success": True,
        "message": f"Application status updated to {application.status.value}",
        "application": {
            "id": str(application.id),
            "status": application.status.value,
            "updatedAt": application.updated_at.isoformat(),
        },
    }


def build_application_detail(application: LoanApplication) -> Dict[str, Any]:
    # user_ip and user_agent stay server side
    data = application.model_dump(exclude={"id", "revision_id", "user_ip", "user_agent"})
    data["id"] = application.id
    data = convert_objectid(data)

    # Clean up any None values for cleaner response
    return {k: v for k, v in data.items() if v is not None}
