"""Skill: structure appointment booking requests for any provider type."""

from agnes.llm.skills.registry import Skill

_STRING = {"type": "string"}


def _object(**properties: dict) -> dict:
    return {"type": "object", "properties": properties}


appointment_scheduling_skill = Skill(
    name="schedule_appointment",
    description=(
        "Structure appointment booking requests for any provider type (medical, salon, "
        "housekeeping, contractor, etc.) with provider details, services, time "
        "preferences, and integration hints."
    ),
    prompt_id="appointment_scheduling",
    response_schema={
        "type": "object",
        "properties": {
            "appointments": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "provider": {
                            **_object(
                                name=_STRING,
                                category=_STRING,
                                specialty=_STRING,
                                locationHint=_STRING,
                                integration=_object(
                                    system=_STRING,
                                    providerId=_STRING,
                                    bookingUrl=_STRING,
                                    phone=_STRING,
                                    email=_STRING,
                                ),
                            ),
                            "required": ["category"],
                        },
                        "service": _STRING,
                        "notes": _STRING,
                        "timePreferences": {
                            "type": "array",
                            "items": _object(
                                start=_STRING,
                                end=_STRING,
                                timeZone=_STRING,
                                flexibility=_STRING,
                                priority={"type": "number"},
                            ),
                        },
                        "location": _object(
                            name=_STRING,
                            address=_STRING,
                            city=_STRING,
                            region=_STRING,
                            postalCode=_STRING,
                            country=_STRING,
                            meetingUrl=_STRING,
                            onSite={"type": "boolean"},
                        ),
                        "customer": _object(
                            name=_STRING,
                            phone=_STRING,
                            email=_STRING,
                            memberId=_STRING,
                            insurance=_STRING,
                        ),
                        "attendees": {
                            "type": "array",
                            "items": _object(
                                name=_STRING, role=_STRING, phone=_STRING, email=_STRING
                            ),
                        },
                        "constraints": {"type": "array", "items": _STRING},
                        "clarifications": {"type": "array", "items": _STRING},
                        "confidence": {"type": "number"},
                        "source": _STRING,
                    },
                    "required": ["provider", "service", "confidence"],
                },
            }
        },
        "required": ["appointments"],
    },
)
