"""Skill: extract todos, meals and calendar events."""

from agnes.llm.skills.registry import Skill

_STRING = {"type": "string"}
_NUMBER = {"type": "number"}
_STRING_ARRAY = {"type": "array", "items": _STRING}

_EVENT_TIME = {
    "type": "object",
    "properties": {"dateTime": _STRING, "timeZone": _STRING},
}

actionable_extraction_skill = Skill(
    name="extract_actionable_items",
    description="Extract actionable todos, meals, and calendar events from mixed inputs.",
    prompt_id="actionable_extraction",
    response_schema={
        "type": "object",
        "properties": {
            "todos": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": _STRING,
                        "notes": _STRING,
                        "recurrence": _STRING_ARRAY,
                        "confidence": _NUMBER,
                        "confidenceReasons": _STRING_ARRAY,
                        "source": _STRING,
                    },
                    "required": ["title", "confidence"],
                },
            },
            "meals": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": _STRING,
                        "notes": _STRING,
                        "mealType": _STRING,
                        "scheduledFor": _STRING,
                        "servings": _NUMBER,
                        "recipeUrl": _STRING,
                        "confidence": _NUMBER,
                        "source": _STRING,
                    },
                    "required": ["title", "confidence"],
                },
            },
            "events": {
                "type": "array",
                "items": {
                    "type": "object",
                    "properties": {
                        "title": _STRING,
                        "description": _STRING,
                        "start": _EVENT_TIME,
                        "end": _EVENT_TIME,
                        "location": {
                            "type": "object",
                            "properties": {
                                "name": _STRING,
                                "address": _STRING,
                                "meetingUrl": _STRING,
                            },
                        },
                        "recurrence": _STRING_ARRAY,
                        "confidence": _NUMBER,
                        "confidenceReasons": _STRING_ARRAY,
                        "source": _STRING,
                    },
                    "required": ["title", "confidence"],
                },
            },
        },
        "required": ["todos", "meals", "events"],
    },
)
