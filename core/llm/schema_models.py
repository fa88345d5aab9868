"""JSON schema sent to the model for niche scans."""

_STRING_LIST = {"type": "array", "items": {"type": "string"}}

NICHE_ITEM_SCHEMA = {
    "type": "object",
    "properties": {
        "niche": {"type": "string"},
        "description": {"type": "string"},
        "averagePrice": {"type": "number"},
        "demand": {"type": "number"},
        "competition": {"type": "number"},
        "trend": {"type": "number"},
        "scalabilityIndex": {"type": "number"},
        "aiRisk": {"type": "number"},
        "gigTitles": _STRING_LIST,
        "gigDescription": {"type": "string"},
        "keywords": _STRING_LIST,
        "faqs": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "question": {"type": "string"},
                    "answer": {"type": "string"},
                },
                "required": ["question", "answer"],
                "additionalProperties": False,
            },
        },
        "battlePlan": {"type": "string"},
        "competitorWeakness": {"type": "string"},
        "competitionNote": {"type": "string"},
        "targetAudience": {"type": "string"},
        "strategicForecast": {"type": "string"},
        "marketingChannels": _STRING_LIST,
        "painPoints": _STRING_LIST,
    },
    "additionalProperties": False,
}
NICHE_ITEM_SCHEMA["required"] = list(NICHE_ITEM_SCHEMA["properties"].keys())

# Structured-output endpoints require an object at the top level.
NICHE_SCAN_SCHEMA = {
    "name": "niche_scan_schema",
    "strict": True,
    "schema": {
        "type": "object",
        "properties": {
            "niches": {"type": "array", "items": NICHE_ITEM_SCHEMA},
        },
        "required": ["niches"],
        "additionalProperties": False,
    },
}
