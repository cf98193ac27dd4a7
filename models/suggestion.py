from dataclasses import dataclass


@dataclass
class SuggestionLog:
    suggestion_type: str     # "fix", "feature", "invalid", "other"
    details: str
    timestamp: str           # ISO-8601, UTC

    def to_dict(self) -> dict:
        return {"type": self.suggestion_type, "details": self.details, "timestamp": self.timestamp}
