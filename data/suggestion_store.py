"""JSON-file persistence for user suggestions."""

import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

from models.suggestion import SuggestionLog
from config.defaults import SUGGESTION_LOG_PATH, SUGGESTION_TYPES

logger = logging.getLogger(__name__)


def create_suggestion(suggestion_type: str, details: str) -> SuggestionLog:
    """Validated suggestion stamped with the current UTC time."""
    if suggestion_type not in SUGGESTION_TYPES:
        raise ValueError(f"Unknown suggestion type: {suggestion_type}. Use one of {SUGGESTION_TYPES}.")
    details = (details or "").strip()
    if not details:
        raise ValueError("Suggestion details must not be empty.")
    timestamp = datetime.now(timezone.utc).isoformat()
    return SuggestionLog(suggestion_type=suggestion_type, details=details, timestamp=timestamp)


def load_suggestions(path: Optional[str] = None) -> List[SuggestionLog]:
    """Read the log; a missing, unreadable or corrupt file reads as empty."""
    path = path or SUGGESTION_LOG_PATH
    if not os.path.exists(path):
        return []
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read suggestion log %s: %s", path, e)
        return []
    if not isinstance(raw, list):
        logger.warning("Suggestion log %s is not a JSON array; ignoring it", path)
        return []

    entries = []
    for item in raw:
        if not isinstance(item, dict) or "details" not in item:
            logger.warning("Skipping malformed suggestion entry in %s", path)
            continue
        entries.append(SuggestionLog(
            suggestion_type=item.get("type", "other"),
            details=item["details"],
            timestamp=item.get("timestamp", ""),
        ))
    return entries


def _write(entries: List[SuggestionLog], path: str):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([e.to_dict() for e in entries], f, indent=2)


def append_suggestion(entry: SuggestionLog, path: Optional[str] = None) -> List[SuggestionLog]:
    path = path or SUGGESTION_LOG_PATH
    entries = load_suggestions(path) + [entry]
    _write(entries, path)
    logger.info("Recorded %s suggestion (%d total)", entry.suggestion_type, len(entries))
    return entries


def clear_suggestions(path: Optional[str] = None):
    path = path or SUGGESTION_LOG_PATH
    _write([], path)
    logger.info("Suggestion log cleared: %s", path)


def export_suggestions_json(entries: List[SuggestionLog]) -> str:
    return json.dumps([e.to_dict() for e in entries], indent=2)
