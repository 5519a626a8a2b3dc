"""
Core Helpers

Request payload conversion and error bodies shared by the HTTP routes.
"""

from typing import List, Any, Optional

from flask import jsonify

from models import UserProfile, ChatMessage


def user_from_payload(payload: Any) -> UserProfile:
    """Build a UserProfile from the request's user object (camelCase or snake_case)."""
    if not isinstance(payload, dict):
        return UserProfile()
    return UserProfile.from_dict(payload)


def history_from_payload(payload: Any) -> List[ChatMessage]:
    """Keep well-formed {role, content} entries, oldest first; drop the rest."""
    if not isinstance(payload, list):
        return []
    history = []
    for item in payload:
        if not isinstance(item, dict) or not isinstance(item.get("content"), str):
            continue
        history.append(ChatMessage(
            role=str(item.get("role") or "user"),
            content=item["content"],
            timestamp=item.get("timestamp"),
        ))
    return history


def error_response(message: str, status: int = 400, error: Optional[str] = None):
    """JSON error body in the same shape for every route."""
    body = {"success": False, "message": message}
    if error:
        body["error"] = error
    return jsonify(body), status
