"""
Chat, execute, records and capabilities endpoints as a Flask Blueprint.
"""

import asyncio
import time

from flask import Blueprint, request, jsonify, current_app

from models import Role
from capability_registry import capabilities_for
from chatbot_service import ChatbotService, get_service
from record_store import RecordStoreError, UnknownRecordTypeError
from core import user_from_payload, history_from_payload, error_response
from chat_logger import get_logger, loggable

logger = get_logger("greenledger_chat")

chat_bp = Blueprint("chat", __name__)


def _service() -> ChatbotService:
    """Service injected via app.config['CHATBOT_SERVICE'], else the process default."""
    return current_app.config.get("CHATBOT_SERVICE") or get_service()


@chat_bp.route("/chat", methods=["POST"])
def chat():
    """
    Classify one user message.

    Request:
        POST /chat
        {
            "message": "pay 500 rupees for seeds",
            "role": "farmer",
            "user": {"id": "F001", "name": "Ravi", "state": "Tamil Nadu"},
            "history": [{"role": "user", "content": "..."}]
        }

    Response (function call):
        {"type": "function_call", "action": "create_payment",
         "params": {"amount_inr": 500, "purpose": "seed_purchase"}, "confidence": 0.9}

    Response (reply):
        {"type": "message", "content": "...", "confidence": 0.9}
    """
    start_time = time.time()

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        logger.warning("POST /chat | Invalid JSON body")
        return error_response("Invalid request. Send JSON with 'message' field.", error="Invalid JSON body")

    message = str(body.get("message") or "").strip()
    role = body.get("role")
    logger.info(f'POST /chat | role={loggable(str(role))} | message="{loggable(message)}"')

    if not message:
        logger.warning("POST /chat | Empty message")
        return error_response("Please type a message!", error="Empty message")

    response = _service().send_message(
        message,
        user_from_payload(body.get("user")),
        role,
        history_from_payload(body.get("history")),
    )

    logger.info(
        f"POST /chat | type={response.type} | action={response.action} | "
        f"response_time_ms={round((time.time() - start_time) * 1000)}"
    )
    return jsonify(response.to_dict()), 200


@chat_bp.route("/execute", methods=["POST"])
def execute():
    """
    Run a function call the user confirmed.

    Request:
        POST /execute
        {"action": "create_payment", "params": {...}, "role": "farmer", "user": {...}}

    Response: {"success": bool, "message": "...", "data": {...}}
    """
    start_time = time.time()

    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        logger.warning("POST /execute | Invalid JSON body")
        return error_response("Invalid request. Send JSON with 'action' field.", error="Invalid JSON body")

    action = str(body.get("action") or "").strip()
    if not action:
        logger.warning("POST /execute | Missing action")
        return error_response("Please specify an action to execute.", error="Missing action")

    params = body.get("params")
    if params is not None and not isinstance(params, dict):
        return error_response("'params' must be an object.", error="Invalid params")

    result = asyncio.run(_service().execute_function(
        action,
        params or {},
        user_from_payload(body.get("user")),
        body.get("role"),
    ))

    logger.info(
        f"POST /execute | action={loggable(action)} | success={result.success} | "
        f"response_time_ms={round((time.time() - start_time) * 1000)}"
    )
    return jsonify(result.to_dict()), 200


@chat_bp.route("/records/<record_type>", methods=["GET"])
def list_records(record_type):
    """Persisted records of one type, oldest first."""
    try:
        records = _service().list_records(record_type)
    except UnknownRecordTypeError:
        return error_response(f"Unknown record type: {record_type}", 404)
    except RecordStoreError as e:
        logger.error(f"GET /records/{loggable(record_type)} | store error={loggable(str(e))}")
        return error_response("Could not read records. Please try again later.", 500)
    return jsonify({"record_type": record_type, "count": len(records), "records": records})


@chat_bp.route("/capabilities/<role>", methods=["GET"])
def capabilities(role):
    """What the assistant can do for *role*."""
    profile = capabilities_for(role)
    parsed = Role.parse(role)
    return jsonify({
        "role": parsed.value if parsed else None,
        "functions": sorted(f.value for f in profile.functions),
        "context": profile.context_description,
        "knowledge": list(profile.knowledge_snippets),
    })
