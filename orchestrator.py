"""
Conversation orchestrator: one user turn in, one ChatResponse out.

Classify first; on a hit, extract parameters and hand back a function
call for the caller to execute. On a miss, fall through to the templated
response generator. Never executes anything itself.
"""

from datetime import datetime
from typing import Optional, Sequence

from models import ChatResponse, ChatMessage, UserProfile, Role
from capability_registry import capabilities_for
from classifier import classify, score_all
from intent_patterns import TRIGGER_TABLE, TRIGGER_TABLE_VERSION, TriggerTable
from param_extractor import extract_params
from response_generator import generate_reply
from chat_logger import get_logger, loggable
from config.settings import CLASSIFIER_MIN_CONFIDENCE

logger = get_logger("greenledger_chat")

MESSAGE_CONFIDENCE = 0.9


def respond(
    message: str,
    user: Optional[UserProfile],
    role,
    history: Optional[Sequence[ChatMessage]] = None,
    table: TriggerTable = TRIGGER_TABLE,
    min_confidence: float = CLASSIFIER_MIN_CONFIDENCE,
    now: Optional[datetime] = None,
) -> ChatResponse:
    user = user or UserProfile()
    history = list(history or [])
    role_name = role.value if isinstance(role, Role) else str(role or "")
    profile = capabilities_for(role)

    logger.info(f'Respond | role={role_name} | message="{loggable(message)}" | history={len(history)}')

    match = classify(message, profile.functions, table=table, min_confidence=min_confidence)
    if match is not None:
        params = extract_params(message, match.function_name, user, history, now=now)
        logger.info(
            f"Step 1: Classified function={match.function_name.value} | confidence={match.confidence:.2f} "
            f'| trigger="{match.trigger}" | table={TRIGGER_TABLE_VERSION} | params={sorted(params)}'
        )
        return ChatResponse(
            type="function_call",
            action=match.function_name.value,
            params=params,
            confidence=match.confidence,
        )

    logger.debug(f"Step 1: No function match | scores={score_all(message, profile.functions, table)}")
    content = generate_reply(
        message, role, profile, history, user,
        today=now.date() if now else None,
    )
    logger.info(f"Step 2: Templated reply | role={role_name} | length={len(content)}")
    return ChatResponse(type="message", content=content, confidence=MESSAGE_CONFIDENCE)
