"""
Intent classifier for the GreenLedger assistant.

Deterministic and lexical: every decision traces back to one literal
trigger phrase and one static weight in intent_patterns.TRIGGER_TABLE.
"""

from typing import Optional, Iterable

from models import FunctionName, IntentMatch
from intent_patterns import TRIGGER_TABLE, TriggerTable
from config.settings import CLASSIFIER_MIN_CONFIDENCE


def classify(
    message: str,
    allowed_functions: Iterable[FunctionName],
    table: TriggerTable = TRIGGER_TABLE,
    min_confidence: float = CLASSIFIER_MIN_CONFIDENCE,
) -> Optional[IntentMatch]:
    """
    Score *message* against the trigger table for the allowed functions.

    A function's confidence is the highest weight among its phrases that
    appear as substrings of the message; phrases never add up. The best
    function overall is returned, or None if it scores below
    *min_confidence*. On equal scores the entry registered first wins.
    """
    text = (message or "").lower().strip()
    if not text:
        return None

    allowed = set(allowed_functions)
    best: Optional[IntentMatch] = None

    for function_name, triggers in table:
        if function_name not in allowed:
            continue
        for phrase, weight in triggers:
            if phrase not in text:
                continue
            # strict > keeps the earliest registration on ties
            if best is None or weight > best.confidence:
                best = IntentMatch(function_name, weight, phrase)

    if best is None or best.confidence < min_confidence:
        return None
    return best


def score_all(
    message: str,
    allowed_functions: Iterable[FunctionName],
    table: TriggerTable = TRIGGER_TABLE,
) -> dict:
    """Per-function best weight for *message*; used for debugging and audits."""
    text = (message or "").lower().strip()
    allowed = set(allowed_functions)
    scores = {}
    for function_name, triggers in table:
        if function_name not in allowed:
            continue
        matched = [w for phrase, w in triggers if phrase in text]
        if matched:
            scores[function_name.value] = max(matched)
    return scores
