"""
ChatbotService: the facade the UI and HTTP layer talk to.

send_message() classifies and either proposes a function call or replies;
execute_function() runs a confirmed call; list_records() serves the UI's
pull reads of persisted records.
"""

from typing import Optional, Sequence, List, Dict, Any, Mapping

from models import ChatResponse, ChatMessage, FunctionResult, FunctionName, UserProfile
from orchestrator import respond
from executor import FunctionExecutor
from handlers import FunctionHandler
from intent_patterns import TRIGGER_TABLE, TriggerTable
from record_store import RecordStore, create_store
from providers import Clock, DelayStrategy, IdGenerator, utc_now
from config.settings import CLASSIFIER_MIN_CONFIDENCE


class ChatbotService:

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        clock: Clock = utc_now,
        id_generator: Optional[IdGenerator] = None,
        delay: Optional[DelayStrategy] = None,
        handlers: Optional[Mapping[FunctionName, FunctionHandler]] = None,
        trigger_table: TriggerTable = TRIGGER_TABLE,
        min_confidence: float = CLASSIFIER_MIN_CONFIDENCE,
    ):
        self.clock = clock
        self.trigger_table = trigger_table
        self.min_confidence = min_confidence
        self.executor = FunctionExecutor(
            store=store if store is not None else create_store(),
            handlers=handlers,
            clock=clock,
            ids=id_generator,
            delay=delay,
        )

    @property
    def store(self) -> RecordStore:
        return self.executor.store

    def send_message(
        self,
        text: str,
        user: Optional[UserProfile],
        role,
        history: Optional[Sequence[ChatMessage]] = None,
    ) -> ChatResponse:
        return respond(
            text, user, role, history,
            table=self.trigger_table,
            min_confidence=self.min_confidence,
            now=self.clock(),
        )

    async def execute_function(
        self,
        action,
        params: Optional[Dict[str, Any]],
        user: Optional[UserProfile],
        role,
    ) -> FunctionResult:
        return await self.executor.execute(action, params, user, role)

    def list_records(self, record_type) -> List[Dict[str, Any]]:
        """All records of *record_type*, oldest first. Raises UnknownRecordTypeError."""
        return self.store.list(record_type)


_default_service: Optional[ChatbotService] = None


def get_service() -> ChatbotService:
    """Process-wide service built from settings on first use."""
    global _default_service
    if _default_service is None:
        _default_service = ChatbotService()
    return _default_service
