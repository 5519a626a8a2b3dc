"""
Function executor: the single failure boundary between the assistant and
its side effects.

execute() always returns a FunctionResult. Role checks, parameter
validation, the simulated latency, the store write and the narrative all
happen inside it; nothing raises past it.
"""

from typing import Dict, Any, Optional, Mapping

from models import (
    FunctionName, FunctionResult, UserProfile, Role, ExecutionState,
)
from capability_registry import capabilities_for
from function_params import build_params
from handlers import FUNCTION_HANDLERS, FunctionHandler, ExecutionContext
from record_store import RecordStore, InMemoryRecordStore
from providers import Clock, DelayStrategy, IdGenerator, utc_now, default_delay
from chat_logger import get_logger, loggable

logger = get_logger("greenledger_chat")


def not_available(action: str) -> FunctionResult:
    return FunctionResult(False, f"Function {action} is not available for your role.")


def execution_failed(action: str) -> FunctionResult:
    return FunctionResult(
        False,
        f"I encountered an error while executing {action}. "
        f"Please try again or contact support if the issue persists.",
    )


class FunctionExecutor:
    """
    Dispatches a function call to its registered handler.

    Clock, id generator and delay strategy are injected so tests can pin
    time and skip the simulated latency.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        handlers: Optional[Mapping[FunctionName, FunctionHandler]] = None,
        clock: Clock = utc_now,
        ids: Optional[IdGenerator] = None,
        delay: Optional[DelayStrategy] = None,
    ):
        self.handlers = handlers if handlers is not None else FUNCTION_HANDLERS
        self.context = ExecutionContext(
            store=store if store is not None else InMemoryRecordStore(),
            clock=clock,
            ids=ids or IdGenerator(clock),
            delay=delay or default_delay(),
        )

    @property
    def store(self) -> RecordStore:
        return self.context.store

    def _transition(self, action: str, state: ExecutionState, detail: str = "") -> None:
        suffix = f" | {detail}" if detail else ""
        logger.info(f"Execute | function={action} | state={state.value}{suffix}")

    def _enrich(self, params: Optional[Dict[str, Any]], user: UserProfile, role: str) -> Dict[str, Any]:
        """Copy of *params* with requester_id and a context snapshot filled in."""
        bag = dict(params or {})
        bag.setdefault("requester_id", user.id)
        bag["context"] = {
            "name": user.name,
            "role": role,
            "location": user.region,
        }
        return bag

    async def execute(
        self,
        function_name,
        params: Optional[Dict[str, Any]],
        user,
        role,
    ) -> FunctionResult:
        action = function_name.value if isinstance(function_name, FunctionName) else str(function_name)
        try:
            if isinstance(user, Mapping):
                user = UserProfile.from_dict(dict(user))
            user = user or UserProfile()
            role_name = role.value if isinstance(role, Role) else str(role or "")
            self._transition(action, ExecutionState.RECEIVED, f"role={role_name} | user={user.id}")

            name = FunctionName.parse(function_name)
            entry = self.handlers.get(name) if name else None
            if entry is None:
                logger.error(f"Execute | function={action} | no handler registered")
                self._transition(action, ExecutionState.REJECTED)
                return not_available(action)

            if name not in capabilities_for(role).functions:
                logger.warning(f"Execute | function={action} | not granted to role={role_name}")
                self._transition(action, ExecutionState.REJECTED)
                return not_available(action)

            self._transition(action, ExecutionState.VALIDATING)
            typed = build_params(name, self._enrich(params, user, role_name))
            problem = typed.validate()
            if problem:
                self._transition(action, ExecutionState.REJECTED, f"reason={loggable(problem)}")
                return FunctionResult(False, problem)

            self._transition(action, ExecutionState.EXECUTING)
            await self.context.delay(entry.latency)
            result = await entry.run(typed, user, role_name, self.context)
        except Exception:
            logger.exception(f"Execute | function={action} | execution raised")
            self._transition(action, ExecutionState.FAILED)
            return execution_failed(action)

        self._transition(action, ExecutionState.COMPLETED, f"success={result.success}")
        return result
