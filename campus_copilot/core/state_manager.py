# Role: In-memory per-principal store. Owns lifecycle of State objects:
# create/get by principal_id, append-only conversation, per-principal turn locks, and cleanup of idle dialog state.

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone
from typing import Dict, List

from campus_copilot.models.message import Message
from campus_copilot.models.state import ConversationState, FallbackCounter, State


class StateManager:
    def __init__(self, session_ttl_minutes: int = 60) -> None:
        self._states: Dict[str, State] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        self._ttl = timedelta(minutes=session_ttl_minutes)

    def lock_for(self, principal_id: str) -> threading.Lock:
        # Key line: one lock per principal serializes that principal's turns (double-submit safe).
        with self._registry_lock:
            lock = self._locks.get(principal_id)
            if lock is None:
                lock = threading.Lock()
                self._locks[principal_id] = lock
            return lock

    def get_or_create(self, principal_id: str) -> State:
        # Reuse existing state or initialize a fresh one.
        with self._registry_lock:
            state = self._states.get(principal_id)
            if state is None:
                state = State(principal_id=principal_id)
                self._states[principal_id] = state
            return state

    def append_message(self, principal_id: str, message: Message) -> State:
        # 1) Keep timestamps monotonic within a conversation
        # 2) Append (never rewrite history)
        # 3) Update last-seen timestamp
        state = self.get_or_create(principal_id)
        if state.conversation and message.timestamp < state.conversation[-1].timestamp:
            message = message.model_copy(update={"timestamp": state.conversation[-1].timestamp})
        state.conversation.append(message)
        state.updated_at = datetime.now(timezone.utc)
        return state

    def get_conversation(self, principal_id: str) -> List[Message]:
        return list(self.get_or_create(principal_id).conversation)

    def clear_conversation(self, principal_id: str) -> None:
        state = self.get_or_create(principal_id)
        state.conversation = []
        state.updated_at = datetime.now(timezone.utc)

    def increment_turn(self, state: State) -> None:
        state.turn_count += 1
        state.updated_at = datetime.now(timezone.utc)

    def end_session(self, principal_id: str) -> None:
        # Role: drop transient dialog memory (canteen flow, fallback counter, game offer); history stays.
        state = self.get_or_create(principal_id)
        self._reset_dialog(state)

    def expire_if_idle(self, state: State) -> bool:
        # Role: reset one principal's dialog memory when it sat idle past the TTL; caller holds its lock.
        if (datetime.now(timezone.utc) - state.updated_at) <= self._ttl:
            return False
        self._reset_dialog(state)
        return True

    def cleanup_expired(self) -> int:
        # Role: sweep every principal idle longer than the TTL (best for long-running servers).
        with self._registry_lock:
            states = list(self._states.values())
        return sum(1 for st in states if self.expire_if_idle(st))

    def _reset_dialog(self, state: State) -> None:
        state.canteen = ConversationState()
        state.fallback = FallbackCounter()
        state.pending_game = None
