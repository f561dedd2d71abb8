# Role: Orchestrator for one conversation turn. It glues together:
# language detection, intent classification, reply composition, sentiment scoring, and persistence.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

import campus_copilot.config as config
from campus_copilot.core.canteen_flow import CanteenFlow
from campus_copilot.core.fallback_handler import FallbackHandler
from campus_copilot.core.response_composer import ResponseComposer
from campus_copilot.core.state_manager import StateManager
from campus_copilot.core.validator import Validator
from campus_copilot.models.intent import Intent
from campus_copilot.models.message import Message
from campus_copilot.models.principal import Principal
from campus_copilot.models.reply import Reply, TextReply, serialize_reply
from campus_copilot.nlp.intent_classifier import IntentClassifier
from campus_copilot.nlp.language_detector import LanguageDetector
from campus_copilot.nlp.sentiment import analyze_sentiment, sentiment_label
from campus_copilot.prompts.responses import render


class EmptyMessageError(ValueError):
    """Raised for a blank user message; nothing is stored for such a turn."""


@dataclass(frozen=True)
class TurnResponse:
    principal_id: str
    reply: Reply
    language: str
    intent: Intent

    @property
    def text(self) -> str:
        return serialize_reply(self.reply)


class FlowController:
    def __init__(
        self,
        state_manager: Optional[StateManager] = None,
        intent_classifier: Optional[IntentClassifier] = None,
        language_detector: Optional[LanguageDetector] = None,
        composer: Optional[ResponseComposer] = None,
        data_source=None,
    ) -> None:
        # Key line: dependencies are injectable for testing/mocking.
        self.state_manager = state_manager or StateManager(session_ttl_minutes=config.SESSION_TTL_MINUTES)
        self.intent_classifier = intent_classifier or IntentClassifier()
        self.language_detector = language_detector or LanguageDetector(
            use_transliteration_hints=config.TRANSLITERATION_HINTS
        )
        if composer is None:
            if data_source is None:
                raise ValueError("FlowController needs either a composer or a data_source")
            composer = ResponseComposer(
                data_source,
                validator=Validator(),
                canteen_flow=CanteenFlow(data_source),
                fallback_handler=FallbackHandler(escalation_threshold=config.FALLBACK_ESCALATION_THRESHOLD),
            )
        self.composer = composer

    def handle_turn(self, principal: Principal, message_text: str, language_hint: Optional[str] = None) -> TurnResponse:
        # 1) Reject blank input before touching state
        # 2) Drop dialog memory that outlived the session TTL
        #    Detect language, classify against the current state
        # 3) Consume the one-turn game offer, compose the reply
        # 4) Persist user + bot messages, bookkeeping
        if message_text is None or not message_text.strip():
            raise EmptyMessageError("message must not be empty")

        lock = self.state_manager.lock_for(principal.id)
        with lock:
            state = self.state_manager.get_or_create(principal.id)
            # Key line: a canteen flow or game offer left open past the TTL must not capture this message.
            if self.state_manager.expire_if_idle(state) and config.DEBUG:
                print("SESSION EXPIRED:", principal.id)
            language = self.language_detector.detect(message_text, hint=language_hint)
            result = self.intent_classifier.classify(message_text, state)

            # Key line: a game offer only survives until the next message, whatever it is.
            state.pending_game = None

            try:
                reply = self.composer.compose(
                    result=result,
                    principal=principal,
                    state=state,
                    user_message=message_text,
                    language=language,
                )
            except Exception as e:
                if config.DEBUG:
                    print("\n!!! COMPOSE ERROR !!!")
                    print(repr(e))
                    print("!!! END ERROR !!!\n")
                reply = TextReply(body=render("error_generic", language))

            wire_text = serialize_reply(reply)
            sentiment = analyze_sentiment(message_text)
            now = datetime.now(timezone.utc)
            self.state_manager.append_message(
                principal.id,
                Message(text=message_text, is_user=True, timestamp=now, sentiment=sentiment),
            )
            self.state_manager.append_message(principal.id, Message(text=wire_text, is_user=False, timestamp=now))

            state.last_intent = result.intent
            self.state_manager.increment_turn(state)

            if config.DEBUG:
                print("\n--- FLOW DEBUG ---")
                print("PRINCIPAL:", principal.id, principal.role.value, principal.degree)
                print("USER MESSAGE:", message_text)
                print("LANGUAGE:", language)
                print("SENTIMENT:", sentiment, sentiment_label(sentiment))
                print("INTENT:", result.intent.value, "via", result.rule)
                print("ENTITIES:", result.entities)
                print("COMPOUND:", result.compound)
                print("CANTEEN STATE:", state.canteen.model_dump())
                print("FALLBACK COUNT:", state.fallback.count)
                print("PENDING GAME:", state.pending_game)
                print("TURN COUNT:", state.turn_count)
                print("REPLY:", wire_text)
                print("------------------\n")

            return TurnResponse(principal_id=principal.id, reply=reply, language=language, intent=result.intent)
