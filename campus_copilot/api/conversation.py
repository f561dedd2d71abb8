# Role: Conversation history endpoints. Reading returns the ordered transcript; deleting clears it
# and ends the dialog session for that principal.

from fastapi import APIRouter
from pydantic import BaseModel

from campus_copilot.api.deps import flow_controller
from campus_copilot.models.message import Message

router = APIRouter(tags=["conversation"])


class ConversationResponse(BaseModel):
    principal_id: str
    messages: list[Message]


@router.get("/conversation/{principal_id}", response_model=ConversationResponse)
def get_conversation(principal_id: str) -> ConversationResponse:
    messages = flow_controller.state_manager.get_conversation(principal_id)
    return ConversationResponse(principal_id=principal_id, messages=messages)


@router.delete("/conversation/{principal_id}")
def clear_conversation(principal_id: str) -> dict:
    manager = flow_controller.state_manager
    with manager.lock_for(principal_id):
        manager.clear_conversation(principal_id)
        manager.end_session(principal_id)
    return {"principal_id": principal_id, "cleared": True}
