# Role: Thin HTTP adapter for the chat endpoint. Validates request/response shapes and delegates the entire
# conversation turn to FlowController (business logic lives in core, not in the API layer).

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from campus_copilot.api.deps import flow_controller
from campus_copilot.core.flow_controller import EmptyMessageError
from campus_copilot.models.principal import Degree, Principal, Role

router = APIRouter(tags=["chat"])


class ChatRequest(BaseModel):
    principal_id: str = Field(min_length=1)
    role: Role = Role.STUDENT
    degree: Optional[Degree] = None
    message: str
    language: Optional[str] = None


class ChatResponse(BaseModel):
    principal_id: str
    text: str
    kind: str
    language: str
    intent: str


@router.post("/chat", response_model=ChatResponse)
def chat(req: ChatRequest) -> ChatResponse:
    # 1) Build the principal from the request
    # 2) Forward the message to the orchestrator
    # 3) Return the serialized reply plus its kind for UI rendering
    principal = Principal(id=req.principal_id, role=req.role, degree=req.degree)
    try:
        result = flow_controller.handle_turn(principal, req.message, language_hint=req.language)
    except EmptyMessageError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return ChatResponse(
        principal_id=result.principal_id,
        text=result.text,
        kind=result.reply.kind,
        language=result.language,
        intent=result.intent.value,
    )
