# Role: Read-only transparency endpoint for the UI.
# Does NOT change any flow logic. Only exposes current state snapshot by principal_id.

from fastapi import APIRouter
from pydantic import BaseModel

from campus_copilot.api.deps import flow_controller

router = APIRouter(tags=["state"])


class StateSnapshot(BaseModel):
    principal_id: str
    canteen_step: str
    canteen: str | None
    fallback_count: int
    pending_game: str | None
    last_intent: str | None
    turn_count: int


@router.get("/state/{principal_id}", response_model=StateSnapshot)
def get_state(principal_id: str) -> StateSnapshot:
    state = flow_controller.state_manager.get_or_create(principal_id)
    return StateSnapshot(
        principal_id=principal_id,
        canteen_step=state.canteen.step.name.lower(),
        canteen=state.canteen.canteen,
        fallback_count=state.fallback.count,
        pending_game=state.pending_game,
        last_intent=state.last_intent.value if state.last_intent else None,
        turn_count=state.turn_count,
    )
