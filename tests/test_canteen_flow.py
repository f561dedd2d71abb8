import pytest

from campus_copilot.core.canteen_flow import CanteenFlow, match_canteen, match_meal
from campus_copilot.models.reply import CanteenTable, TextReply
from campus_copilot.models.state import CanteenStep, ConversationState, State
from campus_copilot.prompts.responses import variants


def _expected(key, **values):
    return {v.format(**values) for v in variants(key, "en")}


@pytest.fixture
def state():
    return State(principal_id="p1")


def test_match_canteen():
    names = ["Main Canteen", "Juice Bar"]
    assert match_canteen("main canteen", names) == "Main Canteen"
    assert match_canteen("the juice bar please", names) == "Juice Bar"
    assert match_canteen("maine canteen", names) == "Main Canteen"
    assert match_canteen("pizza hut", names) is None


def test_match_meal():
    assert match_meal("lunch please") == "lunch"
    assert match_meal("breakfst") == "breakfast"
    assert match_meal("இரவு உணவு") == "dinner"
    assert match_meal("brunch") is None


def test_start_shows_canteen_table(campus_data, state):
    reply = CanteenFlow(campus_data).start(state, "en")
    assert isinstance(reply, CanteenTable)
    assert state.canteen.step == CanteenStep.AWAITING_CANTEEN


def test_start_without_canteens_stays_idle(state):
    from campus_copilot.tools.campus_data import JsonCampusData

    reply = CanteenFlow(JsonCampusData({})).start(state, "en")
    assert reply.body in _expected("canteen_none")
    assert state.canteen.step == CanteenStep.IDLE


def test_start_fetch_error_stays_idle(raising_data, state):
    reply = CanteenFlow(raising_data).start(state, "en")
    assert reply.body in _expected("error_fetching_canteen")
    assert state.canteen.step == CanteenStep.IDLE


def test_valid_canteen_moves_to_awaiting_meal(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_CANTEEN)
    reply = CanteenFlow(campus_data).on_canteen(state, "Main Canteen", "en")
    assert reply.body in _expected("canteen_ask_meal", canteen="Main Canteen")
    assert state.canteen.step == CanteenStep.AWAITING_MEAL
    assert state.canteen.canteen == "Main Canteen"


def test_unknown_canteen_stays_and_relists(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_CANTEEN)
    reply = CanteenFlow(campus_data).on_canteen(state, "pizza hut", "en")
    assert reply.body in _expected("canteen_invalid", name="pizza hut", choices="Main Canteen, Juice Bar")
    assert state.canteen.step == CanteenStep.AWAITING_CANTEEN


def test_canteen_fetch_error_resets(raising_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_CANTEEN)
    reply = CanteenFlow(raising_data).on_canteen(state, "Main Canteen", "en")
    assert reply.body in _expected("error_fetching_canteen")
    assert state.canteen.step == CanteenStep.IDLE


def test_meal_lists_dishes_and_resets(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_MEAL, canteen="Main Canteen")
    reply = CanteenFlow(campus_data).on_meal(state, "lunch", "en")
    assert isinstance(reply, TextReply)
    assert "- Rice" in reply.body and "- Curry" in reply.body
    assert state.canteen == ConversationState()


def test_invalid_meal_stays_awaiting_meal(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_MEAL, canteen="Main Canteen")
    reply = CanteenFlow(campus_data).on_meal(state, "brunch", "en")
    assert reply.body in _expected("meal_invalid", name="brunch")
    assert state.canteen.step == CanteenStep.AWAITING_MEAL


def test_empty_meal_reports_and_resets(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_MEAL, canteen="Main Canteen")
    reply = CanteenFlow(campus_data).on_meal(state, "breakfast", "en")
    assert reply.body in _expected("menu_empty", canteen="Main Canteen", meal="breakfast")
    assert state.canteen.step == CanteenStep.IDLE


def test_vanished_canteen_terminates_the_flow(campus_data, state):
    state.canteen = ConversationState(step=CanteenStep.AWAITING_MEAL, canteen="Old Canteen")
    reply = CanteenFlow(campus_data).on_meal(state, "dinner", "en")
    assert reply.body in _expected("canteen_gone", canteen="Old Canteen")
    assert state.canteen.step == CanteenStep.IDLE


def test_idle_state_cannot_carry_a_canteen():
    with pytest.raises(ValueError):
        ConversationState(step=CanteenStep.IDLE, canteen="Main Canteen")
    with pytest.raises(ValueError):
        ConversationState(step=CanteenStep.AWAITING_MEAL)
