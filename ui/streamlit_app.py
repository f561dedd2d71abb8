# Role: Streamlit chat UI.
# - Backend is authoritative (chat + snapshot).
# - Sentinel replies (map link, game link, module list, canteen picker) are rendered as widgets, never as raw text.

from __future__ import annotations

import os
import uuid
from typing import Any, Dict, Optional
from urllib.parse import quote

import requests
import streamlit as st

BACKEND_URL = os.getenv("BACKEND_URL", "http://127.0.0.1:8000")
GAME_URL = os.getenv("GAME_URL", "http://127.0.0.1:3000/game")
INSIGHTS_URL = os.getenv("INSIGHTS_URL", "http://127.0.0.1:3000/insights")

ROLES = ["student", "staff", "admin"]
DEGREES = ["IT", "AI", "Design", "General", "Not set"]
LANGUAGES = {"Auto": None, "English": "en", "සිංහල": "si", "தமிழ்": "ta"}


# ----------------------------
# Session helpers
# ----------------------------
def ensure_session() -> None:
    if "principal_id" not in st.session_state:
        st.session_state["principal_id"] = str(uuid.uuid4())
    if "messages" not in st.session_state:
        st.session_state["messages"] = []
    if "busy" not in st.session_state:
        st.session_state["busy"] = False
    if "snapshot" not in st.session_state:
        st.session_state["snapshot"] = None


# ----------------------------
# Backend calls
# ----------------------------
def send_to_backend(payload: Dict[str, Any]) -> Dict[str, Any]:
    resp = requests.post(f"{BACKEND_URL}/chat", json=payload, timeout=30)
    resp.raise_for_status()
    return resp.json()


def fetch_snapshot(principal_id: str) -> Optional[Dict[str, Any]]:
    try:
        r = requests.get(f"{BACKEND_URL}/state/{principal_id}", timeout=10)
        if r.status_code != 200:
            return None
        return r.json()
    except requests.RequestException:
        return None


def clear_conversation(principal_id: str) -> None:
    try:
        requests.delete(f"{BACKEND_URL}/conversation/{principal_id}", timeout=10)
    except requests.RequestException:
        pass


# ----------------------------
# UI polish
# ----------------------------
def inject_css() -> None:
    st.markdown(
        """
<style>
.block-container { max-width: 1100px; padding-top: 2rem; padding-bottom: 2rem; }
section[data-testid="stSidebar"] .block-container { padding-top: 1.25rem; }
.stButton>button { border-radius: 12px !important; font-weight: 650 !important; }

.cc-card {
  border: 1px solid rgba(49, 51, 63, 0.14);
  border-radius: 16px;
  padding: 14px;
}
.cc-row { display: flex; justify-content: space-between; padding: 6px 2px; }
.cc-k { font-size: 0.85rem; opacity: 0.72; }
.cc-v { font-weight: 700; }
</style>
""",
        unsafe_allow_html=True,
    )


# ----------------------------
# Reply rendering
# ----------------------------
def render_reply(text: str) -> None:
    # Sentinels are exact prefixes; anything else is prose.
    if text.startswith("LOCATION_REDIRECT:"):
        _, name, encoded = text.split(":", 2)
        st.markdown(f"📍 **{name}**")
        st.link_button("Open in map", f"https://www.google.com/maps/search/?api=1&query={encoded or quote(name)}")
        return

    if text == "GAME_REDIRECT:game":
        st.markdown("🎮 Time for a quick campus quiz!")
        st.link_button("Play the quiz", GAME_URL)
        return

    if text == "INSIGHTS_GAME_REDIRECT:sentiment":
        st.markdown("🌤️ Let's check in on how you're feeling.")
        st.link_button("Open mood insights", INSIGHTS_URL)
        return

    if text.startswith("MODULE_LIST:"):
        modules = [m for m in text[len("MODULE_LIST:"):].split("|") if m]
        st.markdown("📚 **Your modules**")
        st.markdown("\n".join(f"- {m}" for m in modules))
        return

    if text == "SHOW_CANTEEN_TABLE":
        st.markdown("🍽️ **Which canteen?** Type the canteen name to see its menu.")
        return

    st.write(text)


def _row(label: str, value: Any) -> str:
    return f'<div class="cc-row"><span class="cc-k">{label}</span><span class="cc-v">{value}</span></div>'


# ----------------------------
# Sidebar: who am I + dialog snapshot
# ----------------------------
def render_sidebar() -> None:
    st.sidebar.title("You")
    st.sidebar.selectbox("Role", ROLES, key="role", disabled=st.session_state["busy"])
    st.sidebar.selectbox("Degree", DEGREES, key="degree", disabled=st.session_state["busy"])
    st.sidebar.selectbox("Language", list(LANGUAGES), key="language", disabled=st.session_state["busy"])

    if st.sidebar.button("📝 New chat", use_container_width=True, disabled=st.session_state["busy"]):
        clear_conversation(st.session_state["principal_id"])
        st.session_state["principal_id"] = str(uuid.uuid4())
        st.session_state["messages"] = []
        st.session_state["snapshot"] = None
        st.rerun()

    st.sidebar.divider()

    snap = st.session_state.get("snapshot")
    if not snap:
        st.sidebar.info("Say hi to get started.")
        return

    card = "".join(
        [
            _row("Canteen step", snap.get("canteen_step") or "idle"),
            _row("Canteen", snap.get("canteen") or "—"),
            _row("Misses in a row", snap.get("fallback_count", 0)),
            _row("Game offer", snap.get("pending_game") or "—"),
            _row("Turns", snap.get("turn_count", 0)),
        ]
    )
    st.sidebar.markdown(f'<div class="cc-card">{card}</div>', unsafe_allow_html=True)


# ----------------------------
# Chat
# ----------------------------
def render_chat() -> None:
    for msg in st.session_state["messages"]:
        with st.chat_message(msg["role"]):
            if msg["role"] == "assistant":
                render_reply(msg["content"])
            else:
                st.write(msg["content"])


def _payload(user_input: str) -> Dict[str, Any]:
    degree = st.session_state.get("degree", DEGREES[0])
    return {
        "principal_id": st.session_state["principal_id"],
        "role": st.session_state.get("role", ROLES[0]),
        "degree": None if degree == "Not set" else degree,
        "message": user_input,
        "language": LANGUAGES.get(st.session_state.get("language", "Auto")),
    }


# ----------------------------
# Main
# ----------------------------
def main() -> None:
    st.set_page_config(page_title="Campus Copilot", page_icon="🎓", layout="wide")
    inject_css()

    st.title("🎓 Campus Copilot")
    st.caption("Ask about your classes, buses, events, modules, campus places, or the canteen menu.")

    ensure_session()
    render_sidebar()
    render_chat()

    user_input = st.chat_input("Ask me anything about campus…", disabled=st.session_state["busy"])
    if not user_input:
        return

    # Echo user message immediately
    st.session_state["messages"].append({"role": "user", "content": user_input})
    with st.chat_message("user"):
        st.write(user_input)

    st.session_state["busy"] = True
    try:
        with st.spinner("Thinking..."):
            data = send_to_backend(_payload(user_input))

        st.session_state["messages"].append({"role": "assistant", "content": data["text"]})
        with st.chat_message("assistant"):
            render_reply(data["text"])

        # Refresh snapshot after each turn
        st.session_state["snapshot"] = fetch_snapshot(st.session_state["principal_id"])

    except requests.RequestException:
        msg = f"I couldn't reach the backend. Make sure the API is running on {BACKEND_URL}."
        st.session_state["messages"].append({"role": "assistant", "content": msg})
        with st.chat_message("assistant"):
            st.error(msg)
    finally:
        st.session_state["busy"] = False


if __name__ == "__main__":
    main()
