# Role: Local developer CLI to interact with FlowController without the web UI.
# Useful for deterministic testing and seeing debug logs in the terminal.

from __future__ import annotations
import uuid

import campus_copilot.config
campus_copilot.config.load_env()

from campus_copilot.api.deps import build_data_source
from campus_copilot.core.flow_controller import FlowController
from campus_copilot.models.principal import Degree, Principal, Role


def _new_principal_id() -> str:
    return str(uuid.uuid4())


def main() -> None:
    # 1) Create FlowController over the configured campus data
    # 2) Maintain a principal (id/role/degree) and language hint across turns
    # 3) Route user input -> FlowController -> print the wire reply
    print("Campus Copilot CLI")
    print("Commands: /new, /role <student|staff|admin>, /degree <IT|AI|Design|General|none>, /lang <en|si|ta|auto>, /clear, /exit")
    print("-" * 50)

    flow = FlowController(data_source=build_data_source())
    principal = Principal(id=_new_principal_id(), role=Role.STUDENT, degree=Degree.IT)
    language = None
    print(f"principal: {principal.id} ({principal.role.value}, {principal.degree.value})")

    while True:
        try:
            user_message = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_message:
            continue

        cmd, _, arg = user_message.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in {"/exit", "/quit"}:
            print("Bye!")
            return

        if cmd == "/new":
            principal = principal.model_copy(update={"id": _new_principal_id()})
            print(f"New principal: {principal.id}")
            continue

        if cmd == "/role":
            try:
                principal = principal.model_copy(update={"role": Role(arg.lower())})
            except ValueError:
                print("Roles: student, staff, admin")
                continue
            print(f"role: {principal.role.value}")
            continue

        if cmd == "/degree":
            if arg.lower() == "none":
                principal = principal.model_copy(update={"degree": None})
                print("degree: not set")
                continue
            match = next((d for d in Degree if d.value.lower() == arg.lower()), None)
            if match is None:
                print("Degrees: " + ", ".join(d.value for d in Degree) + ", none")
                continue
            principal = principal.model_copy(update={"degree": match})
            print(f"degree: {match.value}")
            continue

        if cmd == "/lang":
            language = None if arg.lower() in {"", "auto"} else arg.lower()
            print(f"language: {language or 'auto'}")
            continue

        if cmd == "/clear":
            with flow.state_manager.lock_for(principal.id):
                flow.state_manager.clear_conversation(principal.id)
                flow.state_manager.end_session(principal.id)
            print("Conversation cleared.")
            continue

        result = flow.handle_turn(principal, user_message, language_hint=language)
        print(f"\nAssistant [{result.intent.value}/{result.language}]: {result.text}")


if __name__ == "__main__":
    main()
