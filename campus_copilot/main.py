# Role: FastAPI app bootstrap. Loads environment config early, registers routers, and exposes health/docs endpoints.

from fastapi import FastAPI

import campus_copilot.config
campus_copilot.config.load_env()

from campus_copilot.api.chat import router as chat_router
from campus_copilot.api.conversation import router as conversation_router
from campus_copilot.api.state import router as state_router

app = FastAPI(title="Campus Copilot API", version="0.1.0")
app.include_router(chat_router)
app.include_router(conversation_router)
app.include_router(state_router)


@app.get("/")
def root() -> dict:
    # Role: quick discoverability for clients (where are docs/health).
    return {
        "message": "Campus Copilot API is running",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
