"""Shared dependencies for API routes."""

from fastapi import Request

from config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_llm_client(request: Request):
    """The LLM client built at startup, or None when enhancement is disabled."""
    return getattr(request.app.state, "llm_client", None)
