"""Pydantic contracts for data crossing the LLM boundary."""

from models.schemas.enhancement import Enhancement

__all__ = ["Enhancement"]
