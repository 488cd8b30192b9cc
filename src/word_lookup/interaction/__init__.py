"""
Interaction layer: confirmation prompts and answer classification.

Sits between the console and the resolution engine.
"""
from .user_response import UserResponse
from .prompter import ConfirmationPrompter, CONFIRMATION_PROMPT

__all__ = ["UserResponse", "ConfirmationPrompter", "CONFIRMATION_PROMPT"]
