"""Endpoint groups for the Timeweb Cloud AI client."""

from .agents import AgentsAPI
from .conversations import ConversationsAPI
from .responses import ResponsesAPI

__all__ = ["AgentsAPI", "ConversationsAPI", "ResponsesAPI"]
