"""Services for the Timeweb Cloud AI client."""

from .dispatcher import Dispatcher, build_query_string

__all__ = ["Dispatcher", "build_query_string"]
