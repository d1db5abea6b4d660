"""
=============================================================================
HANDLERS MODULE
=============================================================================

The route handlers. Each one is a plain, stateless function:

    handler(request, params) -> HTTPResponse

    ┌──────────────────────┬────────────────┬────────────────────────────┐
    │ Handler              │ Route          │ Body                       │
    ├──────────────────────┼────────────────┼────────────────────────────┤
    │ index_handler        │ /              │ (empty)                    │
    │ echo_handler         │ /echo/<suffix> │ <suffix>                   │
    │ user_agent_handler   │ */user-agent*  │ trimmed User-Agent header  │
    └──────────────────────┴────────────────┴────────────────────────────┘

Handlers never look at the target themselves; the router has already
matched it and passes what it extracted in params.

=============================================================================
"""

from .index import index_handler
from .echo import echo_handler
from .user_agent import user_agent_handler

__all__ = [
    "index_handler",
    "echo_handler",
    "user_agent_handler",
]
