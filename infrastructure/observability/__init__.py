"""
Observability: structured logging and context management.

Provides:
- Contextual logging with session/taxonomy fields
- Log rotation and file management
"""

from infrastructure.observability.logging import (
    configure_logging,
    make_session_tag,
    set_log_context,
    taxonomy_log_context,
)

__all__ = [
    "configure_logging",
    "set_log_context",
    "taxonomy_log_context",
    "make_session_tag",
]
