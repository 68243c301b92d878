from venue_ops.observability.logger import (
    get_logger,
    get_session_id,
    new_session_id,
    set_session_id,
    setup_logging,
)

__all__ = [
    "get_logger",
    "get_session_id",
    "new_session_id",
    "set_session_id",
    "setup_logging",
]
