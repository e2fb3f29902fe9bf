"""Dependency injection (session)"""

from functools import lru_cache

from friendsplit.config import get_settings
from friendsplit.services.session_service import SplitterSession, create_session


@lru_cache()
def get_session() -> SplitterSession:
    """
    Get the process-wide bill-splitting session.

    Created on first use from settings. Tests override this dependency
    with a fresh session.

    Returns:
        SplitterSession: Current session
    """
    return create_session(get_settings())
