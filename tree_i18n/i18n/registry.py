"""Process-wide handle to the active translation session.

Host code installs one session at startup and hands the registry (or the
session it returns) to whatever needs translations, instead of looking
the session up implicitly from a view or request object.
"""

from typing import Optional

from tree_i18n.i18n.errors import SessionNotInstalledError
from tree_i18n.i18n.translator import TranslationSession
from tree_i18n.logging import get_module_logger

logger = get_module_logger()


class SessionRegistry:
    """Holds the single active TranslationSession."""

    def __init__(self):
        self._session: Optional[TranslationSession] = None

    @property
    def is_installed(self) -> bool:
        return self._session is not None

    def install(self, session: TranslationSession) -> None:
        """Make `session` the active session, replacing any previous one."""
        replaced = self._session is not None
        self._session = session
        logger.debug("translation_session_installed", replaced=replaced)

    def current(self) -> TranslationSession:
        """Return the active session.

        Raises:
            SessionNotInstalledError: If no session has been installed.
        """
        session = self._session
        if session is None:
            raise SessionNotInstalledError(
                "No translation session installed; call install() at startup"
            )
        return session

    def clear(self) -> None:
        """Discard the active session (application teardown)."""
        self._session = None
        logger.debug("translation_session_cleared")
