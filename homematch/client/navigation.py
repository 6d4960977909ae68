import logging
from typing import Callable, List

logger = logging.getLogger(__name__)

NavigationListener = Callable[[str], None]


class Navigator:
    """Tracks the page the user is on and announces every move"""

    def __init__(self, start_path: str = "/"):
        self.current_path = start_path
        self.history: List[str] = [start_path]
        self._listeners: List[NavigationListener] = []

    def add_listener(self, listener: NavigationListener) -> None:
        self._listeners.append(listener)

    def navigate(self, path: str) -> None:
        logger.info(f"Navigating to {path}", extra={"from_path": self.current_path})
        self.current_path = path
        self.history.append(path)
        for listener in list(self._listeners):
            listener(path)
