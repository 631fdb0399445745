"""Single active modal: opening one replaces any other; closing unmounts its content."""
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

logger = logging.getLogger(__name__)


@dataclass
class ModalSpec:
    title: str
    # Builds fresh content; receives the close callback for the content to call
    factory: Callable[[Callable[[], None]], Any]


class ModalController:
    """Owner of the active modal id."""

    def __init__(self) -> None:
        self._modals: Dict[str, ModalSpec] = {}
        self._active: Optional[str] = None
        self._content: Any = None

    def register(self, name: str, title: str, factory: Callable[[Callable[[], None]], Any]) -> None:
        self._modals[name] = ModalSpec(title=title, factory=factory)

    @property
    def active(self) -> Optional[str]:
        return self._active

    @property
    def content(self) -> Any:
        """Content of the open modal, or None."""
        return self._content

    @property
    def title(self) -> Optional[str]:
        if self._active is None:
            return None
        return self._modals[self._active].title

    def is_open(self, name: str) -> bool:
        return self._active == name

    def open(self, name: str) -> Any:
        """Show a modal by name. Raises KeyError for unknown names."""
        spec = self._modals[name]
        if self._active == name:
            return self._content
        self._unmount()
        self._active = name
        self._content = spec.factory(self.close)
        logger.debug("Modal opened: %s", name)
        return self._content

    def close(self) -> None:
        if self._active is None:
            return
        logger.debug("Modal closed: %s", self._active)
        self._unmount()
        self._active = None

    def _unmount(self) -> None:
        unmount = getattr(self._content, "unmount", None)
        if unmount is not None:
            unmount()
        self._content = None
