"""Transient toast notifications shown after form submissions."""
import itertools
import logging
from dataclasses import dataclass
from typing import List

logger = logging.getLogger(__name__)


@dataclass
class Toast:
    id: int
    kind: str  # "success" | "error"
    message: str


class Notifier:
    """Queue of visible toasts; each can be dismissed."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._toasts: List[Toast] = []

    @property
    def toasts(self) -> List[Toast]:
        return list(self._toasts)

    def _push(self, kind: str, message: str) -> Toast:
        toast = Toast(id=next(self._ids), kind=kind, message=message)
        self._toasts.append(toast)
        logger.info("Toast %s: %s", kind, message)
        return toast

    def success(self, message: str) -> Toast:
        return self._push("success", message)

    def error(self, message: str) -> Toast:
        return self._push("error", message)

    def dismiss(self, toast_id: int) -> bool:
        for i, toast in enumerate(self._toasts):
            if toast.id == toast_id:
                self._toasts.pop(i)
                return True
        return False
