"""Interfaces of the hosting view layer and the base view helper.

The hosting framework owns requests, responses and views. viewlocale only
needs the few accessors declared here as Protocols; any object providing
them works.

Python 3.11+.
"""

from __future__ import annotations

import logging
from typing import Protocol, Self

__all__ = ["Request", "Response", "View", "ViewHelper"]

logger = logging.getLogger(__name__)


class Request(Protocol):
    """Active request: resolved language and territory."""

    def get_lang(self) -> str | None: ...

    def get_locale(self) -> str | None: ...


class Response(Protocol):
    """Active response: target output encoding."""

    def get_encoding(self) -> str | None: ...


class View(Protocol):
    """View being rendered; response may be None before it exists."""

    request: Request
    response: Response | None


class ViewHelper:
    """Base class for helpers bound to a view once per render pass.

    Attributes:
        view: Currently bound view, None until ``bind_view``
        request: Request of the bound view
        response: Response of the bound view, may be None
    """

    def __init__(self) -> None:
        self.view: View | None = None
        self.request: Request | None = None
        self.response: Response | None = None

    def bind_view(self, view: View) -> Self:
        """Bind the helper to the view being rendered.

        Called by the hosting framework on every render; later calls replace
        the previous binding.
        """
        self.view = view
        self.request = view.request
        self.response = getattr(view, "response", None)
        logger.debug("%s bound to %r", type(self).__name__, view)
        return self
