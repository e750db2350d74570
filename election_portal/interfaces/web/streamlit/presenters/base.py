"""Base class for Streamlit presenters."""

import asyncio

from abc import ABC, abstractmethod
from collections.abc import Coroutine
from typing import Any, Generic, TypeVar

from election_portal.common.logging import get_logger


T = TypeVar("T")
R = TypeVar("R")


class BasePresenter(ABC, Generic[T]):
    """Presenter between a Streamlit view and the application layer."""

    def __init__(self) -> None:
        self.logger = get_logger(self.__class__.__module__)

    @abstractmethod
    def load_data(self) -> T:
        """Load the data the view renders."""

    @abstractmethod
    def handle_action(self, action: str, **kwargs: Any) -> Any:
        """Handle a user action coming from the view."""

    def _run_async(self, coro: Coroutine[Any, Any, R]) -> R:
        """Run a coroutine to completion from synchronous Streamlit code."""
        return asyncio.run(coro)
