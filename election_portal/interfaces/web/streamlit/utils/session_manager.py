"""Thin wrapper around Streamlit session state."""

from collections.abc import MutableMapping
from typing import Any

import streamlit as st


class SessionManager:
    """Namespaced access to ``st.session_state``.

    A plain mapping can be injected in place of the Streamlit session state,
    which keeps presenters usable outside a running Streamlit script.
    """

    def __init__(
        self,
        namespace: str = "",
        state: MutableMapping[str, Any] | None = None,
    ) -> None:
        self._namespace = namespace
        self._state = state if state is not None else st.session_state

    def _key(self, key: str) -> str:
        return f"{self._namespace}{key}" if self._namespace else key

    def get(self, key: str, default: Any = None) -> Any:
        return self._state.get(self._key(key), default)

    def set(self, key: str, value: Any) -> None:
        self._state[self._key(key)] = value

    def get_or_create(self, key: str, default: Any) -> Any:
        """Return the stored value, storing ``default`` first if missing."""
        full_key = self._key(key)
        if full_key not in self._state:
            self._state[full_key] = default
        return self._state[full_key]

    def delete(self, key: str) -> None:
        self._state.pop(self._key(key), None)
