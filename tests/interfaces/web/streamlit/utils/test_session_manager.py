"""SessionManager tests."""

from election_portal.interfaces.web.streamlit.utils.session_manager import (
    SessionManager,
)


class TestSessionManager:
    def test_get_or_create_stores_default_once(self) -> None:
        state: dict = {}
        session = SessionManager(state=state)

        assert session.get_or_create("page", 1) == 1
        session.set("page", 3)
        assert session.get_or_create("page", 1) == 3

    def test_namespace(self) -> None:
        state: dict = {}
        session = SessionManager(namespace="dash_", state=state)

        session.set("page", 2)

        assert state == {"dash_page": 2}
        assert session.get("page") == 2

    def test_delete_and_default(self) -> None:
        session = SessionManager(state={"page": 2})

        session.delete("page")
        session.delete("missing")

        assert session.get("page", 5) == 5
