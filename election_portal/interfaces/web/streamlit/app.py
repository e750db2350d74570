"""Streamlit entry point.

Run with ``streamlit run election_portal/interfaces/web/streamlit/app.py``.
"""

import streamlit as st

from election_portal.common.logging import setup_logging
from election_portal.infrastructure.config.sentry import init_sentry
from election_portal.infrastructure.config.settings import get_settings
from election_portal.interfaces.web.streamlit.views.candidates_view import (
    render_candidates_page,
)


def main() -> None:
    settings = get_settings()
    setup_logging(level=settings.LOG_LEVEL, log_format=settings.LOG_FORMAT)
    init_sentry(settings)

    st.set_page_config(page_title="Election Candidates", layout="wide")
    render_candidates_page()


main()
