"""Utility helpers for rendering error messages in Streamlit."""

from __future__ import annotations

import streamlit as st


def display_field_error(message: str | None) -> None:
    """Render a validation message inline below its field, if any."""

    if message:
        st.caption(f":red[{message}]")


def display_error(msg: str, detail: str | None = None, *, show_detail: bool = False) -> None:
    """Render a developer-facing failure with optional technical details.

    Args:
        msg: Short error message.
        detail: Optional technical detail such as a schema error list.
        show_detail: Reveal ``detail`` in an expander (debug deployments).
    """

    st.error(msg)
    if detail and show_detail:
        with st.expander("Details"):
            st.code(detail)
