"""Simple progress stepper for wizard navigation."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from wizard.controller import StepProgress


def format_step_caption(progress: StepProgress, titles: Sequence[str]) -> str:
    """Return the ``Step i of n: title`` caption for ``progress``."""

    if progress.submitted:
        return f"All {progress.total_steps} steps completed"
    title = titles[progress.step_index] if progress.step_index < len(titles) else ""
    caption = f"Step {progress.step_index + 1} of {progress.total_steps}"
    return f"{caption}: {title}" if title else caption


def render_stepper(progress: StepProgress, titles: Sequence[str]) -> None:
    """Render a progress bar labelled with the current step."""

    st.progress(progress.completion_ratio, text=format_step_caption(progress, titles))
