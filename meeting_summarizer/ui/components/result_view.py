"""
Summary and action-item display components.
"""

import streamlit as st

from meeting_summarizer.core.models import ResultView, SummaryResult

NO_ACTION_ITEMS_NOTICE = "No specific action items identified"


def build_result_view(result: SummaryResult) -> ResultView:
    """Project a SummaryResult into what the page draws."""
    return ResultView(
        summary_points=list(result.summary),
        action_items=list(result.action_items),
        badge=str(len(result.action_items)),
        show_empty_notice=not result.action_items,
    )


def render_result(result: SummaryResult | None) -> None:
    """Render the "Meeting Summary" and "Action Items" cards.

    Args:
        result: Latest summary; ``None`` renders nothing.
    """
    if result is None:
        return

    view = build_result_view(result)

    with st.container(border=True):
        st.subheader("Meeting Summary")
        st.caption("Key points and decisions from your meeting")
        for point in view.summary_points:
            st.markdown(f"- {point}")

    with st.container(border=True):
        st.subheader(f"Action Items `{view.badge}`")
        st.caption("Follow-up tasks and responsibilities")
        if view.show_empty_notice:
            st.markdown(f"*{NO_ACTION_ITEMS_NOTICE}*")
        else:
            for item in view.action_items:
                st.markdown(f":white_check_mark: {item}")
