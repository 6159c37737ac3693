from __future__ import annotations

from io import BytesIO

import pandas as pd
import streamlit as st

from ticket_triage.engine import InvalidTicketInput, analyze_ticket, classify_ticket
from ticket_triage.pipeline import build_triage_report, triage_tickets
from ticket_triage.visualization import build_distribution_figure, build_score_figure


st.set_page_config(page_title="Ticket Triage", page_icon="🎫", layout="wide")


@st.cache_data(show_spinner=False)
def _load_uploaded_file(file_name: str, payload: bytes) -> pd.DataFrame:
    buffer = BytesIO(payload)
    if file_name.lower().endswith(".csv"):
        return pd.read_csv(buffer)
    return pd.read_excel(buffer)


@st.cache_data(show_spinner=False)
def _triage_cached(df: pd.DataFrame) -> pd.DataFrame:
    return triage_tickets(df)


st.title("Ticket Triage")
st.caption("Classify support requests by category and priority, and draft a short summary.")

single_tab, batch_tab = st.tabs(["Single Ticket", "Batch Upload"])

with single_tab:
    title = st.text_input("Title", placeholder="Login page crashes")
    description = st.text_area("Description", placeholder="Describe the problem or request", height=160)

    if st.button("Analyze"):
        try:
            result = analyze_ticket(title, description)
        except InvalidTicketInput as exc:
            st.error(str(exc))
        else:
            col1, col2 = st.columns(2)
            col1.metric("Category", result.category)
            col2.metric("Priority", result.priority)
            st.subheader("Summary")
            st.write(result.summary)

            scores = classify_ticket(title, description)
            st.plotly_chart(build_score_figure(scores), use_container_width=True)

with batch_tab:
    uploaded = st.file_uploader("Upload ticket dump", type=["xlsx", "csv"])
    if uploaded is None:
        st.info("Upload a CSV or Excel export with title and description columns.")
    else:
        raw = _load_uploaded_file(uploaded.name, uploaded.getvalue())
        triaged = _triage_cached(raw)
        report = build_triage_report(triaged)

        col1, col2 = st.columns(2)
        col1.metric("Total Tickets", f"{report['total_tickets']}")
        col2.metric("Missing Title/Description", f"{report['invalid_tickets']}")

        left, right = st.columns(2)
        with left:
            fig = build_distribution_figure(triaged, "category_derived", "Tickets by Category")
            if fig is not None:
                st.plotly_chart(fig, use_container_width=True)
        with right:
            fig = build_distribution_figure(triaged, "priority_derived", "Tickets by Priority")
            if fig is not None:
                st.plotly_chart(fig, use_container_width=True)

        st.dataframe(triaged, use_container_width=True)
        st.download_button(
            "Download Triaged CSV",
            data=triaged.to_csv(index=False).encode("utf-8"),
            file_name="triaged_tickets.csv",
            mime="text/csv",
        )
