"""Streamlit UI for the query / product relationship classifier."""
from __future__ import annotations

import streamlit as st

from shopping_classifier.client import ClassifierClient, get_client
from shopping_classifier.config.settings import SETTINGS
from shopping_classifier.examples import EXAMPLES, ExamplePair
from shopping_classifier.presentation import (
    CONFIDENCE_LEGEND,
    display_label,
    format_confidence,
    resolve,
)
from shopping_classifier.session import ClassificationSession

SESSION_KEY = "classifier_session"
QUERY_KEY = "query_input"
DESCRIPTION_KEY = "description_input"

COLD_START_NOTICE = (
    "**First-time initialization** – if this is your first request, the server "
    "may take 50-100 seconds to initialize the AI model. Subsequent requests "
    "will be much faster."
)


@st.cache_resource
def _get_client() -> ClassifierClient:
    return get_client("http", base_url=SETTINGS.api_url, timeout=SETTINGS.request_timeout_sec)


def _get_session() -> ClassificationSession:
    """Return the per-browser-session state machine, creating it on first use."""
    if SESSION_KEY not in st.session_state:
        st.session_state[SESSION_KEY] = ClassificationSession()
    return st.session_state[SESSION_KEY]


def _sync_widgets(session: ClassificationSession) -> None:
    st.session_state[QUERY_KEY] = session.inputs.query
    st.session_state[DESCRIPTION_KEY] = session.inputs.product_description


# ---------------------------------------------------------------------------
# Widget callbacks (run before the script re-renders)
# ---------------------------------------------------------------------------

def _on_query_change():
    _get_session().edit_query(st.session_state[QUERY_KEY])


def _on_description_change():
    _get_session().edit_description(st.session_state[DESCRIPTION_KEY])


def _on_load_example(example: ExamplePair):
    session = _get_session()
    if session.load_example(example.query, example.description):
        _sync_widgets(session)


def _on_try_another():
    session = _get_session()
    session.try_another()
    _sync_widgets(session)


# ---------------------------------------------------------------------------
# Views
# ---------------------------------------------------------------------------

def _render_header():
    st.title("🛍️ AI Shopping Query Classifier")
    st.markdown(
        "Analyze the relationship between Amazon search queries and product "
        "descriptions using advanced AI classification"
    )
    st.caption(f"Powered by [🤗 DistilBERT Fine-tuned Model ↗]({SETTINGS.model_card_url})")


def _render_input_view(session: ClassificationSession):
    st.subheader("Enter Your Data")

    # Seed widget state from the session before the widgets are created.
    st.session_state.setdefault(QUERY_KEY, session.inputs.query)
    st.session_state.setdefault(DESCRIPTION_KEY, session.inputs.product_description)

    col1, col2 = st.columns(2)
    col1.text_area(
        "Search Query",
        key=QUERY_KEY,
        placeholder="Enter the Amazon search query here...",
        height=140,
        on_change=_on_query_change,
    )
    col2.text_area(
        "Product Description",
        key=DESCRIPTION_KEY,
        placeholder="Enter the product description here...",
        height=140,
        on_change=_on_description_change,
    )

    # Widget values can be newer than the session when Enter was not pressed.
    session.edit_query(st.session_state[QUERY_KEY])
    session.edit_description(st.session_state[DESCRIPTION_KEY])

    clicked = st.button(
        "Classify Relationship",
        key="classify_btn",
        type="primary",
        disabled=not session.can_submit,
    )
    if clicked:
        notice = st.empty()
        notice.info(COLD_START_NOTICE, icon="ℹ️")
        with st.spinner("Classifying..."):
            session.submit(_get_client())
        notice.empty()
        st.rerun()

    if session.error_message:
        st.error(f"**Classification Failed**\n\n{session.error_message}", icon="⚠️")

    st.markdown("---")
    st.subheader("One-Click Examples")
    st.caption("Click any example below to instantly populate the input fields")
    for col, example in zip(st.columns(len(EXAMPLES)), EXAMPLES):
        col.button(
            f"{example.icon} {example.kind}",
            key=f"example_{example.kind.lower()}",
            help=example.query,
            on_click=_on_load_example,
            args=(example,),
        )


def _render_result_view(session: ClassificationSession):
    result = session.result
    header_col, action_col = st.columns([4, 1])
    header_col.subheader("Classification Result")
    action_col.button("Try Another", key="try_another_btn", on_click=_on_try_another)

    col1, col2 = st.columns(2)
    with col1:
        st.markdown("**Search Query**")
        st.write(session.inputs.query)
    with col2:
        st.markdown("**Product Description**")
        st.write(session.inputs.product_description)

    descriptor = resolve(result.relationship)
    st.markdown(
        f"### {descriptor.icon} :{descriptor.color}[{display_label(result.relationship)}]"
    )
    st.markdown(f"Confidence: **{format_confidence(result.confidence)}**")
    # The bar needs [0, 1]; the text above shows the raw value.
    st.progress(min(max(float(result.confidence), 0.0), 1.0), text="Confidence Level")

    st.markdown("#### 💡 Interpretation")
    st.write(descriptor.interpretation)

    for col, band in zip(st.columns(len(CONFIDENCE_LEGEND)), CONFIDENCE_LEGEND):
        col.markdown(f"**:{band.color}[{band.name}]**  \n{band.range_text}")


def render_classifier():
    _render_header()
    session = _get_session()

    if session.shows_result:
        _render_result_view(session)
    else:
        _render_input_view(session)

    st.markdown("---")
    st.caption("Powered by AI classification algorithms")
