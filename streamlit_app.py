import logging

import streamlit as st

from shopping_classifier.config.settings import SETTINGS
from shopping_classifier.ui.classifier import render_classifier


def main():
    logging.basicConfig(level=SETTINGS.log_level)
    st.set_page_config(
        page_title="AI Shopping Query Classifier",
        page_icon="🛍️",
        layout="centered",
    )
    render_classifier()


if __name__ == "__main__":
    main()
