"""Streamlit help center page with search and category browsing."""
from __future__ import annotations

import streamlit as st

from application.use_cases.browse import list_categories, select_categories, toggle_question
from application.use_cases.search import search
from infrastructure.config import build_default_container
from ui.logging_utils import setup_logging

ALL_CATEGORIES = "All Categories"

setup_logging()
container = build_default_container()
corpus = container.corpus_provider.load()

st.set_page_config(page_title="Help Center")
st.title("How can we help you?")
st.write("Search our help center for quick answers to your questions")

if "selected_category" not in st.session_state:
    st.session_state.selected_category = None
if "open_questions" not in st.session_state:
    st.session_state.open_questions = set()


def _open_result(category_id: str, entry_id: str) -> None:
    st.session_state.search_term = ""
    st.session_state.selected_category = category_id
    st.session_state.open_questions = toggle_question(st.session_state.open_questions, entry_id)


def _toggle(entry_id: str) -> None:
    st.session_state.open_questions = toggle_question(st.session_state.open_questions, entry_id)


search_term = st.text_input("Search for answers...", key="search_term")
if search_term:
    results = search(corpus, search_term, container.result_limit)
    if not results:
        st.info(f'No results found for "{search_term}"')
    for result in results:
        st.button(
            f"{result.question} ({result.category_name})",
            key=f"result-{result.id}",
            on_click=_open_result,
            args=(result.category_id, result.id),
        )
else:
    st.caption("Start typing to search through our frequently asked questions")

summaries = list_categories(corpus)
labels = [ALL_CATEGORIES] + [summary.name for summary in summaries]
ids = [None] + [summary.id for summary in summaries]
current = ids.index(st.session_state.selected_category) if st.session_state.selected_category in ids else 0
choice = st.sidebar.radio("Categories", range(len(ids)), index=current, format_func=labels.__getitem__)
st.session_state.selected_category = ids[choice]

for category in select_categories(corpus, st.session_state.selected_category):
    st.header(category.name)
    for entry in category.entries:
        expanded = entry.id in st.session_state.open_questions
        with st.expander(entry.question, expanded=expanded):
            st.write(entry.answer)
            st.button(
                "Collapse" if expanded else "Keep open",
                key=f"toggle-{entry.id}",
                on_click=_toggle,
                args=(entry.id,),
            )
