import os
import streamlit as st
from typing import Dict, Any

from minigrep.settings import load_settings
from minigrep.core.config import Config, IGNORE_CASE_ENV
from minigrep.core.errors import FileReadError
from minigrep.core.runner import read_corpus, select_matches


@st.cache_data(ttl=60)
def cached_corpus(file_path: str, mtime: float, settings: Dict[str, Any]) -> str:
    # mtime is part of the cache key so edited files are re-read.
    return read_corpus(file_path, settings)


def render(settings: Dict[str, Any]):
    st.title("minigrep")

    if settings.get("status") == "ERROR":
        st.error(f"Settings error: {settings['error']}")
        return
    data = settings.get("data", {})

    c_query, c_path = st.columns([2, 3])
    with c_query:
        query = st.text_input("Query", key="minigrep_query")
    with c_path:
        file_path = st.text_input("File", placeholder="path/to/file.txt", key="minigrep_file")

    ignore_case = st.checkbox(
        "Ignore case",
        value=IGNORE_CASE_ENV in os.environ,
        key="minigrep_ignore_case",
        help=f"Defaults to on when {IGNORE_CASE_ENV} is set.",
    )

    if not file_path:
        st.info("Enter a file to search.")
        return

    config = Config(query=query, file_path=file_path, ignore_case=ignore_case)

    try:
        mtime = os.path.getmtime(config.file_path)
        contents = cached_corpus(config.file_path, mtime, data)
    except OSError as e:
        st.error(f"Application error: {FileReadError(config.file_path, e)}")
        return
    except FileReadError as e:
        st.error(f"Application error: {e}")
        return

    matches = select_matches(config, contents)

    st.caption(f"Found {len(matches)} matching lines | Mode: {'ignore case' if config.ignore_case else 'case sensitive'}")
    if matches:
        st.code("\n".join(matches), language=None)
    else:
        st.info("No matching lines.")


def main():
    st.set_page_config(
        page_title="minigrep",
        layout="wide",
    )
    render(load_settings())


if __name__ == "__main__":
    main()
