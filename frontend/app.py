"""
Streamlit page: code editor, XP overlay and review output.

Run with `streamlit run frontend/app.py` (or the `codesensei` entry point).
"""

import streamlit as st

from frontend.client import ReviewClient
from frontend.config import get_settings
from frontend.levels import format_xp, next_level_label
from frontend.storage import SqliteStore
from frontend.xp import XPEngine


def init_session():
    settings = get_settings()
    if "engine" not in st.session_state:
        engine = XPEngine(SqliteStore(settings.XP_DB_PATH))
        engine.load()
        st.session_state.engine = engine
    if "client" not in st.session_state:
        st.session_state.client = ReviewClient(settings.REVIEW_API_URL, settings.REQUEST_TIMEOUT)
    st.session_state.setdefault("code", "")
    st.session_state.setdefault("last_code", "")
    st.session_state.setdefault("review", None)
    st.session_state.setdefault("loading", False)
    st.session_state.setdefault("confirming_reset", False)


def handle_typing():
    engine: XPEngine = st.session_state.engine
    new_code = st.session_state.code
    engine.on_text_changed(st.session_state.last_code, new_code)
    st.session_state.last_code = new_code


def start_review():
    # the request itself runs on the next script run, with the button disabled
    st.session_state.loading = True
    st.session_state.review = None


def ask_reset():
    st.session_state.confirming_reset = True


def answer_reset(confirmed: bool):
    st.session_state.engine.reset(confirmed=confirmed)
    st.session_state.confirming_reset = False


def run_review(client: ReviewClient, code: str):
    try:
        with st.spinner("Reviewing..."):
            st.session_state.review = client.request_review(code)
    finally:
        st.session_state.loading = False
    st.rerun()


@st.fragment(run_every=0.5)
def render_notification():
    message = st.session_state.engine.notifications.current()
    if message:
        st.info(message)


def render_profile(engine: XPEngine):
    state = engine.state
    st.markdown(f"### 🥷 You\n{state.level.title} • Lv {state.level.number}")
    xp_col, next_col = st.columns(2)
    xp_col.markdown(f"**{format_xp(state.xp)} XP**")
    next_col.caption(next_level_label(state.xp))
    st.progress(int(state.progress))


def render_reset_confirmation():
    st.warning("Reset XP and level progress?")
    confirm_col, cancel_col = st.columns(2)
    confirm_col.button(
        "Reset", key="confirm_reset", type="primary", on_click=answer_reset, args=(True,)
    )
    cancel_col.button("Cancel", key="cancel_reset", on_click=answer_reset, args=(False,))


def render_review(engine: XPEngine):
    st.subheader("Review Output")
    st.caption("AI suggestions & diagnostics")

    outcome = st.session_state.review
    if outcome is not None:
        st.markdown(outcome.text)
    else:
        upcoming = engine.state.next_level
        target = upcoming.title if upcoming else "the top"
        st.markdown("Write code on the left and press **Review** to get AI feedback.")
        st.caption(f"Each keystroke gives you XP — reach **{target}**!")

    st.caption(
        "Tip: Write small functions and request reviews frequently — you'll level up faster!"
    )


def main():
    st.set_page_config(page_title="CodeSensei", page_icon="🔥", layout="wide")
    init_session()

    engine: XPEngine = st.session_state.engine
    client: ReviewClient = st.session_state.client

    st.title("🔥 CodeSensei")
    st.caption("AI Code Reviewer — Type. Learn. Level up.")

    left, right = st.columns(2)

    with left:
        render_profile(engine)
        st.text_area("Code", key="code", height=360, on_change=handle_typing)

        review_col, reset_col = st.columns(2)
        code = st.session_state.code
        review_col.button(
            "Review",
            key="review_button",
            type="primary",
            disabled=not code.strip() or st.session_state.loading,
            on_click=start_review,
        )
        reset_col.button("Reset XP", key="reset_xp", on_click=ask_reset)
        if st.session_state.confirming_reset:
            render_reset_confirmation()

    with right:
        if st.session_state.loading:
            run_review(client, code)
        render_review(engine)

    render_notification()


if __name__ == "__main__":
    main()
