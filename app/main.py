"""
Streamlit Frontend for Idle Growth

The UI holds no game logic. It:
1. Creates one GrowthSession per browser session
2. Sends one command per button press
3. Redraws only the values the returned DisplayUpdate carries

Run with:
    streamlit run app/main.py
"""

import streamlit as st

from idlegrowth.config import get_settings
from idlegrowth.orchestrator import DisplayUpdate, GrowthSession, create_session


settings = get_settings()

# Page configuration
st.set_page_config(
    page_title=settings.page_title,
    page_icon="📈",
    layout="centered",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .big-number {
        font-size: 2.5em;
        font-weight: bold;
        color: #2c3e50;
    }
</style>
""", unsafe_allow_html=True)


def get_session() -> GrowthSession:
    """Get or create this browser session's GrowthSession."""
    if "growth_session" not in st.session_state:
        session = create_session(settings)
        st.session_state.growth_session = session
        st.session_state.display = session.display().model_dump()
    return st.session_state.growth_session


def apply_update(update: DisplayUpdate) -> None:
    """Copy the changed strings into the persisted display values."""
    if not update.accepted:
        st.toast("Not enough to buy that yet.")
    if not update.has_changes:
        return
    
    changed = update.model_dump(
        include={"counter", "multiplier", "base"},
        exclude_none=True,
    )
    st.session_state.display.update(changed)


def main():
    """Main application entry point."""
    session = get_session()
    
    st.title(f"📈 {settings.page_title}")
    
    counter_col, multiplier_col, base_col = st.columns(3)
    
    with counter_col:
        if st.button("➕ Grow", type="primary"):
            apply_update(session.increase_counter())
    with multiplier_col:
        if st.button("✖️ Buy multiplier"):
            apply_update(session.increase_multiplier())
    with base_col:
        if st.button("⬆️ Buy base"):
            apply_update(session.increase_base())
    
    display = st.session_state.display
    
    st.markdown("**Counter**")
    st.markdown(
        f'<div class="big-number">{display["counter"]}</div>',
        unsafe_allow_html=True,
    )
    
    multiplier_col, base_col = st.columns(2)
    multiplier_col.metric("Multiplier", display["multiplier"])
    base_col.metric("Base", display["base"])
    
    if settings.debug_mode and session.event_logger:
        with st.expander("Recent events"):
            for event in session.event_logger.recent(limit=20):
                st.write(f"{event.timestamp:%H:%M:%S} · {event.description}")


if __name__ == "__main__":
    main()
