"""
Poker Solver Web App
Streamlit playground for solving hands and finding showdown winners.
"""

import pandas as pd
import streamlit as st

from poker_solver.engine.errors import SolverError
from poker_solver.presets import PRESETS
from poker_solver.solver import Solver, split_tokens

# Page config
st.set_page_config(
    page_title="Poker Solver",
    page_icon="🃏",
    layout="wide"
)

st.title("🃏 Poker Solver")
st.markdown("*Rank hands and pick winners under different poker variants*")


# Initialize solver (cached)
@st.cache_resource
def get_solver():
    return Solver()


solver = get_solver()

# Sidebar for settings
st.sidebar.header("Game")

game_options = list(PRESETS.keys())
selected_game = st.sidebar.selectbox("Preset", options=game_options)

ruleset = PRESETS[selected_game]
st.sidebar.markdown(f"*{ruleset.description}*")
st.sidebar.markdown(f"**Cards per hand:** {ruleset.cards_per_hand}")
if ruleset.wild_face:
    st.sidebar.markdown(f"**Wild card:** {ruleset.wild_face} ({ruleset.wild_policy.value})")
if ruleset.lowest_qualifying:
    st.sidebar.markdown(f"**Lowest qualifier:** {' '.join(ruleset.lowest_qualifying)}")
if ruleset.has_draws:
    st.sidebar.markdown(f"**Draws ranked from:** {ruleset.draw_qualify} cards")

with st.sidebar.expander("Hand ranking"):
    for position, hand_type in enumerate(ruleset.hand_types, 1):
        st.write(f"{position}. {hand_type.display_name}")

can_disqualify = st.sidebar.checkbox(
    "Apply qualifier",
    value=False,
    disabled=ruleset.lowest_qualifying is None,
)

st.divider()

default_hands = "Ah Kh Qh Jh 10h\nAs Ad Ac 7d 7c\n9c 8d 7h 6s 5c"
hands_text = st.text_area("Hands (one per line)", value=default_hands, height=160)

if st.button("🎲 Solve Showdown", type="primary", use_container_width=True):
    lines = [line for line in hands_text.splitlines() if line.strip()]
    if not lines:
        st.warning("Enter at least one hand")
        st.stop()

    try:
        hands = solver.solve_all([split_tokens(line) for line in lines], selected_game, can_disqualify)
    except SolverError as exc:
        st.error(str(exc))
        st.stop()

    best = solver.winners(hands)
    winning_ids = {hand.id for hand in best}

    # Top-level metrics
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Hands", len(hands))
    with col2:
        st.metric("Winners", len(best))
    with col3:
        st.metric("Best Hand", best[0].name if best else "None qualify")

    if not best:
        st.warning("No hand qualifies")
    elif len(best) > 1:
        st.info("Tie: " + ", ".join(f"hand {hand.id}" for hand in best))
    else:
        st.success(f"🏆 Hand {best[0].id} wins with {best[0].description}")

    table = pd.DataFrame([
        {
            "Hand": int(hand.id),
            "Winner": "🏆" if hand.id in winning_ids else "",
            "Name": hand.name,
            "Description": hand.description,
            "Cards": str(hand),
            "Rank": hand.rank,
            "Qualifies": hand.qualifies,
        }
        for hand in hands
    ])
    st.subheader("📜 Results")
    st.dataframe(table.set_index("Hand"), use_container_width=True)

    st.subheader("📊 Hand Types")
    chart_data = table.groupby("Name").size().rename("Count")
    st.bar_chart(chart_data)
