# Imports necessary libraries
import streamlit as st
import random
import sys
import os

# makes sure the app can find the modules in the parent directory
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import BENEFITS, HOW_IT_WORKS, render_footer, render_sidebar, setup_page

# Sets up page-wide configuration (must be done first before anything else appears)
setup_page("Home", "♻️")

# Displays the title at the top of the homepage
st.title("♻️ Turn your waste into renewable energy")
st.markdown("We help businesses and communities reduce waste, save money, and cut CO2 emissions.")
st.page_link("pages/2_Analyze_Waste.py", label="Analyze your waste", icon="📸")

# Describes how the analysis works in three steps, one per column
st.markdown("---")
st.markdown("## How it works")
columns = st.columns(len(HOW_IT_WORKS))
for step, (column, (title, description)) in enumerate(zip(columns, HOW_IT_WORKS), start=1):
    with column:
        st.markdown(f"### {step}. {title}")
        st.markdown(description)

# Tips of the day section
st.markdown("---")
st.subheader("💡 Did you know?")

# creates a list of random energy facts
tips_of_the_day = [
    "One ton of food waste can produce 300-500 cubic meters of biogas through anaerobic digestion.",
    "Recycling aluminum saves about 95% of the energy needed to produce it from ore.",
    "Pyrolysis can turn one ton of plastic waste into roughly 750-850 liters of fuel oil.",
    "Glass can be recycled indefinitely without any loss of quality.",
    "A ton of circuit boards can hold up to 800 times more gold than gold ore.",
    "Combined heat and power biomass plants can reach overall efficiencies of 80-90%.",
]
# Randomly shows one fact each time the page is refreshed
st.info(random.choice(tips_of_the_day))

# Benefits of converting waste into energy, shown in a grid of three columns
st.markdown("## Why convert waste into energy?")
for row_start in range(0, len(BENEFITS), 3):
    for column, (icon, title, description) in zip(st.columns(3), BENEFITS[row_start:row_start + 3]):
        with column:
            st.markdown(f"#### {icon} {title}")
            st.markdown(description)

render_sidebar()
render_footer()
