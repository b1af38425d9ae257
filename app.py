#imports the necessary libraries
import streamlit as st # to build the web app
import logging # to use app wide logging

import config # shared settings
from image_classifier import ImageClassifier # owns the pre-trained image model

# sets up the logging configuration
logging.basicConfig(level=logging.INFO,
                   format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# hides the default sidebar navigation and the expand collapse arrow using CSS
HIDE_STREAMLIT_STYLE = """
<style>
/* Hide the default sidebar navigation */
[data-testid="stSidebarNavItems"] {
    display: none !important;
}

/* Remove the extra padding at the top of sidebar */
section[data-testid="stSidebar"] > div {
    padding-top: 1rem !important;
}
</style>
"""

# the steps shown on the home page
HOW_IT_WORKS = [
    (
        "Upload Waste Image",
        "Start by uploading a clear image of the waste item. Ensure the image is well-lit for accurate detection.",
    ),
    (
        "Waste Category Prediction",
        "Our machine learning model analyzes the image to accurately identify the waste category, "
        "ensuring precise categorization.",
    ),
    (
        "Energy Conversion Ideas",
        "Based on the identified category, we suggest detailed energy conversion ideas to transform "
        "waste into sustainable energy.",
    ),
]

# the benefits grid shown on the home page
BENEFITS = [
    ("⚡", "Energy Recovery", "Convert waste into valuable energy resources, reducing reliance on fossil fuels."),
    ("🗑️", "Waste Reduction", "Minimize landfill waste and promote efficient waste management practices."),
    ("☁️", "Emission Reduction", "Divert waste from landfills to lower greenhouse gas emissions."),
    ("♻️", "Resource Efficiency", "Optimize the reuse and recovery of materials for maximum efficiency."),
    ("💰", "Economic Growth", "Create jobs and boost local economies through sustainable energy production."),
    ("🌱", "Sustainable Future", "Promote environmental sustainability and energy independence for communities."),
]


# keeps one image classifier per server process, every session shares the loaded model
@st.cache_resource
def get_image_classifier() -> ImageClassifier:
    """Return the shared classifier (not loaded yet, call load() on it)"""
    logger.info("Creating image classifier")
    return ImageClassifier()


# sets the page configuration and hides the default navigation, every page calls this first
def setup_page(title: str, icon: str):
    st.set_page_config(
        page_title=f"{config.APP_NAME} - {title}",
        page_icon=icon,
        layout="wide",
        initial_sidebar_state="expanded"
    )
    st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)


# sets up the sidebar with the navigation links
def render_sidebar():
    with st.sidebar:
        st.title(config.APP_NAME)
        st.markdown("Turning waste into sustainable energy")

        st.markdown("## Navigation")
        st.page_link("pages/1_Home.py", label="Home", icon="🏠")
        st.page_link("pages/2_Analyze_Waste.py", label="Analyze Waste", icon="🔍")
        st.page_link("pages/3_About.py", label="About", icon="ℹ️")

        st.markdown("## Useful Links")
        st.markdown("[Waste-to-energy overview (IEA Bioenergy)](https://www.ieabioenergy.com/)")
        st.markdown("[EU waste framework directive](https://environment.ec.europa.eu/topics/waste-and-recycling_en)")


# shows the footer at the bottom of every page
def render_footer():
    st.markdown("---")
    st.markdown(config.FOOTER_TEXT)


# imports the app start page and navigation module
if __name__ == "__main__":
    setup_page("Waste to Energy", "♻️")

    # creates a loading message to show during the loading of the app
    st.write(f"# Loading {config.APP_NAME}...")
    st.write("Please wait while we load the application...")

    # tries to switch to main page of the app
    st.switch_page("pages/1_Home.py")
