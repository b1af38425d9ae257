# imports streamlit
import streamlit as st
import sys
import os

# Adds the parent directory to the path to access app.py functions
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import render_footer, render_sidebar, setup_page

setup_page("About", "ℹ️")

import config
from waste_data import CATEGORY_KEYWORDS, WasteCategory, category_detail, conversion_methods

# sets up a page header
st.title(f"ℹ️ About {config.APP_NAME}")

# explains how the image is turned into a waste analysis
st.markdown("""
## How our AI model classifies waste materials

- When you upload an image, we use **MobileNetV2** (a pre-trained neural network) to identify objects in the image
- The model returns predictions with confidence scores for what it sees
- We map these predictions to waste categories (plastic, paper, organic, etc.)
- Based on the waste categories, we recommend optimal energy conversion methods

Your image is analyzed in memory only, nothing is stored once you leave the page.
""")

# lists the supported categories with the keywords that identify them
st.markdown("## Supported categories")
known_categories = [category for category in WasteCategory if category is not WasteCategory.UNKNOWN]
st.warning(
    "Currently supported categories are "
    + ", ".join(category.value for category in known_categories)
    + "."
)

for category in known_categories:
    with st.expander(category.label):
        st.write(category_detail(category).description)
        st.write(f"**Recognised from:** {', '.join(CATEGORY_KEYWORDS[category])}")
        st.write(f"**Recommended methods:** {', '.join(m.method for m in conversion_methods(category))}")

# gives some tips to get better results
st.markdown("""
## Tips for best results

*For best results, ensure your image clearly shows the waste materials with good lighting and minimal background clutter.*

## Technologies used

- **Streamlit**: for the user interface
- **TensorFlow / Keras**: for the image model
- **Plotly**: for the charts
- **ReportLab**: for the PDF reports
""")

render_sidebar()
render_footer()
