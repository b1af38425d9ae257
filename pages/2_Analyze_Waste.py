# imports streamlit and the libraries needed on this page
import streamlit as st
import logging
from datetime import datetime
import sys
import os

# makes sure the app can find the modules in the parent directory
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import get_image_classifier, render_footer, render_sidebar, setup_page

# sets up the page configuration, with a title, icon, and layout
setup_page("Analyze Waste", "🔍")

import config
import charts
from errors import ClassificationError, InvalidImageError, ModelNotReadyError, ModelUnavailableError, ReportGenerationError
from report_generator import generate_report, report_filename
from upload import UploadState, accept_upload
from waste_classifier import classify

logger = logging.getLogger(__name__)

render_sidebar()

# initializes the session state used to keep the upload and the results between reruns
state = UploadState(st.session_state)

# shows the page header and a brief description
st.title("🔍 Waste to Energy Analyzer")
st.markdown("Upload an image to analyze waste and energy conversion potential.")

# loads the image model once, if it fails the user gets a retry button instead of the upload form
classifier = get_image_classifier()
if not classifier.is_ready:
    try:
        with st.spinner("Loading AI model..."):
            classifier.load()
    except ModelUnavailableError as e:
        st.error(e.user_message)
        if st.button("Retry", key="retry_model"):
            classifier.reset()
            st.rerun()
        render_footer()
        st.stop()

upload_col, summary_col = st.columns([3, 2])

# sets up the upload area with a preview of the selected picture
with upload_col:
    uploaded_file = st.file_uploader(
        "Click to select or drag and drop an image",
        type=config.ACCEPTED_IMAGE_TYPES,
        disabled=state.is_loading,
    )

    if uploaded_file is None and state.image is not None:
        # the user cleared the file in the widget
        state.remove()
    elif uploaded_file is not None:
        upload_key = getattr(uploaded_file, "file_id", None) or f"{uploaded_file.name}-{uploaded_file.size}"
        if state.is_new_upload(upload_key):
            try:
                state.select(accept_upload(uploaded_file), upload_key)
            except InvalidImageError as e:
                state.remove()
                st.warning(e.user_message)

    if state.image is not None:
        st.image(state.image.preview, caption=state.image.file_name, use_container_width=True)

# shows the analysis button and a quick summary of the result
with summary_col:
    if state.image is not None and state.result is None:
        if st.button("Start Analysis", key="start_analysis", disabled=not state.can_analyze, type="primary"):
            state.set_loading(True)
            try:
                with st.spinner("Analyzing your waste image..."):
                    predictions = classifier.classify(state.image.image)
                    state.set_result(classify(predictions))
            except ModelNotReadyError as e:
                logger.error(f"Analysis requested before the model was ready: {e}")
                state.set_error(e.user_message)
            except ClassificationError as e:
                logger.error(f"Error analyzing image: {e}")
                state.set_error(e.user_message)
            finally:
                state.set_loading(False)
            st.rerun()

    if state.error:
        st.error(state.error)

    result = state.result
    if result is not None:
        st.markdown("#### Quick Summary")
        st.write(f"**Waste detected:** {'Yes' if result.is_waste else 'No'}")
        if result.waste_categories:
            st.write(f"**Categories:** {', '.join(result.category_names)}")

        if result.is_waste:
            # builds the PDF on demand, a failure leaves the results untouched
            if state.report is None:
                if st.button("📄 Download Report", key="generate_report", disabled=not state.can_download_report):
                    state.set_report_generating(True)
                    try:
                        # one timestamp for the "Generated on" line and the file name
                        moment = datetime.now()
                        with st.spinner("Generating report..."):
                            pdf_bytes = generate_report(result, moment)
                        state.set_report(report_filename(moment), pdf_bytes)
                    except ReportGenerationError as e:
                        st.error(e.user_message)
                    finally:
                        state.set_report_generating(False)
            if state.report is not None:
                file_name, pdf_bytes = state.report
                st.download_button(
                    "📥 Save PDF report",
                    data=pdf_bytes,
                    file_name=file_name,
                    mime="application/pdf",
                    key="download_report",
                )
        else:
            st.warning("⚠️ No waste was recognised in this image. Try a clearer picture of the waste item.")

        if st.button("Start Over", key="start_over"):
            state.remove()
            st.rerun()

# displays the detailed results in three tabs
result = state.result
if result is not None and result.is_waste:
    st.markdown("---")
    overview_tab, efficiency_tab, predictions_tab = st.tabs(["Overview", "Efficiency", "Predictions"])

    with overview_tab:
        st.markdown("#### Waste Categories")
        st.plotly_chart(charts.build_category_pie(charts.category_distribution(result)), use_container_width=True)
        energy_data = charts.energy_potential(result)
        if not energy_data.empty:
            st.markdown("#### Energy Potential by Category")
            st.plotly_chart(charts.build_energy_bar(energy_data), use_container_width=True)

    with efficiency_tab:
        st.markdown("#### Efficiency Metrics")
        st.caption("Processing complexity and carbon footprint are inverted: a larger area is always better.")
        for index, detail in enumerate(result.category_details):
            efficiency = detail.energy_efficiency
            st.markdown(f"##### {detail.category.label} Metrics")
            chart_col, text_col = st.columns([3, 2])
            with chart_col:
                color = charts.COLORS[index % len(charts.COLORS)]
                st.plotly_chart(
                    charts.build_efficiency_radar(charts.efficiency_profile(detail), color),
                    use_container_width=True,
                    key=f"radar_{detail.category.value}",
                )
            with text_col:
                st.write(f"**Energy Potential:** {efficiency.potential_energy}")
                st.write(f"**Conversion Efficiency:** {efficiency.conversion_efficiency}")
                st.write(f"**Best Methods:** {efficiency.best_methods}")

    with predictions_tab:
        st.markdown("#### AI Predictions")
        st.plotly_chart(
            charts.build_prediction_bar(charts.prediction_chart_data(result, config.DISPLAYED_PREDICTIONS)),
            use_container_width=True,
        )
        st.markdown("##### All Predictions")
        st.dataframe(charts.prediction_table(result), hide_index=True, use_container_width=True)

    # shows the recommended energy conversion methods
    if result.recommendations:
        st.markdown("---")
        st.subheader("Recommended Energy Conversion Methods")
        for number, method in enumerate(result.recommendations, start=1):
            with st.expander(f"Method {number}: {method.method}", expanded=number == 1):
                st.write(method.description)
                st.write(f"**Efficiency:** {method.efficiency}")
                st.write(f"**Waste Types:** {method.waste_types}")
                st.write(f"**Environmental Benefits:** {method.environmental_benefits}")

render_footer()
