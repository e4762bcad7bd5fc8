# Deadlift Analysis and Prediction
# Streamlit report over the OpenPowerlifting pipeline: cleaning, descriptive stats,
# correlation/ANOVA, random forest baseline, neural network and a personal prediction.

import streamlit as st
import pandas as pd
import plotly.express as px
import plotly.figure_factory as ff

import config
import plots
from pipeline import run_pipeline
from stats_report import describe_dataset, target_correlations

st.set_page_config(layout="wide")


@st.cache_data
def load_results(data_path, personal_path):
    return run_pipeline(data_path=data_path, personal_path=personal_path, report=False)


result = load_results(config.DATA_PATH, config.PERSONAL_PATH)
data = result.data

st.title("Deadlift Analysis and Prediction")
st.write("Competition records from OpenPowerlifting, analysed with descriptive statistics, correlation and ANOVA, a random forest baseline and a small neural network that predicts the best deadlift from age, sex, bodyweight and equipment.")

tabs = st.tabs(["Data Preparation", "Descriptive Statistics", "Correlation & ANOVA", "Random Forest", "Neural Network", "Personal Prediction"])

with tabs[0]:
    st.header("Data Preparation")
    summary = result.summary
    stage_df = pd.DataFrame({
        "Stage": ["Original", "Complete Cases", "Positive Deadlift", "Year Filter"],
        "Rows": [summary["Original"], summary["Complete Cases"], summary["Positive Deadlift"], summary["Year Filter"]]
    })
    fig_stage = px.bar(stage_df, x="Stage", y="Rows", title="Row Reduction by Cleaning Stage")
    st.plotly_chart(fig_stage)
    st.write(f"Records from {config.YEAR_CUTOFF} onwards with no missing values. Year range: {summary['year_range']}.")

    st.subheader("Missing Values")
    st.dataframe(summary["missing_by_column"].to_frame("Missing"))
    st.pyplot(plots.missing_heatmap(result.raw))

with tabs[1]:
    st.header("Descriptive Statistics")
    desc = describe_dataset(data)
    st.dataframe(desc["continuous"].round(1), use_container_width=True)

    col1, col2 = st.columns(2)
    for col, container in zip(config.CATEGORICAL, [col1, col2]):
        with container:
            st.subheader(f"Deadlift by {col}")
            st.dataframe(desc["target_by_level"][col])
            fig_box = px.box(data, x=col, y=config.TARGET, title=f"{config.TARGET} by {col}")
            st.plotly_chart(fig_box, use_container_width=True)

    fig_hist = px.histogram(data, x=config.TARGET, color=config.SEX, nbins=40, title="Best Deadlift Distribution")
    st.plotly_chart(fig_hist, use_container_width=True)

with tabs[2]:
    st.header("Correlation & ANOVA")
    corr = result.correlation.round(2)
    fig_corr = ff.create_annotated_heatmap(z=corr.values, x=list(corr.columns), y=list(corr.index), colorscale='Viridis')
    fig_corr.update_layout(title_text="Correlation Heatmap")
    st.plotly_chart(fig_corr, use_container_width=True)

    st.subheader("Correlation with Deadlift")
    st.dataframe(target_correlations(data).round(4))

    st.subheader("One-way ANOVA")
    st.dataframe(result.anova.round(4))

with tabs[3]:
    st.header("Random Forest Baseline")
    rf = result.rf_results
    col3, col4, col5 = st.columns(3)
    with col3:
        st.metric("OOB MSE", f"{rf['MSE']:.1f}")
    with col4:
        st.metric("OOB RMSE (kg)", f"{rf['RMSE']:.1f}")
    with col5:
        st.metric("% Var Explained", f"{rf['% Var Explained']:.1f}")
    imp_df = rf["importances"].reset_index().rename(columns={"index": "Feature"})
    fig_imp = px.bar(imp_df, x="Importance", y="Feature", orientation="h", title="Feature Importance")
    st.plotly_chart(fig_imp, use_container_width=True)

with tabs[4]:
    st.header("Neural Network")
    st.write(f"Dense 16-8-1 network, early stopping (patience {config.PATIENCE}), {len(result.train)} training rows and {len(result.test)} test rows.")
    hist_df = pd.DataFrame(result.history)
    hist_df["epoch"] = range(1, len(hist_df) + 1)
    fig_hist_nn = px.line(hist_df, x="epoch", y=[c for c in ["loss", "val_loss"] if c in hist_df], markers=True, title="Training History")
    st.plotly_chart(fig_hist_nn, use_container_width=True)
    st.dataframe(pd.Series(result.nn_results, name="Test").round(4))

with tabs[5]:
    st.header("Personal Prediction")
    st.metric("Predicted Deadlift (kg)", f"{result.prediction_kg:.2f}")
    st.metric("Predicted Deadlift (lbs)", f"{result.prediction_lbs:.2f}")
