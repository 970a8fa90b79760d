import streamlit as st
import requests
import pandas as pd
import plotly.express as px
from currency_prediction.core.config import BASE_CURRENCY, settings

# Set the title of the app
st.set_page_config(
    page_title="Currency Exchange Rate Predictions",
    page_icon="💱",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown(
    """
    <h1 style="text-align: center;">Currency Exchange Rate Predictions</h1>
    """,
    unsafe_allow_html=True
)

API_BASE_URL = settings.api_base_url

def make_request(endpoint):
    try:
        response = requests.get(f"{API_BASE_URL}{endpoint}", timeout=settings.api_timeout)
    except requests.exceptions.ConnectionError:
        st.error("Failed to connect to the API. Please try again later.")
        return None
    except requests.exceptions.Timeout:
        st.error("The API took too long to respond. Please try again later.")
        return None
    except requests.exceptions.RequestException as e:
        st.error(f"Request to the API failed: {e}")
        return None
    if response.status_code == 200:
        return response.json()
    try:
        detail = response.json().get("detail", response.text)
    except ValueError:
        detail = response.text
    st.error(f"Error: {response.status_code} - {detail}")
    return None

st.markdown(
    "Predictions use linear regression over the past 30 days of rates and show "
    "the expected exchange rate 7 days ahead."
)

# Prediction table
predictions = make_request("/predictions/")
if predictions:
    st.success("Predictions loaded successfully.")
    df = pd.DataFrame(predictions)
    table = pd.DataFrame({
        "Currency": df["currency"],
        "Current Rate": [f"1 {BASE_CURRENCY} = {rate:.4f} {code}" for rate, code in zip(df["current_rate"], df["currency"])],
        "Predicted in 7 Days": [f"1 {BASE_CURRENCY} = {rate:.4f} {code}" for rate, code in zip(df["predicted_rate"], df["currency"])],
        "% Change": [f"{change:.2f}%" for change in df["change_percentage"]],
        "Recommendation": df["recommendation"],
    })
    st.dataframe(table, hide_index=True, use_container_width=True)

# History and forecast chart
supported = make_request("/predictions/supported")
if supported:
    selected_currency = st.selectbox("Select Currency", options=supported)
    historical = make_request(f"/predictions/{selected_currency}/historical")
    future = make_request(f"/predictions/{selected_currency}/future")
    if historical and future:
        history_df = pd.DataFrame(historical["rates"]).assign(series="Historical")
        future_df = pd.DataFrame(future["predictions"]).assign(series="Predicted")
        df = pd.concat([history_df, future_df], ignore_index=True)

        fig = px.line(
            df,
            x="date",
            y="rate",
            color="series",
            title=f"{BASE_CURRENCY}/{selected_currency}: Last 30 Days and Next 7 Days",
            height=400,
        )
        fig.update_traces(mode='lines+markers')
        st.plotly_chart(fig)
