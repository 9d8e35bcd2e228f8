from __future__ import annotations

from datetime import date
from typing import List, Optional

import streamlit as st

from clients.flights_api_client import FlightsApiClient, FlightsApiError
from config import settings
from models.airport import AirportRecord
from models.fare import FareLeg
from utils.autocomplete import filter_airports
from utils.date_parser import format_long_date
from utils.fare_stats import partition_legs, price_indicator, price_range
from utils.logging_config import setup_logging
from utils.money import format_currency
from utils.search_form import (
    SearchResult,
    current_legs,
    is_search_ready,
    make_query_key,
)

APP_STYLE = """
<style>
:root {
  --bg: #daeaf3;
  --panel: #ffffff;
  --text: #0f172a;
  --muted: #475569;
  --accent: #2563eb;
}
html, body {
  background: var(--bg);
  color: var(--text);
}
.main .block-container {
  padding: 1.5rem 2rem 3rem;
}
.hero {
  background: var(--panel);
  border-radius: 16px;
  padding: 1.5rem 1.75rem;
  margin-bottom: 1rem;
  text-align: center;
}
.hero h1 {
  margin: 0;
  color: var(--text);
}
.hero h1 span {
  color: var(--accent);
}
.hero p {
  margin: 0.35rem 0 0;
  color: var(--muted);
}
.route {
  text-align: center;
  color: var(--muted);
}
</style>
"""

FIELDS = ("origin", "destination")


@st.cache_resource
def get_client() -> FlightsApiClient:
    return FlightsApiClient()


@st.cache_data(show_spinner=False)
def load_airports() -> List[AirportRecord]:
    return get_client().airports()


def money(amount: float) -> str:
    return format_currency(amount, settings.currency_symbol, settings.display_locale)


def long_date(value: Optional[date]) -> str:
    return format_long_date(value, settings.display_locale)


def choose(field: str, label: str) -> None:
    st.session_state[field] = label


def swap_airports() -> None:
    st.session_state.origin, st.session_state.destination = (
        st.session_state.destination,
        st.session_state.origin,
    )


def airport_field(field: str, other: str, label: str, placeholder: str, airports: List[AirportRecord]) -> None:
    st.text_input(label, key=field, placeholder=placeholder)
    value = st.session_state[field]
    # an empty field lists the first airports, like focusing the input
    suggestions = filter_airports(value, st.session_state[other], airports, show_all=not value.strip())
    if not suggestions:
        return
    cols = st.columns(2)
    for i, suggestion in enumerate(suggestions):
        cols[i % 2].button(
            suggestion,
            key=f"{field}-suggestion-{i}",
            on_click=choose,
            args=(field, suggestion),
            use_container_width=True,
        )


def render_leg_card(leg: FareLeg) -> None:
    with st.container(border=True):
        st.markdown(f"**{long_date(leg.date)}**")
        if leg.price is None:
            st.warning(leg.error)
            return
        indicator = price_indicator(leg.price)
        st.markdown(f"### :{indicator.color}[●] {money(leg.price)}")
        st.caption(indicator.label)


def render_section(title: str, legs: List[FareLeg]) -> None:
    if not legs:
        return
    st.subheader(f"✈️ {title}")
    extremes = price_range(legs)
    if extremes:
        low, high = extremes
        col_low, col_high = st.columns(2)
        col_low.metric(f"Lowest {title.lower()} price", money(low))
        col_high.metric(f"Highest {title.lower()} price", money(high))
    for leg in legs:
        render_leg_card(leg)


def render_results(legs: List[FareLeg], departure: date, return_date: Optional[date]) -> None:
    first = legs[0]
    dates = f"Outbound: **{long_date(departure)}**"
    if return_date:
        dates += f" &nbsp;|&nbsp; Return: **{long_date(return_date)}**"
    st.markdown(
        f"<div class='route'><strong>{first.origin}</strong> ──── ✈️ ──── <strong>{first.destination}</strong></div>",
        unsafe_allow_html=True,
    )
    st.markdown(dates)

    outbound, inbound = partition_legs(legs)
    render_section("Outbound", outbound)
    render_section("Return", inbound)

    priced = [leg for leg in legs if leg.price is not None]
    if len(priced) > 1:
        st.bar_chart(
            {
                "Leg": [f"{leg.origin} → {leg.destination}" for leg in priced],
                "Price": [leg.price for leg in priced],
            },
            x="Leg",
            y="Price",
        )


setup_logging()
st.set_page_config(page_title="Flight Fare Compare", page_icon="✈️")
st.markdown(APP_STYLE, unsafe_allow_html=True)
st.markdown(
    """
    <div class="hero">
      <h1>Find the <span>best date</span> for your trip</h1>
      <p>Compare predicted airfares and find out when it is cheaper to fly to your destination.</p>
    </div>
    """,
    unsafe_allow_html=True,
)

for key in FIELDS:
    st.session_state.setdefault(key, "")
st.session_state.setdefault("result", None)

with st.spinner("Loading airports..."):
    airports = load_airports()
if not airports:
    st.caption("Airport list unavailable; type IATA codes directly (e.g. GRU).")

col_origin, col_destination = st.columns(2)
with col_origin:
    airport_field("origin", "destination", "Where are you leaving from?", "e.g. São Paulo, Brazil (GRU)", airports)
with col_destination:
    airport_field("destination", "origin", "Where are you going?", "e.g. Paris, France (CDG)", airports)

st.button("⇄ Swap origin and destination", on_click=swap_airports)

col_dep, col_ret = st.columns(2)
departure = col_dep.date_input("Departure date *", value=None, key="departure")
return_date = col_ret.date_input("Return date (optional)", value=None, min_value=departure, key="return_date")

origin = st.session_state.origin
destination = st.session_state.destination
query_key = make_query_key(origin, destination, departure, return_date)

if st.button(
    "🔎 Search best prices",
    type="primary",
    disabled=not is_search_ready(origin, destination, departure),
):
    with st.spinner("Predicting fares..."):
        try:
            legs = get_client().search(origin, destination, departure, return_date)
            st.session_state.result = SearchResult(key=query_key, legs=legs)
        except FlightsApiError as exc:
            st.session_state.result = None
            st.error(f"Sorry, we couldn't fetch flights. ({exc})")

legs = current_legs(st.session_state.result, query_key)
if legs:
    st.divider()
    render_results(legs, departure, return_date)
