import streamlit as st
import structlog
from datetime import date

from calendar_engine import CalendarDate, ValidationOutcome, compute_difference, validate_date
from last_calculation import LastCalculationStore
from logging_config import configure_logging
from presentation import (
    DAY_OPTIONS,
    day_hint,
    day_label,
    format_date_display,
    month_label,
    outcome_message,
    result_labels,
    result_text,
    year_label,
)
from settings import AgeCalculatorSettings

# --- Page Config ---
st.set_page_config(page_title="Age Calculator", page_icon="🎂", layout="centered")

settings = AgeCalculatorSettings()
configure_logging(verbose=settings.verbose, log_json=settings.log_json)
logger = structlog.get_logger("AGE_CALCULATOR")

store = LastCalculationStore(settings.storage_path)
today = date.today()
year_choices = settings.year_range(today)

# --- Restore last calculation (once per session) ---
if "restored" not in st.session_state:
    st.session_state["restored"] = True
    record = store.load()
    if record is not None and record.year in year_choices:
        st.session_state["day"] = record.day
        st.session_state["month"] = record.month
        st.session_state["year"] = record.year
        logger.debug("restored last calculation", timestamp=record.timestamp.isoformat())


def reset_calculator():
    st.session_state["day"] = None
    st.session_state["month"] = None
    st.session_state["year"] = None
    st.session_state.pop("result", None)
    try:
        store.clear()
    except OSError as e:
        logger.error("could not clear last calculation", error=str(e))
        st.warning(f"Could not clear the saved calculation: {e}")
        return
    logger.debug("calculator reset")


# --- Title ---
st.title("🎂 Age Calculator")

# --- Date selection ---
col_day, col_month, col_year = st.columns(3)
with col_day:
    day = st.selectbox("Day", [None, *DAY_OPTIONS], key="day", format_func=day_label)
with col_month:
    month = st.selectbox("Month", [None, *range(12)], key="month", format_func=month_label)
with col_year:
    year = st.selectbox("Year", [None, *year_choices], key="year", format_func=year_label)

st.markdown(f"### 📅 {format_date_display(day, month, year)}")
hint = day_hint(month, year)
if hint:
    st.caption(hint)

# --- Validation ---
outcome = validate_date(day, month, year, today)
if outcome.is_error:
    st.error(f"❌ {outcome_message(outcome)}")
can_calculate = outcome is ValidationOutcome.VALID

# --- Actions ---
col_calc, col_reset = st.columns(2)
calculate = col_calc.button("Calculate Age", key="calculate", type="primary", disabled=not can_calculate)
col_reset.button("Reset", key="reset", on_click=reset_calculator)

if calculate and can_calculate:
    diff = compute_difference(CalendarDate(year, month, day), today)
    st.session_state["result"] = ((day, month, year), diff)
    logger.info("age calculated", years=diff.years, months=diff.months, days=diff.days)
    try:
        store.save(day, month, year)
    except OSError as e:
        logger.error("could not save last calculation", error=str(e))
        st.warning(f"Could not save this calculation: {e}")

# --- Result ---
result = st.session_state.get("result")
if result is not None and result[0] == (day, month, year) and can_calculate:
    diff = result[1]
    st.success(f"✅ You are {result_text(diff)} old.")
    for col, (label, value) in zip(st.columns(3), result_labels(diff)):
        col.metric(label, value)
