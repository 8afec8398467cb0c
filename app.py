"""
GoG Contradiction Debt Playground
Streamlit application for exploring the contradiction debt model.
"""

import logging
from dataclasses import replace

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from contradiction_engine.config.model_config import MODEL_CONFIG, PLAYGROUND_CONFIG
from contradiction_engine.scoring import (
    ScoringEngine,
    Triple,
    DOMAIN_NAMES,
    DOMAIN_LABELS,
    parse_number,
    clamp01,
    resolve_ratio_edit,
)
from contradiction_engine.projection import ProjectionEngine, clamp_horizon, points_to_dataframe
from contradiction_engine.scenarios import (
    ScenarioStore,
    ScenarioImportError,
    seed_scenarios,
    scenarios_to_json,
    scenarios_from_json,
    lead_time_comparison,
    scenarios_to_dataframe,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Page configuration
st.set_page_config(
    page_title="GoG Contradiction Debt Playground",
    page_icon="⚖️",
    layout="wide",
    initial_sidebar_state="expanded"
)

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2.2rem;
        font-weight: bold;
        margin-bottom: 1rem;
    }
</style>
""", unsafe_allow_html=True)


HEALTH_SLIDERS = [
    ("legitimacy", "Legitimacy (L)"),
    ("elite_cohesion", "Elite cohesion (E)"),
    ("capacity", "Capacity (K)"),
    ("cost_strain", "Cost strain (C)"),
    ("backfire", "Backfire (B)"),
    ("trust", "Trust (T)"),
    ("protest", "Protest (P)"),
]

REPAIR_SLIDERS = [
    ("ack", "Acknowledgment"),
    ("reform", "Reform"),
    ("comp", "Compensation"),
    ("inclusive", "Inclusivity"),
    ("fidelity", "Implementation fidelity"),
]


def main():
    """Main application entry point."""

    # Initialize session state
    if "store" not in st.session_state:
        st.session_state["store"] = ScenarioStore(seed_scenarios())
    if "active_id" not in st.session_state:
        st.session_state["active_id"] = st.session_state["store"].ids()[0]
    if "horizon" not in st.session_state:
        st.session_state["horizon"] = PLAYGROUND_CONFIG["horizon"]["default"]
    if "generation" not in st.session_state:
        # Bumped on import so widget keys do not carry stale values
        st.session_state["generation"] = 0

    store: ScenarioStore = st.session_state["store"]
    if st.session_state["active_id"] not in store:
        st.session_state["active_id"] = store.ids()[0]

    # Header
    st.markdown('<p class="main-header">GoG Contradiction Debt Playground</p>', unsafe_allow_html=True)

    render_toolbar(store)

    tab1, tab2, tab3 = st.tabs(["📈 Model", "⚖️ Compare Models", "ℹ️ About"])

    with tab1:
        render_model_tab(store)

    with tab2:
        render_compare_tab(store)

    with tab3:
        render_about_tab()


def widget_key(scenario_id: str, name: str) -> str:
    return f"{st.session_state['generation']}_{scenario_id}_{name}"


def render_toolbar(store: ScenarioStore):
    """New case, export and import controls."""

    col1, col2, col3 = st.columns([1, 1, 2])

    with col1:
        if st.button("+ New Case", use_container_width=True):
            scenario = store.add_scenario()
            st.session_state["active_id"] = scenario.id
            st.rerun()

    with col2:
        st.download_button(
            label="📥 Export JSON",
            data=scenarios_to_json(store.to_list()),
            file_name=PLAYGROUND_CONFIG["export_filename"],
            mime="application/json",
            use_container_width=True
        )

    with col3:
        with st.expander("📤 Import JSON", expanded=False):
            uploaded = st.file_uploader("Scenario file", type=["json"], key="import_file")
            if uploaded is not None and st.button("Replace scenarios with file"):
                import_scenarios(store, uploaded.getvalue())


def import_scenarios(store: ScenarioStore, content: bytes):
    """Replace the collection from an uploaded file, or leave it untouched on error."""
    try:
        scenarios = scenarios_from_json(content)
    except ScenarioImportError as e:
        logger.error(f"Import failed ({e.error_type}): {e}")
        st.error(f"Invalid JSON: {e}")
        return

    if not scenarios:
        st.error("Invalid JSON: the file holds no scenarios")
        return

    store.replace_all(scenarios)
    st.session_state["active_id"] = scenarios[0].id
    st.session_state["generation"] += 1
    st.rerun()


def ratio_slider(label: str, value: float, key: str) -> float:
    picked = st.slider(
        label,
        min_value=0.0,
        max_value=1.0,
        value=clamp01(float(value)),
        step=0.01,
        key=key
    )
    return resolve_ratio_edit(picked, value)


def render_model_tab(store: ScenarioStore):
    """Render the scenario editor, composites and projection."""

    engine = ScoringEngine()
    projection_engine = ProjectionEngine(engine)

    sidebar_col, main_col = st.columns([1, 3])

    with sidebar_col:
        st.subheader("Scenarios")
        scenario_ids = store.ids()
        active_id = st.radio(
            "Active case",
            options=scenario_ids,
            index=scenario_ids.index(st.session_state["active_id"]),
            format_func=lambda sid: store.get(sid).name,
            label_visibility="collapsed"
        )
        st.session_state["active_id"] = active_id
        scenario = store.get(active_id)

        name = st.text_input("Case name", value=scenario.name, key=widget_key(active_id, "name"))
        note = st.text_area("Case note", value=scenario.note or "", key=widget_key(active_id, "note"))
        if name != scenario.name or note != (scenario.note or ""):
            # Keep an unset note unset
            if not note and scenario.note is None:
                note = None
            scenario = store.update_scenario(active_id, name=name, note=note)

        st.subheader("Health (0–1)")
        health_values = {
            attr: ratio_slider(label, getattr(scenario.period.health, attr), widget_key(active_id, attr))
            for attr, label in HEALTH_SLIDERS
        }

    with main_col:
        v_col, r_col, d_col = st.columns([5, 4, 3])

        with v_col:
            st.subheader("Violations (V)")
            grid = st.columns(2)
            triples = {}
            for idx, domain in enumerate(DOMAIN_NAMES):
                current = getattr(scenario.period.violations, domain)
                with grid[idx % 2]:
                    with st.container(border=True):
                        st.markdown(f"**{DOMAIN_LABELS[domain]}**")
                        triple = Triple(
                            scope=ratio_slider("Scope", current.scope, widget_key(active_id, f"{domain}_scope")),
                            severity=ratio_slider("Severity", current.severity, widget_key(active_id, f"{domain}_severity")),
                            salience=ratio_slider("Salience", current.salience, widget_key(active_id, f"{domain}_salience")),
                        )
                        st.caption(f"Score: {engine.triple_score(triple):.2f}")
                        triples[domain] = triple

        with r_col:
            st.subheader("Repair (R)")
            repair_values = {
                attr: ratio_slider(label, getattr(scenario.period.repair, attr), widget_key(active_id, attr))
                for attr, label in REPAIR_SLIDERS
            }

        with d_col:
            st.subheader("Debt & Flags")
            raw_baseline = st.text_input(
                "Baseline D(t-1)",
                value=str(scenario.period.baseline_debt),
                key=widget_key(active_id, "baseline")
            )
            try:
                baseline_debt = parse_number(raw_baseline)
            except ValueError as e:
                st.warning(f"Baseline D not a number ({e}); keeping {scenario.period.baseline_debt}")
                baseline_debt = scenario.period.baseline_debt

        # Rebuild the period from the widgets and store it if anything moved
        period = scenario.period
        updated = replace(
            period,
            baseline_debt=baseline_debt,
            violations=replace(period.violations, **triples),
            repair=replace(period.repair, **repair_values),
            health=replace(period.health, **health_values),
        )
        if updated != period:
            scenario = store.replace_scenario(replace(scenario, period=updated))

        result = engine.evaluate(scenario.period)

        with v_col:
            st.metric("V (sum of domain scores, capped)", f"{result.violation:.2f}")

        with r_col:
            st.metric("Repair avg", f"{result.repair_average:.2f}")
            st.metric("CapacityFactor = (L+E+K)/3", f"{result.capacity_factor:.2f}")
            st.metric("R = avg × Capacity", f"{result.repair:.2f}")

        with d_col:
            st.metric("D(t) = D + V − R", f"{result.debt:.2f}")
            st.metric(
                "R/V ratio",
                f"{result.repair_ratio:.2f}",
                delta="below target" if result.flags.repair_ratio_low else "on target",
                delta_color="inverse" if result.flags.repair_ratio_low else "normal"
            )
            flags = result.flags
            st.caption(
                f"Tipping rules breached: {flags.count}"
                + (" (Rupture window)" if flags.in_window else "")
            )
            breached = engine.breached_rules(flags)
            if flags.in_window:
                st.error("\n".join(f"• {rule}" for rule in breached))
            elif breached:
                st.warning("\n".join(f"• {rule}" for rule in breached))
            else:
                st.success("No tipping rules breached")

        render_projection(projection_engine, scenario.period.baseline_debt, result.violation, result.repair)


def render_projection(projection_engine: ProjectionEngine, baseline_debt: float, violation: float, repair: float):
    """Render the N-period projection chart."""

    st.subheader("N-period projection (constant parameters)")

    bounds = PLAYGROUND_CONFIG["horizon"]
    raw_horizon = st.number_input(
        "Horizon (periods)",
        min_value=bounds["min"],
        max_value=bounds["max"],
        value=st.session_state["horizon"],
        step=1,
        help=f"Between {bounds['min']} and {bounds['max']} periods"
    )
    horizon = clamp_horizon(raw_horizon, last_good=st.session_state["horizon"])
    st.session_state["horizon"] = horizon

    points = projection_engine.project(baseline_debt, violation, repair, horizon)
    projection_df = points_to_dataframe(points)

    fig = go.Figure()
    fig.add_trace(go.Scatter(x=projection_df["Period"], y=projection_df["D"], mode="lines",
                             name="Debt D", line=dict(color="#4f46e5", width=3)))
    fig.add_trace(go.Scatter(x=projection_df["Period"], y=projection_df["V"], mode="lines",
                             name="Violations V", line=dict(color="#f97316", width=2)))
    fig.add_trace(go.Scatter(x=projection_df["Period"], y=projection_df["R"], mode="lines",
                             name="Repair R", line=dict(color="#10b981", width=2)))
    fig.add_hline(y=0, line_color="#9ca3af")
    fig.update_layout(height=320, margin=dict(t=10, r=30, l=10, b=0), xaxis_title="Period")
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Projection data", expanded=False):
        st.dataframe(projection_df, use_container_width=True, hide_index=True)


def render_compare_tab(store: ScenarioStore):
    """Render lead-time inputs, results and the cross-scenario table."""

    active_id = st.session_state["active_id"]
    scenario = store.get(active_id)

    col1, col2 = st.columns(2)

    with col1:
        st.subheader(f"Dates for {scenario.name}")
        st.caption("Optional, for lead-time testing (YYYY-MM-DD)")
        date_col1, date_col2 = st.columns(2)
        with date_col1:
            event_date = st.text_input("Event Date (rupture/repair)", value=scenario.event_date or "",
                                       placeholder="YYYY-MM-DD", key=widget_key(active_id, "event_date"))
            alt_model_name = st.text_input("Alt Model Name", value=scenario.alt_model_name or "",
                                           placeholder="FSI / PITF / Polity …", key=widget_key(active_id, "alt_name"))
        with date_col2:
            cd_flag_date = st.text_input("CD Flag Date", value=scenario.cd_flag_date or "",
                                         placeholder="YYYY-MM-DD", key=widget_key(active_id, "cd_flag_date"))
            alt_flag_date = st.text_input("Alt Model Flag Date", value=scenario.alt_flag_date or "",
                                          placeholder="YYYY-MM-DD", key=widget_key(active_id, "alt_flag_date"))
        st.caption("Lead-time = Event − Flag. Earlier (larger) is better.")

    edits = {
        "event_date": event_date or None,
        "cd_flag_date": cd_flag_date or None,
        "alt_model_name": alt_model_name or None,
        "alt_flag_date": alt_flag_date or None,
    }
    if any(getattr(scenario, attr) != value for attr, value in edits.items()):
        scenario = store.update_scenario(active_id, **edits)

    lead = lead_time_comparison(scenario)

    with col2:
        st.subheader("Lead-time results")
        st.metric("CD lead-time (days)", lead.cd_lead if lead.cd_lead is not None else "—")
        st.metric(f"{lead.alt_model_name} lead-time (days)", lead.alt_lead if lead.alt_lead is not None else "—")
        if lead.advantage is not None:
            st.metric(
                "Lead-time advantage (CD − Alt)",
                lead.advantage,
                delta="CD earlier" if lead.advantage > 0 else "Alt earlier or equal",
                delta_color="normal" if lead.advantage > 0 else "inverse"
            )
        st.caption(
            "Note: This comparison is a scaffold. For rigorous testing, sync to external "
            "indices and define objective flag thresholds."
        )

    st.divider()

    st.subheader("📋 All Scenarios")
    summary_df: pd.DataFrame = scenarios_to_dataframe(store.to_list())
    st.dataframe(summary_df, use_container_width=True, hide_index=True)


def render_about_tab():
    """Render the about tab."""

    t = MODEL_CONFIG["tipping_thresholds"]

    st.header("ℹ️ About")

    st.subheader("What this does")
    st.markdown("""
    Interactive implementation of the GoG Contradiction Debt model. Change inputs, see
    V, R, D, R/V, and tipping flags update instantly. Project D across N periods with
    constant parameters.
    """)

    st.subheader("How V and R are computed")
    st.markdown(f"""
    - V = Σ(scope × severity × salience) across domains, capped at {MODEL_CONFIG['violation']['cap']:g}.
    - R = average(Ack, Reform, Compensation, Inclusivity, Fidelity) × CapacityFactor.
    - CapacityFactor = (L + E + K) / 3.
    """)

    st.subheader("Tipping rules")
    st.markdown(f"""
    - L < {t['legitimacy_below']}, E < {t['elite_cohesion_below']}, B > {t['backfire_above']},
      C > {t['cost_strain_above']}, R/V < {t['repair_ratio_below']}.
      {MODEL_CONFIG['rupture_window']['min_flags']} or more ⇒ rupture window.
    """)

    st.subheader("Notes")
    st.markdown("""
    This playground is for research and teaching. Values are illustrative; please replace
    with your data and document sources.
    """)


if __name__ == "__main__":
    main()
