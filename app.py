import altair as alt
import pandas as pd
import streamlit as st
from contextlib import contextmanager
from typing import Optional

from evoviz.charts import comparison_chart, evolution_chart
from evoviz.config import load_settings
from evoviz.logging_config import configure_logging
from evoviz.metrics_comparison import comparison_frame
from evoviz.evolution import evolution_frame
from evoviz import state as vs

alt.data_transformers.disable_max_rows()

STATE_KEY = "viz_state"
TAB_LABELS = {"evolution": "Evolution Progress", "comparison": "Data Comparison"}


# ---------- UI / layout helpers ----------
def inject_base_styles():
    if st.session_state.get("_base_css_injected"):
        return
    st.markdown(
        """
        <style>
        .card {border: 1px solid #e5e7eb;border-radius: 12px;padding: 16px;background: #ffffff;
               box-shadow: 0 1px 2px rgba(0,0,0,0.04); margin-bottom: 12px;}
        .card-header {display: flex;justify-content: space-between;align-items: center;margin-bottom: 8px;}
        .card-title {font-weight: 600;font-size: 1.0rem;color: #111827;}
        .card-actions {font-size: 0.9rem;color: #2563eb;}
        .chip-row {display: flex;flex-wrap: wrap;gap: 6px;margin-top: 6px;}
        .chip {background: #f3f4f6;border: 1px solid #e5e7eb;border-radius: 14px;padding: 4px 10px;font-size: 0.85rem;color: #374151;}
        </style>
        """,
        unsafe_allow_html=True,
    )
    st.session_state["_base_css_injected"] = True


@contextmanager
def card(title: str, actions: Optional[str] = None):
    container = st.container()
    container.markdown(
        f"""
        <div class="card">
          <div class="card-header">
            <div class="card-title">{title}</div>
            <div class="card-actions">{actions or ""}</div>
          </div>
        """,
        unsafe_allow_html=True,
    )
    body = container.container()
    with body:
        yield body
    container.markdown("</div>", unsafe_allow_html=True)


def format_data_summary(viz: vs.VisualizerState) -> str:
    chips = [
        f"X values: {len(viz.x_values)}",
        f"Y values: {len(viz.y_values)}",
        f"Generations: {len(viz.generations)}",
        f"Excluded: {len(viz.excluded)}",
    ]
    return "".join([f"<span class='chip'>{txt}</span>" for txt in chips])


def render_view_header(title: str, summary_html: str, export_df: Optional[pd.DataFrame] = None, export_name: str = "export.csv"):
    c1, c2 = st.columns([8, 2])
    with c1:
        st.markdown(f"<div class='chip-row'>{summary_html}</div>", unsafe_allow_html=True)
    with c2:
        if export_df is not None and not export_df.empty:
            st.download_button(
                "Export CSV",
                data=export_df.to_csv(index=False).encode("utf-8"),
                file_name=export_name,
                mime="text/csv",
                key=f"export_{title}",
            )


# ---------- State ----------
def get_state() -> vs.VisualizerState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = vs.VisualizerState()
    return st.session_state[STATE_KEY]


def put_state(new_state: vs.VisualizerState):
    st.session_state[STATE_KEY] = new_state


def on_values_change(axis: str):
    put_state(vs.apply_values(get_state(), axis, st.session_state.get(f"{axis}_text", "")))


def on_expression_change():
    put_state(vs.set_function_expression(get_state(), st.session_state.get("expression_text", "")))


def on_submit():
    put_state(vs.submit(get_state(), settings))


def on_toggle(generation: int):
    put_state(vs.toggle_individual(get_state(), generation))


def on_tab_change():
    put_state(vs.set_active_tab(get_state(), st.session_state["tab_choice"]))


# ---------- UI setup ----------
settings = load_settings()
configure_logging(settings)

st.set_page_config(page_title="Evolutionary Algorithm Visualization", layout="wide")
inject_base_styles()
st.title("Evolutionary Algorithm Visualization")

viz = get_state()

input_cols = st.columns(3)
with input_cols[0]:
    with card("X Values (JSON or CSV)"):
        st.text_area(
            "X Values (JSON or CSV)",
            key="x_text",
            height=128,
            placeholder="Enter X values in JSON array or CSV format",
            label_visibility="collapsed",
            on_change=on_values_change,
            args=("x",),
        )
with input_cols[1]:
    with card("Y Values (JSON or CSV)"):
        st.text_area(
            "Y Values (JSON or CSV)",
            key="y_text",
            height=128,
            placeholder="Enter Y values in JSON array or CSV format",
            label_visibility="collapsed",
            on_change=on_values_change,
            args=("y",),
        )
with input_cols[2]:
    with card("Function Expression"):
        st.text_area(
            "Function Expression",
            key="expression_text",
            height=128,
            placeholder="Enter your function expression (e.g., x => Math.sin(x))",
            label_visibility="collapsed",
            on_change=on_expression_change,
        )

_, center, _ = st.columns([2, 1, 2])
with center:
    st.button("Generate Evolution", key="generate", type="primary", on_click=on_submit, use_container_width=True)


def render_evolution_view(viz: vs.VisualizerState):
    frame = evolution_frame(viz.generations, viz.excluded)
    render_view_header("evolution", format_data_summary(viz), export_df=frame, export_name="evolution.csv")
    if frame.empty:
        st.info("Press Generate Evolution to produce generations.")
    st.altair_chart(evolution_chart(frame), use_container_width=True)


def render_comparison_view(viz: vs.VisualizerState):
    # Generated points are redrawn on every rerun, matching the mock's behavior.
    frame = comparison_frame(viz.x_values, viz.y_values, fitness_max=settings.fitness_max)
    render_view_header("comparison", format_data_summary(viz), export_df=frame, export_name="comparison.csv")
    with card("Function Expression (LaTeX)"):
        st.latex(viz.latex_expression)
    st.altair_chart(comparison_chart(frame), use_container_width=True)


def render_individual_controls(viz: vs.VisualizerState):
    if not viz.generations:
        return
    with card("Individual Controls"):
        st.caption("Click a generation to exclude it from the evolution chart; click again to include it.")
        cols = st.columns(6)
        for i, gen in enumerate(viz.generations):
            excluded = gen.generation in viz.excluded
            cols[i % 6].button(
                f"✕ {gen.label}" if excluded else gen.label,
                key=f"toggle_{gen.generation}",
                type="secondary" if excluded else "primary",
                help="Excluded" if excluded else "Included",
                on_click=on_toggle,
                args=(gen.generation,),
                use_container_width=True,
            )


with card("Charts"):
    st.radio(
        "View",
        options=list(vs.TABS),
        index=vs.TABS.index(viz.active_tab),
        format_func=TAB_LABELS.get,
        horizontal=True,
        key="tab_choice",
        label_visibility="collapsed",
        on_change=on_tab_change,
    )
    viz = get_state()
    if viz.active_tab == "evolution":
        render_evolution_view(viz)
    else:
        render_comparison_view(viz)

render_individual_controls(get_state())
