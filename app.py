"""
Sports Facility Visual Designer
Pick sports and a typical size, preview the building shell, compare example
top-view layouts and hand the chosen layout to the facility calculator.
"""

import streamlit as st
import pandas as pd

from facility_layout.designer import DesignerSelection, FacilityDesigner, load_facility_presets
from facility_layout.diagrams import create_top_view_diagram_figure, figure_to_bytes
from facility_layout.gallery import LayoutGallery
from facility_layout.geometry.expansion import COUNT_KEY_KINDS
from facility_layout.geometry.layout_modes import LayoutAlgorithm, get_layout_defaults
from facility_layout.geometry.unit_catalog import lookup_unit
from facility_layout.pipeline import LayoutInputs, run_layout, validate_layout_inputs
from facility_layout.reporting import (
    build_fit_summary,
    build_gallery_comparison,
    build_placement_table,
)
from facility_layout.scene import scene_to_svg
from facility_layout.visualization import create_top_view_figure

# Page config
st.set_page_config(
    page_title="Sports Facility Visual Designer",
    page_icon="🏟️",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title("🏟️ Sports Facility Visual Designer")
st.markdown("**Pick your sport(s), then choose a size to preview example layouts.**")


@st.cache_data
def load_presets():
    return load_facility_presets()


designer = FacilityDesigner(load_presets())

# Sidebar - Selection
st.sidebar.header("Design visually")

sports = st.sidebar.multiselect(
    "Sports",
    options=list(designer.sport_labels.keys()),
    format_func=lambda k: designer.sport_labels[k],
    help="Several sports share one shell; indoor soccer drives the shell size when included."
)

size = st.sidebar.radio(
    "Typical size",
    options=list(designer.size_labels.keys()),
    index=1,
    format_func=lambda k: designer.size_labels[k],
    horizontal=True,
)

selection = DesignerSelection(sports=sports, size=size)
shell_sf = designer.shell_area_for(selection)
counts = designer.aggregate_counts(selection)

if shell_sf:
    st.sidebar.info(f"**Shell: {shell_sf:,.0f} SF**")
if counts:
    st.sidebar.markdown("### Recommended units")
    for key, value in counts.items():
        st.sidebar.markdown(f"- {key.replace('_', ' ')}: **{value}**")

tab1, tab2, tab3, tab4 = st.tabs(["🏢 Shell", "🧩 Layout Gallery", "🛠️ Custom Layout", "📏 Size Tiers"])

# ===== SHELL PREVIEW =====
with tab1:
    if not sports:
        st.info("Select at least one sport in the sidebar to size the building shell.")
    else:
        preview = run_layout(designer.shell_preview_inputs(selection))
        st.plotly_chart(create_top_view_figure(preview.scene), use_container_width=False,
                        key="shell_preview")
        env = preview.envelope
        col1, col2, col3 = st.columns(3)
        col1.metric("Shell", f"{env.outer_width_ft:.0f}' × {env.outer_height_ft:.0f}'")
        col2.metric("Interior", f"{env.inner_width_ft:.0f}' × {env.inner_height_ft:.0f}'")
        col3.metric("Gross Area", f"{env.gross_area_sqft:,.0f} SF")

# ===== GALLERY =====
with tab2:
    if not sports:
        st.info("Select at least one sport to see example layouts.")
    else:
        st.markdown("### Example top-view layouts")
        st.caption("Select a configuration; you can still edit everything later.")

        def _on_choose(choice):
            st.session_state["layout_selection"] = designer.build_layout_selection(selection, choice)

        selected = st.session_state.get("layout_selection", {}).get("layoutChoice", {}).get("id")
        gallery = LayoutGallery(shell_sf, counts, on_choose=_on_choose, selected_id=selected)
        results = gallery.render_all()

        cols = st.columns(len(gallery.choices))
        for col, choice in zip(cols, gallery.choices):
            result = results[choice.id]
            with col:
                st.plotly_chart(create_top_view_figure(result.scene), use_container_width=True,
                                key=f"gallery_{choice.id}")
                diag = result.diagnostics
                if not diag["all_fit"]:
                    st.warning(f"{diag['dropped_units']} of {diag['requested_units']} units do not fit")
                label = "Selected ✓" if gallery.is_selected(choice) else "Use this layout"
                if st.button(label, key=f"use_{choice.id}"):
                    gallery.choose(choice)
                    st.rerun()
                st.download_button(
                    "Download SVG",
                    data=scene_to_svg(result.scene),
                    file_name=f"{choice.id}.svg",
                    mime="image/svg+xml",
                    key=f"svg_{choice.id}",
                )

        st.dataframe(
            build_gallery_comparison(results, {c.id: c.name for c in gallery.choices}),
            use_container_width=True,
            hide_index=True,
        )

        if "layout_selection" in st.session_state:
            with st.expander("Selected layout (hand-off to calculator)"):
                st.json(st.session_state["layout_selection"])

# ===== CUSTOM LAYOUT =====
with tab3:
    defaults = get_layout_defaults()
    col1, col2 = st.columns([1, 2])

    with col1:
        gross = st.number_input("Gross area (SF)", min_value=1000, max_value=200000,
                                value=int(shell_sf or 16000), step=1000)
        aspect = st.slider("Aspect ratio (W/H)", 0.5, 4.0, float(defaults["aspect_ratio"]), 0.1)
        perimeter = st.slider("Perimeter buffer (ft)", 0, 30, int(defaults["perimeter_ft"]))
        gap = st.slider("Gap between units (ft)", 0, 30, int(defaults["gap_ft"]))
        algorithm = st.selectbox("Packing algorithm", [a.value for a in LayoutAlgorithm])
        show_legend = st.checkbox("Show legend", value=True)

        st.markdown("### Units")
        custom_counts, rotate = {}, {}
        for count_key, kind in COUNT_KEY_KINDS:
            dims = lookup_unit(kind)
            c_count, c_rot = st.columns([2, 1])
            custom_counts[count_key] = c_count.number_input(
                f"{dims.label} ({dims.width}' × {dims.height}')",
                min_value=0, max_value=40, value=int(counts.get(count_key, 0)),
                key=f"count_{count_key}",
            )
            rotate[count_key] = c_rot.checkbox("Rotate", key=f"rotate_{count_key}")

    inputs = LayoutInputs(
        gross_area_sqft=gross,
        counts=custom_counts,
        rotate=rotate,
        algorithm=LayoutAlgorithm.parse(algorithm),
        aspect_ratio=aspect,
        perimeter_ft=perimeter,
        gap_ft=gap,
        show_legend=show_legend,
        title="Custom Layout",
        building_label=f"{gross:,.0f} sf",
    )

    with col2:
        try:
            validate_layout_inputs(inputs)
        except ValueError as e:
            st.error(str(e))
            st.stop()

        result = run_layout(inputs)
        st.plotly_chart(create_top_view_figure(result.scene), use_container_width=True,
                        key="custom_layout")

        d1, d2, d3 = st.columns(3)
        d1.metric("Placed", f"{result.packing.placed_count}/{result.packing.requested_count}")
        d2.metric("Dropped", f"{result.packing.dropped_count}")
        d3.metric("Utilization", f"{result.layout.utilization * 100:.1f}%")

        st.dataframe(build_fit_summary(result.layout), use_container_width=True, hide_index=True)
        with st.expander("Placements"):
            st.dataframe(build_placement_table(result.layout), use_container_width=True,
                         hide_index=True)

        e1, e2 = st.columns(2)
        e1.download_button("Download SVG", data=scene_to_svg(result.scene),
                           file_name="layout.svg", mime="image/svg+xml")
        fig = create_top_view_diagram_figure(result.layout)
        e2.download_button("Download PNG", data=figure_to_bytes(fig, "png"),
                           file_name="layout.png", mime="image/png")

# ===== SIZE TIERS =====
with tab4:
    st.markdown("### What size facility are you considering?")
    tier_cols = st.columns(3)
    for i, tier_key in enumerate(designer.size_tiers):
        tier_inputs = designer.tier_layout_inputs(tier_key)
        tier_result = run_layout(tier_inputs)
        with tier_cols[i % 3]:
            st.markdown(f"**{tier_inputs.title}**")
            st.plotly_chart(create_top_view_figure(tier_result.scene, show_title=False),
                            use_container_width=True, key=f"tier_{tier_key}")
            st.caption(" · ".join(f"{k.replace('_', ' ')}: {v}"
                                  for k, v in tier_inputs.counts.items()))

    st.dataframe(
        pd.DataFrame([
            {"Tier": t["label"], "Gross SF": t["gross"], "Shell": f"{t['dims']['w']}' × {t['dims']['h']}'"}
            for t in designer.size_tiers.values()
        ]),
        use_container_width=True,
        hide_index=True,
    )
