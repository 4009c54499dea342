"""AstroYantra — Streamlit app that dimensions a yantra for your latitude."""

import html

import streamlit as st
import streamlit.components.v1 as components
from dotenv import load_dotenv
from streamlit_js_eval import streamlit_js_eval

load_dotenv()

from astroyantra.compute import (  # noqa: E402
    InvalidInputError,
    NotBuildableError,
    NothingGeneratedError,
    generate,
)
from astroyantra.config import configure_logging, load_settings  # noqa: E402
from astroyantra.export import build_export  # noqa: E402
from astroyantra.listing import dimension_rows  # noqa: E402
from astroyantra.location import (  # noqa: E402
    GEOLOCATION_JS,
    LocationFound,
    StatusLine,
    interpret_browser_payload,
    lookup_place,
    status_for,
)
from astroyantra.models import GenerationSession, InstrumentKind  # noqa: E402
from astroyantra.renderers.blueprint import render_blueprint  # noqa: E402
from astroyantra.renderers.plotly_2d import PlotlyScene  # noqa: E402
from astroyantra.renderers.svg_2d import SvgScene  # noqa: E402
from astroyantra.views import ViewMode, ViewModeCoordinator, embed_html  # noqa: E402

_settings = load_settings()
configure_logging(_settings)

st.set_page_config(
    page_title="AstroYantra.ai — Generator",
    page_icon="☀",
    layout="wide",
)

_INVALID_LATITUDE = "Please enter a valid latitude (from -90 to 90) to generate dimensions."
_NOT_BUILDABLE = (
    "At latitude 0 the gnomon lies flat and the base is infinite, "
    "so there is no scale drawing for this instrument."
)
_WIDTH = _settings.canvas_width
_HEIGHT = _settings.canvas_height

# --- Session state initialization ---
if "generation" not in st.session_state:
    st.session_state.generation = GenerationSession()
if "views" not in st.session_state:
    st.session_state.views = ViewModeCoordinator()
if "scene" not in st.session_state:
    st.session_state.scene = PlotlyScene(_WIDTH, _HEIGHT)
    st.session_state.views.attach_scene(st.session_state.scene)
if "status" not in st.session_state:
    st.session_state.status = None
if "locating" not in st.session_state:
    st.session_state.locating = False
if "locate_seq" not in st.session_state:
    st.session_state.locate_seq = 0
if "latitude_text" not in st.session_state:
    st.session_state.latitude_text = ""
if "longitude_text" not in st.session_state:
    st.session_state.longitude_text = ""
if "pending_location" not in st.session_state:
    st.session_state.pending_location = None
if "error_msg" not in st.session_state:
    st.session_state.error_msg = None
if "not_buildable" not in st.session_state:
    st.session_state.not_buildable = False

session: GenerationSession = st.session_state.generation
views: ViewModeCoordinator = st.session_state.views
scene: PlotlyScene = st.session_state.scene

st.markdown(
    """
    <style>
    html, body, [data-testid="stAppViewContainer"], [data-testid="stMain"] {
        background-color: #151f2b !important;
    }
    [data-testid="stHeader"], [data-testid="stToolbar"] {
        display: none !important;
    }
    /* Status line */
    .geo-status { color: #7ec8e3; font-size: 0.9rem; min-height: 1.4rem; }
    .geo-status.error { color: #ff9999; }
    /* Dimension list */
    .dim-list { list-style: none; padding: 0; }
    .dim-list li {
        display: flex;
        justify-content: space-between;
        border-bottom: 1px solid rgba(255,255,255,0.08);
        padding: 0.45rem 0;
        color: #d0d8e8;
    }
    .dim-list strong { color: #ecf0f1; }
    /* Button */
    [data-testid="stButton"] button, [data-testid="stDownloadButton"] button {
        background-color: rgba(52, 152, 219, 0.2) !important;
        color: #7ec8e3 !important;
        border: 1px solid #3498db !important;
        border-radius: 6px !important;
        font-weight: 600;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

st.title("Yantra Generator")

# --- Browser geolocation (one-shot, resolves on a later rerun) ---
if st.session_state.locating:
    payload = streamlit_js_eval(
        js_expressions=GEOLOCATION_JS,
        key=f"_geolocate_{st.session_state.locate_seq}",
        height=0,
    )
    result = interpret_browser_payload(payload)
    st.session_state.status = status_for(result)
    if result is not None:
        st.session_state.locating = False
        if isinstance(result, LocationFound):
            st.session_state.pending_location = result
        st.rerun()

# Widget-backed keys can only be written before the widgets are created
if st.session_state.pending_location is not None:
    found: LocationFound = st.session_state.pending_location
    st.session_state.latitude_text = found.latitude_text
    st.session_state.longitude_text = found.longitude_text
    st.session_state.pending_location = None

input_col, output_col = st.columns([2, 3])

# --- Input panel ---
with input_col:
    st.subheader("1. Choose an instrument")
    instrument = st.selectbox(
        "Instrument",
        options=list(InstrumentKind),
        format_func=lambda k: k.display_name,
    )

    st.subheader("2. Your location")
    lat_col, lng_col = st.columns(2)
    with lat_col:
        st.text_input("Latitude", key="latitude_text", placeholder="e.g. 28.6139")
    with lng_col:
        st.text_input("Longitude", key="longitude_text", placeholder="e.g. 77.2090")

    if st.button("📍 Use my location", key="geolocate_btn"):
        st.session_state.locating = True
        st.session_state.locate_seq += 1
        st.session_state.status = status_for(None)
        st.rerun()

    place = st.text_input("…or look up a place", placeholder="e.g. Jantar Mantar, New Delhi")
    if st.button("Look up", key="lookup_btn") and place.strip():
        st.session_state.status = status_for(None)
        result = lookup_place(place.strip(), _settings)
        st.session_state.status = status_for(result)
        if isinstance(result, LocationFound):
            st.session_state.pending_location = result
        st.rerun()

    status: StatusLine | None = st.session_state.status
    status_text = status.visible_text() if status is not None else ""
    status_cls = "geo-status error" if status is not None and status.is_error else "geo-status"
    st.markdown(
        f"<div class='{status_cls}'>{html.escape(status_text)}</div>",
        unsafe_allow_html=True,
    )

    if st.button("Generate dimensions", key="generate_btn", type="primary"):
        st.session_state.error_msg = None
        try:
            generated = generate(session, instrument, st.session_state.latitude_text)
        except InvalidInputError:
            st.session_state.error_msg = _INVALID_LATITUDE
        else:
            try:
                render_blueprint(generated.dimensions, scene, _WIDTH, _HEIGHT)
                st.session_state.not_buildable = False
            except NotBuildableError:
                st.session_state.not_buildable = True
        st.rerun()

    if st.session_state.error_msg:
        st.error(st.session_state.error_msg)

    # --- Dimension list ---
    if session.current is not None:
        heading, rows = dimension_rows(session.current)
        st.subheader(heading)
        items = "".join(
            f"<li title=\"{html.escape(row.tooltip)}\"><span>{html.escape(row.label)}</span>"
            f"<strong>{html.escape(row.value)}</strong></li>"
            for row in rows
        )
        st.markdown(f"<ul class='dim-list'>{items}</ul>", unsafe_allow_html=True)

    # --- Export ---
    try:
        document = build_export(session)
    except NothingGeneratedError as e:
        if st.button("⬇ Download dimensions", key="download_btn"):
            st.error(str(e))
    else:
        st.download_button(
            "⬇ Download dimensions",
            data=document.data,
            file_name=document.filename,
            mime=document.mime,
            key="download_btn",
        )
        if session.current is not None and session.current.dimensions.is_buildable:
            svg_scene = SvgScene(_WIDTH, _HEIGHT)
            render_blueprint(session.current.dimensions, svg_scene, _WIDTH, _HEIGHT)
            st.download_button(
                "⬇ Blueprint (SVG)",
                data=svg_scene.markup.encode("utf-8"),
                file_name=document.filename.rsplit(".", 1)[0] + ".svg",
                mime="image/svg+xml",
                key="download_svg_btn",
            )

# --- Output panel: 2D schematic / embedded 3D model ---
with output_col:
    btn_2d, btn_3d, _ = st.columns([1, 1, 4])
    with btn_2d:
        if st.button(
            "2D",
            key="view_2d",
            type="primary" if views.is_visible(ViewMode.SCHEMATIC) else "secondary",
        ):
            views.set_mode(ViewMode.SCHEMATIC)
            st.rerun()
    with btn_3d:
        if st.button(
            "3D",
            key="view_3d",
            type="primary" if views.is_visible(ViewMode.EMBEDDED_MODEL) else "secondary",
        ):
            views.set_mode(ViewMode.EMBEDDED_MODEL)
            st.rerun()

    current = session.current
    if current is None:
        st.markdown(
            "<div style='height:400px; display:flex; align-items:center; justify-content:center;"
            " color:#556677; font-size:1.1rem;'>Enter a latitude and generate dimensions</div>",
            unsafe_allow_html=True,
        )
    elif views.is_visible(ViewMode.SCHEMATIC):
        if not st.session_state.not_buildable and scene.figure is None:
            # Result stored but never drawn into this scene
            try:
                render_blueprint(current.dimensions, scene, _WIDTH, _HEIGHT)
            except NotBuildableError:
                st.session_state.not_buildable = True
        if st.session_state.not_buildable:
            st.info(_NOT_BUILDABLE)
        else:
            st.plotly_chart(
                scene.figure,
                use_container_width=False,
                config={"scrollZoom": True, "displayModeBar": False},
            )
    else:
        components.html(embed_html(current.instrument), height=_HEIGHT + 50)
