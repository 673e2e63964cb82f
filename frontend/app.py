import os
import uuid

import folium
import requests
import streamlit as st
from streamlit_folium import st_folium

from catalog_state import DEBOUNCE_SECONDS, CatalogBrowser

# Page configuration
st.set_page_config(
    page_title="Cotizador de Avaluos",
    page_icon="🏠",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.markdown("""
<style>
    .main-header {
        font-size: 2.5rem;
        color: #0d9488;
        text-align: center;
        padding: 1rem 0;
        font-weight: bold;
    }
    .price-box {
        text-align: center;
        font-size: 2rem;
        font-weight: bold;
        color: #0d9488;
    }
    .service-card {
        padding: 1.2rem;
        border-radius: 0.75rem;
        background: linear-gradient(90deg, #1f2937, #374151, #4b5563);
        color: white;
        text-align: center;
        min-height: 180px;
        margin-bottom: 1rem;
    }
    .service-price {
        display: inline-block;
        background-color: #f3f4f6;
        color: #1f2937;
        padding: 0.3rem 1rem;
        border-radius: 999px;
        margin-top: 0.8rem;
    }
</style>
""", unsafe_allow_html=True)

BACKEND_URL = os.getenv("BACKEND_URL", "http://localhost:8000")

# Initialize session state
if "session_id" not in st.session_state:
    st.session_state.session_id = str(uuid.uuid4())

if "last_click" not in st.session_state:
    st.session_state.last_click = None

def call_backend(method: str, path: str, **kwargs) -> dict:
    """Call the backend API and return the JSON body or an error dict."""
    try:
        response = requests.request(method, f"{BACKEND_URL}{path}", timeout=30, **kwargs)
        response.raise_for_status()
        return response.json()
    except requests.exceptions.ConnectionError:
        return {"error": "No se pudo conectar con el backend. Verifica que esté corriendo en el puerto 8000."}
    except requests.exceptions.Timeout:
        return {"error": "La solicitud tardó demasiado. Intenta de nuevo."}
    except requests.exceptions.RequestException as e:
        return {"error": f"Ocurrió un error: {str(e)}"}

def quote_path(suffix: str = "") -> str:
    return f"/quote/{st.session_state.session_id}{suffix}"

if "catalog" not in st.session_state:
    st.session_state.catalog = CatalogBrowser(lambda params: call_backend("GET", "/services", params=params))

def build_folium_map(view: dict) -> folium.Map:
    center = view["center"]
    fmap = folium.Map(
        location=[center["lat"], center["lng"]],
        zoom_start=view["zoom"],
        tiles=view["tile_url"],
        attr=view["tile_attribution"],
    )
    for marker in view["markers"]:
        pos = marker["position"]
        color = "blue" if marker["kind"] == "office" else "red"
        folium.Marker(
            [pos["lat"], pos["lng"]],
            popup=marker["popup"],
            icon=folium.Icon(color=color, icon="home" if marker["kind"] == "office" else "map-marker"),
        ).add_to(fmap)
    if view.get("route"):
        route = view["route"]
        folium.PolyLine(
            [[p["lat"], p["lng"]] for p in route["positions"]],
            color=route["color"],
        ).add_to(fmap)
    return fmap

def render_quote_page():
    st.markdown('<div class="main-header">Cotizador de Avaluos</div>', unsafe_allow_html=True)

    quote = call_backend("GET", quote_path())
    if "error" in quote:
        st.error(quote["error"])
        st.code("cd backend && python run.py", language="bash")
        return

    col_area, col_floors = st.columns(2)
    with col_area:
        area = st.number_input("Área (m²):", min_value=1.0, step=1.0, value=float(quote["area"]))
    with col_floors:
        floors = st.number_input("Número de pisos:", min_value=1, step=1, value=int(quote["floors"]))

    if area != quote["area"] or floors != quote["floors"]:
        quote = call_backend("PUT", quote_path(), json={"area": area, "floors": int(floors)})

    # Address search, same role as the geocoder control on the map
    with st.form("geocoder"):
        query = st.text_input("Buscar dirección", placeholder="Ej: Carrera 7 # 32-16, Bogotá")
        submitted = st.form_submit_button("Buscar")
    if submitted and query:
        results = call_backend("GET", "/geocode", params={"q": query})
        if isinstance(results, dict) and "error" in results:
            st.error(results["error"])
        elif not results:
            st.warning("No se encontraron resultados para esa dirección.")
        else:
            first = results[0]
            st.caption(first["display_name"])
            quote = call_backend(
                "POST", quote_path("/location"),
                json={"lat": first["lat"], "lng": first["lng"], "source": "geocoder"},
            )

    view = call_backend("GET", f"/map/{st.session_state.session_id}")
    if "error" not in view:
        map_state = st_folium(build_folium_map(view), key="quote-map", height=420, use_container_width=True)
        click = (map_state or {}).get("last_clicked")
        if click and click != st.session_state.last_click:
            st.session_state.last_click = click
            call_backend("POST", quote_path("/location"), json={"lat": click["lat"], "lng": click["lng"], "source": "click"})
            st.rerun()

    if "error" in quote:
        st.error(quote["error"])
        return

    if quote["has_route"]:
        st.write(f"Distancia a la ubicación seleccionada: **{quote['distance_km']:.2f} km**")
        st.write(f"Tiempo estimado de la ruta: **{quote['duration_label']}**")

    st.markdown("<h3 style='text-align: center;'>Precio Final del Avaluo:</h3>", unsafe_allow_html=True)
    st.markdown(f'<div class="price-box">{quote["breakdown"]["total_label"]}</div>', unsafe_allow_html=True)

def clear_widget_state(kind: str = None, value: str = None):
    """Drops the widget keys behind removed filters so they redraw unchecked."""
    keys = {
        "category": [f"cat-{value}"],
        "type": [f"type-{value}"],
        "price": ["catalog-price"],
        "search": ["catalog-search"],
    }.get(kind)
    if keys is None:
        keys = [k for k in st.session_state.keys() if k.startswith(("cat-", "type-", "catalog-"))]
    for key in keys:
        st.session_state.pop(key, None)

@st.fragment(run_every=DEBOUNCE_SECONDS)
def render_catalog_results():
    """Reruns on its own so a pending search settles without blocking the page."""
    catalog: CatalogBrowser = st.session_state.catalog
    services = catalog.results()

    if catalog.error:
        st.error(catalog.error)
        return
    if not services:
        st.markdown(f"<p style='text-align: center; color: #6b7280;'>{catalog.message}</p>", unsafe_allow_html=True)
        return

    columns = st.columns(3)
    for index, service in enumerate(services):
        with columns[index % 3]:
            st.markdown(f"""
            <div class="service-card">
                <h4>{service['name']}</h4>
                <small>{service['category']} · {service['type']}</small><br>
                <span class="service-price">{service['price_label']}</span>
            </div>
            """, unsafe_allow_html=True)

def render_catalog_page():
    catalog: CatalogBrowser = st.session_state.catalog
    st.markdown('<div class="main-header">LISTA DE SERVICIOS 2024</div>', unsafe_allow_html=True)

    facets = call_backend("GET", "/services/facets")
    if "error" in facets:
        st.error(facets["error"])
        return

    sidebar, main = st.columns([1, 3])
    with sidebar:
        # text_input commits on enter or blur; quick successive commits still coalesce
        text = st.text_input("Buscar servicios...", value=catalog.search_text, key="catalog-search")
        catalog.set_search_text(text)

        labels = ["Todos los Rangos de Precio"] + facets["price_ranges"]
        current = catalog.price_range if catalog.price_range in labels else labels[0]
        selected = st.selectbox("Rango de Precio", labels, index=labels.index(current), key="catalog-price")
        catalog.set_price_range(None if selected == labels[0] else selected)

        st.markdown("**Categorías**")
        for category in facets["categories"]:
            checked = st.checkbox(category, value=category in catalog.selected_categories, key=f"cat-{category}")
            catalog.toggle_category(category, checked)

        st.markdown("**Tipos de Trabajo**")
        for service_type in facets["types"]:
            checked = st.checkbox(service_type, value=service_type in catalog.selected_types, key=f"type-{service_type}")
            catalog.toggle_type(service_type, checked)

    with main:
        # Active filter tags, each one removable
        tags = catalog.active_filters()
        if catalog.has_active_filters:
            tag_columns = st.columns(len(tags) + 1)
            if tag_columns[0].button("✖ Resetear Filtros"):
                catalog.reset_filters()
                clear_widget_state()
                st.rerun()
            for column, (kind, value, label) in zip(tag_columns[1:], tags):
                if column.button(f"{label} ✖", key=f"tag-{kind}-{value or ''}"):
                    catalog.remove_filter(kind, value)
                    clear_widget_state(kind, value)
                    st.rerun()

        render_catalog_results()

# Sidebar
with st.sidebar:
    st.header("📋 Menú")
    page = st.radio("Sección", ["Cotizador", "Servicios"])

    st.divider()
    st.write(f"**Sesión:** `{st.session_state.session_id[:8]}...`")
    if st.button("🔄 Nueva cotización"):
        call_backend("DELETE", quote_path())
        st.session_state.session_id = str(uuid.uuid4())
        st.session_state.last_click = None
        st.rerun()

if page == "Cotizador":
    render_quote_page()
else:
    render_catalog_page()
