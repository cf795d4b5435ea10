"""
BFS Visualizer (Streamlit)
"""

import streamlit as st

from bfs_routing.session import RoutingSession
from ui.components.charts import create_graph_figure

st.set_page_config(page_title="BFS Visualizer", page_icon="🧭", layout="wide")

st.title("BFS Visualizer")
st.caption("Directed, weighted edges. BFS finds the path with the fewest hops.")

# Streamlit reruns the script on every interaction; keep the session across reruns
if "routing" not in st.session_state:
    st.session_state.routing = RoutingSession()

routing: RoutingSession = st.session_state.routing

col1, col2, col3 = st.columns(3)

with col1:
    with st.form("edge", clear_on_submit=True):
        st.subheader("Edge")
        source = st.text_input("From")
        target = st.text_input("To")
        weight = st.text_input("Weight", placeholder="1")
        if st.form_submit_button("Add Edge"):
            routing.add_edge(source, target, weight)

with col2:
    with st.form("bfs"):
        st.subheader("BFS")
        start = st.text_input("Source")
        goal = st.text_input("Destination")
        if st.form_submit_button("Run BFS", type="primary"):
            routing.run_bfs(start, goal)

with col3:
    with st.form("delete", clear_on_submit=True):
        st.subheader("Delete")
        node = st.text_input("Node to Delete")
        if st.form_submit_button("Delete Node"):
            routing.delete_node(node)

    if st.button("Clear Graph", use_container_width=True):
        routing.reset()

st.divider()

c1, c2, c3 = st.columns(3)
c1.metric("Nodes", routing.store.node_count())
c2.metric("Edges", routing.store.edge_count())
c3.metric("Hops", len(routing.path) - 1 if routing.path else "-")

st.plotly_chart(
    create_graph_figure(routing.store, routing.layout, routing.path),
    use_container_width=False,
    config={"displayModeBar": False},
)

st.text_area("Log", routing.log_text(), height=140, disabled=True)
