"""
Presentation layer for BFS Routing.

- flask_app: Web visualizer with forms, JSON API and node dragging
- app: Streamlit page with the same controls
- components.charts: Plotly drawing of a graph and its BFS path
"""
