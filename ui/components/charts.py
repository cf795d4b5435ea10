"""
Plotly figure for drawing a graph with its highlighted path.
"""

from __future__ import annotations

import plotly.graph_objects as go

from bfs_routing.config import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    EDGE_COLOR,
    EDGE_WIDTH,
    LABEL_COLOR,
    NODE_COLOR,
    NODE_LABEL_OFFSET,
    NODE_RADIUS,
    PATH_EDGE_COLOR,
)
from bfs_routing.graph.store import GraphStore
from bfs_routing.layout import NodeLayout


def path_edge_set(path: list[str] | None) -> set[tuple[str, str]]:
    """Directed edges along a path."""
    if not path:
        return set()
    return set(zip(path, path[1:]))


def create_graph_figure(
    store: GraphStore,
    layout: NodeLayout,
    path: list[str] | None = None,
) -> go.Figure:
    """
    Draw nodes, edges and weights on a fixed-size canvas.

    Edges on path are red, the rest gold. Each edge gets its weight at the
    midpoint. Nodes are light-blue circles labelled just above the centre.
    Canvas coordinates grow downwards, as on screen. Only reads the
    layout: nodes without a position, and edges touching them, are skipped.
    """
    on_path = path_edge_set(path)

    fig = go.Figure()

    mid_x, mid_y, mid_text = [], [], []
    for source, target, weight in store.edges():
        head = layout.position(target)
        tail = layout.position(source)
        if head is None or tail is None:
            continue
        x0, y0 = tail
        x1, y1 = head
        highlighted = (source, target) in on_path

        fig.add_trace(go.Scatter(
            x=[x0, x1],
            y=[y0, y1],
            mode="lines",
            line=dict(color=PATH_EDGE_COLOR if highlighted else EDGE_COLOR, width=EDGE_WIDTH),
            name=f"{source} → {target}",
            hoverinfo="name",
            showlegend=False,
        ))
        # Direction marker at the head end
        fig.add_annotation(
            x=x1, y=y1, ax=x0, ay=y0,
            xref="x", yref="y", axref="x", ayref="y",
            showarrow=True, arrowhead=2, arrowsize=1, arrowwidth=1,
            arrowcolor=PATH_EDGE_COLOR if highlighted else EDGE_COLOR,
            standoff=NODE_RADIUS, text="",
        )

        mid_x.append((x0 + x1) / 2)
        mid_y.append((y0 + y1) / 2)
        mid_text.append(str(weight))

    if mid_text:
        fig.add_trace(go.Scatter(
            x=mid_x,
            y=mid_y,
            mode="text",
            text=mid_text,
            textfont=dict(color=LABEL_COLOR, size=12),
            name="weights",
            hoverinfo="skip",
            showlegend=False,
        ))

    nodes = [node for node in store.nodes() if layout.position(node) is not None]
    if nodes:
        positions = [layout.position(node) for node in nodes]
        fig.add_trace(go.Scatter(
            x=[x for x, _ in positions],
            y=[y for _, y in positions],
            mode="markers",
            marker=dict(size=NODE_RADIUS * 2, color=NODE_COLOR, line=dict(width=1, color=LABEL_COLOR)),
            customdata=nodes,
            name="nodes",
            hovertemplate="<b>%{customdata}</b><extra></extra>",
            showlegend=False,
        ))
        fig.add_trace(go.Scatter(
            x=[x - NODE_RADIUS for x, _ in positions],
            y=[y - NODE_LABEL_OFFSET for _, y in positions],
            mode="text",
            text=nodes,
            textposition="top right",
            textfont=dict(color=LABEL_COLOR, size=12),
            name="labels",
            hoverinfo="skip",
            showlegend=False,
        ))

    fig.update_layout(
        width=CANVAS_WIDTH,
        height=CANVAS_HEIGHT,
        margin=dict(t=10, b=10, l=10, r=10),
        plot_bgcolor="white",
        dragmode=False,
    )
    fig.update_xaxes(range=[0, CANVAS_WIDTH], visible=False, fixedrange=True)
    fig.update_yaxes(range=[CANVAS_HEIGHT, 0], visible=False, fixedrange=True)
    return fig
