"""
Flask-based BFS visualizer: build a graph, run BFS, drag nodes around.

One RoutingSession is shared by all requests. Every access goes through
its lock so a request never sees a half-applied mutation.
"""

import logging

from dotenv import load_dotenv
from flask import Flask, jsonify, redirect, render_template_string, request, url_for

from bfs_routing.config import ENV_PATH, FLASK_HOST, FLASK_PORT, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL, SECRET_KEY
from bfs_routing.session import RoutingSession
from ui.components.charts import create_graph_figure

load_dotenv(ENV_PATH)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = SECRET_KEY

routing = RoutingSession()

# HTML Templates
BASE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>BFS Visualizer</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; display: flex; justify-content: space-between; align-items: center; }
        .header h1 { font-size: 1.5rem; }
        .header button { background: #e74c3c; }
        .toolbar { display: flex; gap: 10px; padding: 10px; flex-wrap: wrap; align-items: center; background: white; border-bottom: 1px solid #ddd; }
        .toolbar form { display: flex; gap: 6px; align-items: center; }
        .toolbar label { font-weight: 600; color: #333; }
        input[type="text"] { width: 110px; padding: 6px 10px; border: 2px solid #ddd; border-radius: 6px; font-size: 14px; }
        input[type="text"]:focus { outline: none; border-color: #4ecdc4; }
        button { background: #4ecdc4; color: white; border: none; padding: 7px 16px; border-radius: 6px; font-size: 14px; cursor: pointer; }
        button:hover { background: #45b7aa; }
        .canvas { display: flex; justify-content: center; padding: 10px; }
        .log { margin: 0 10px 10px; }
        .log textarea { width: 100%; height: 100px; font-family: monospace; padding: 8px; border: 1px solid #ddd; border-radius: 6px; }
    </style>
</head>
<body>
    {{ content | safe }}
</body>
</html>
"""

PAGE_CONTENT = """
<div class="header">
    <h1>BFS Visualizer</h1>
    <form method="POST" action="/reset"><button type="submit">Clear Graph</button></form>
</div>
<div class="toolbar">
    <form method="POST" action="/edge">
        <label>Edge:</label>
        <input type="text" name="from" placeholder="From">
        <input type="text" name="to" placeholder="To">
        <input type="text" name="weight" placeholder="Weight">
        <button type="submit">Add Edge</button>
    </form>
    <form method="POST" action="/bfs">
        <label>BFS:</label>
        <input type="text" name="source" placeholder="Source" value="{{ source }}">
        <input type="text" name="destination" placeholder="Destination" value="{{ destination }}">
        <button type="submit">Run BFS</button>
    </form>
    <form method="POST" action="/delete">
        <input type="text" name="node" placeholder="Node to Delete">
        <button type="submit">Delete Node</button>
    </form>
</div>
<div class="canvas">{{ figure | safe }}</div>
<div class="log"><textarea readonly>{{ log }}</textarea></div>
<script>
(function () {
    const plot = document.getElementById('graph');
    if (!plot) return;

    function toData(evt) {
        const layout = plot._fullLayout;
        const rect = plot.getBoundingClientRect();
        return {
            x: layout.xaxis.p2d(evt.clientX - rect.left - layout._size.l),
            y: layout.yaxis.p2d(evt.clientY - rect.top - layout._size.t),
        };
    }

    async function send(action, evt) {
        const point = toData(evt);
        const resp = await fetch('/api/drag', {
            method: 'POST',
            headers: {'Content-Type': 'application/json'},
            body: JSON.stringify({action: action, x: point.x, y: point.y}),
        });
        return resp.json();
    }

    let dragging = false;
    plot.addEventListener('mousedown', async (evt) => {
        const state = await send('press', evt);
        dragging = state.selected !== null;
    });
    plot.addEventListener('mousemove', (evt) => {
        if (dragging) send('drag', evt);
    });
    plot.addEventListener('mouseup', async (evt) => {
        if (!dragging) return;
        dragging = false;
        await send('release', evt);
        window.location.reload();
    });
})();
</script>
"""


def render_page(source: str = "", destination: str = "") -> str:
    """Render the main page from the current session."""
    with routing.lock:
        fig = create_graph_figure(routing.store, routing.layout, routing.path)
        log = routing.log_text()

    figure_html = fig.to_html(
        full_html=False,
        include_plotlyjs="cdn",
        div_id="graph",
        config={"displayModeBar": False, "staticPlot": False},
    )
    content = render_template_string(
        PAGE_CONTENT,
        source=source,
        destination=destination,
        figure=figure_html,
        log=log,
    )
    return render_template_string(BASE_TEMPLATE, content=content)


@app.route("/")
def index():
    return render_page(
        source=request.args.get("source", ""),
        destination=request.args.get("destination", ""),
    )


@app.route("/edge", methods=["POST"])
def add_edge():
    with routing.lock:
        routing.add_edge(
            request.form.get("from", ""),
            request.form.get("to", ""),
            request.form.get("weight", ""),
        )
    return redirect(url_for("index"))


@app.route("/bfs", methods=["POST"])
def run_bfs():
    source = request.form.get("source", "").strip()
    destination = request.form.get("destination", "").strip()
    with routing.lock:
        routing.run_bfs(source, destination)
    return redirect(url_for("index", source=source, destination=destination))


@app.route("/delete", methods=["POST"])
def delete_node():
    with routing.lock:
        routing.delete_node(request.form.get("node", ""))
    return redirect(url_for("index"))


@app.route("/reset", methods=["POST"])
def reset():
    with routing.lock:
        routing.reset()
    return redirect(url_for("index"))


# ====================
# JSON API
# ====================

@app.route("/api/graph")
def api_graph():
    with routing.lock:
        return jsonify(routing.snapshot())


@app.route("/api/edge", methods=["POST"])
def api_add_edge():
    data = request.get_json(silent=True) or {}
    with routing.lock:
        added = routing.add_edge(data.get("source"), data.get("target"), data.get("weight"))
        if not added:
            return jsonify({"error": "source and target are required"}), 400
        return jsonify(routing.snapshot())


@app.route("/api/bfs", methods=["POST"])
def api_bfs():
    data = request.get_json(silent=True) or {}
    with routing.lock:
        result = routing.run_bfs(data.get("start"), data.get("goal"))
        if result is None:
            return jsonify({"error": routing.log[-1], "log": routing.log}), 404
        return jsonify({
            "found": result.found,
            "path": result.path,
            "visitation_log": result.visitation_log,
            "log": routing.log,
        })


@app.route("/api/node/<path:node>", methods=["DELETE"])
def api_delete_node(node: str):
    with routing.lock:
        deleted = routing.delete_node(node)
        snapshot = routing.snapshot()
    snapshot["deleted"] = deleted
    return jsonify(snapshot)


@app.route("/api/drag", methods=["POST"])
def api_drag():
    data = request.get_json(silent=True) or {}
    action = data.get("action")

    try:
        x = float(data.get("x", 0))
        y = float(data.get("y", 0))
    except (TypeError, ValueError):
        return jsonify({"error": "x and y must be numbers"}), 400

    with routing.lock:
        if action == "press":
            routing.layout.begin_drag(x, y)
        elif action == "drag":
            routing.layout.drag_to(x, y)
        elif action == "release":
            routing.layout.end_drag()
        else:
            return jsonify({"error": f"Unknown action '{action}'"}), 400
        return jsonify(routing.snapshot())


@app.route("/api/reset", methods=["POST"])
def api_reset():
    with routing.lock:
        routing.reset()
        return jsonify(routing.snapshot())


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    logger.info(f"Starting BFS visualizer on http://{FLASK_HOST}:{FLASK_PORT}")
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=False)
