# app.py — Flask API over the heightmap solver
# deps: pip install flask numpy

from __future__ import annotations
from typing import List, Optional
import logging
from flask import Flask, request, jsonify

from hillclimb.config import DEFAULT_HOST, DEFAULT_PORT
from hillclimb.errors import FormatError
from hillclimb.graph import build_adjacency
from hillclimb.grid import load_heightmap
from hillclimb.query import lowest_nodes, min_distance_from_any
from hillclimb.search import search

logger = logging.getLogger(__name__)


def _rows_from_body(data) -> Optional[List[str]]:
    rows = data.get("rows")
    if rows is None and isinstance(data.get("text"), str):
        rows = [r for r in data["text"].splitlines() if r]
    if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
        return None
    return rows


def create_app() -> Flask:
    app = Flask(__name__)

    # ======= CORS =======
    @app.after_request
    def _cors(resp):
        resp.headers["Access-Control-Allow-Origin"]  = "*"
        resp.headers["Access-Control-Allow-Headers"] = "*"
        resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
        return resp

    @app.route("/", methods=["GET"])
    def root():
        return {"ok": True, "solve": "/heightmap/solve (POST JSON)"}

    # ======= solver API =======
    @app.route("/heightmap/solve", methods=["POST"])
    def heightmap_solve():
        """
        JSON body:
        {
          "rows": ["Sabqponm", ...]   // or
          "text": "Sabqponm\\nabcryxxl\\n..."
        }
        """
        data = request.get_json(force=True, silent=True) or {}
        rows = _rows_from_body(data)
        if rows is None:
            return jsonify({"error": "rows (list of strings) or text required"}), 400

        try:
            hmap, start, end = load_heightmap(rows)
        except FormatError as e:
            logger.info("Rejected heightmap: %s", e)
            return jsonify({"error": str(e), "token": e.token}), 400

        adj = build_adjacency(hmap)
        lows = lowest_nodes(hmap)

        res = search(adj, start.node, end.node)
        if not res.found:
            diag = {
                "shape": list(hmap.shape),
                "start": list(start.rc),
                "end": list(end.rc),
                "settled": res.expansions,
                "edges": sum(len(e) for e in adj),
            }
            return jsonify({"error": f"No path from {start.rc} to {end.rc}.",
                            "diag": diag}), 200

        # start is itself a lowest cell, so some candidate reaches the end
        p2 = min_distance_from_any(adj, lows, end.node)

        return jsonify({
            "from_start":   res.cost,
            "from_lowest":  p2,
            "shape":        list(hmap.shape),
            "lowest_count": len(lows),
        })

    return app


if __name__ == "__main__":
    create_app().run(host=DEFAULT_HOST, port=DEFAULT_PORT, threaded=True)
