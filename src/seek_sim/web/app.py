"""Flask application factory for the seek-sim web front end.

The ``create_app`` function returns a Flask app with three endpoints:

- ``GET /`` — render a page showing the report for the textbook example.
- ``POST /api/simulate`` — simulate posted requests and return JSON.
- ``GET /api/random`` — simulate ``count`` random requests.

Posted request lists are checked value by value with the same rules as
files and stdin: out-of-range or non-integer values are skipped and
reported back as warnings rather than failing the whole request.
"""

from __future__ import annotations

import random
from typing import Any

from flask import Flask, Response, jsonify, render_template_string, request

from seek_sim.env import Environment, parse_head, resolve_head
from seek_sim.logging import Logger, LogLevel
from seek_sim.report import format_report, format_summary
from seek_sim.requests import RequestSourceError, collect_requests, generate_requests
from seek_sim.simulator import PolicyResult, Simulation

_HTTP_BAD_REQUEST = 400

# Classic textbook workload shown on the landing page.
_EXAMPLE_REQUESTS = (98, 183, 37, 122, 14, 124, 65, 67)
_EXAMPLE_HEAD = 53

_MAX_RANDOM_COUNT = 10_000

_INDEX_TEMPLATE = """<!doctype html>
<html>
<head><title>seek-sim</title></head>
<body>
<h1>seek-sim</h1>
<p>Head starts at {{ head }}; requests {{ requests }}.</p>
<pre>{{ summary }}</pre>
<pre>{{ report }}</pre>
</body>
</html>
"""


def _result_json(result: PolicyResult) -> dict[str, Any]:
    stats = result.statistics
    return {
        "name": result.name,
        "title": result.title,
        "order": list(result.order),
        "distance": stats.distance,
        "mean": stats.mean,
        "stddev": stats.stddev,
        "count": stats.count,
        "longest_seek": stats.longest_seek,
    }


def _simulation_json(simulation: Simulation, logger: Logger) -> dict[str, Any]:
    results = simulation.run()
    return {
        "head": simulation.head,
        "requests": list(simulation.requests),
        "results": [_result_json(r) for r in results],
        "warnings": [str(e) for e in logger.filter(min_level=LogLevel.WARNING)],
    }


def create_app(env: Environment | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        env: Configuration source for the default head position
            (defaults to the process environment).

    Returns:
        A configured Flask application ready to serve.

    """
    env = env if env is not None else Environment.from_os()
    default_head = resolve_head(env)

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the example report page."""
        results = Simulation(_EXAMPLE_REQUESTS, head=_EXAMPLE_HEAD).run()
        return render_template_string(
            _INDEX_TEMPLATE,
            head=_EXAMPLE_HEAD,
            requests=", ".join(str(r) for r in _EXAMPLE_REQUESTS),
            summary=format_summary(results),
            report=format_report(results),
        )

    @app.route("/api/simulate", methods=["POST"])
    def simulate() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Simulate the posted requests.

        Expects JSON body: ``{"requests": [...], "head": n}`` where
        ``head`` is optional.

        Returns:
            JSON with ``head``, ``requests``, ``results`` and ``warnings``.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "requests" not in data:
            return jsonify({"error": "Missing 'requests' field"}), _HTTP_BAD_REQUEST
        raw = data["requests"]
        if not isinstance(raw, list):
            return jsonify({"error": "'requests' must be a list"}), _HTTP_BAD_REQUEST

        head = default_head
        if data.get("head") is not None:
            try:
                head = parse_head(str(data["head"]))
            except ValueError as e:
                return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST

        logger = Logger()
        tracks = collect_requests(raw, logger=logger)
        simulation = Simulation(tracks, head=head, logger=logger)
        return jsonify(_simulation_json(simulation, logger))

    @app.route("/api/random")
    def random_requests() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Simulate ``count`` random requests, optionally seeded.

        Returns:
            The same JSON shape as ``/api/simulate``.

        """
        count = request.args.get("count", type=int)
        seed = request.args.get("seed", type=int)
        if count is None or count > _MAX_RANDOM_COUNT:
            msg = f"'count' must be an integer up to {_MAX_RANDOM_COUNT}"
            return jsonify({"error": msg}), _HTTP_BAD_REQUEST
        try:
            tracks = generate_requests(count, rng=random.Random(seed))  # noqa: S311
        except RequestSourceError as e:
            return jsonify({"error": str(e)}), _HTTP_BAD_REQUEST
        logger = Logger()
        simulation = Simulation(tracks, head=default_head, logger=logger)
        return jsonify(_simulation_json(simulation, logger))

    return app


def main() -> None:
    """Run the web development server.

    This is the ``seek-sim-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=8080)

