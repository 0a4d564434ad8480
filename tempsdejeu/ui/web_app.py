"""
Web application module for the Temps De Jeu statistics engine.

This module contains the Flask server exposing the statistics as read-only
JSON endpoints. The server keeps no match state: each request carries the
match records it wants computed.
"""
import logging
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from ..models import MatchRecord, StoppageType
from ..services import ServiceFactory
from ..utils import DEFAULT_WEB_HOST, DEFAULT_WEB_PORT, fmt_match_minute, fmt_mmss, fmt_short

logger = logging.getLogger(__name__)


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValueError("Request body must be a JSON object")
    return data


def _flag(data: Dict[str, Any], name: str) -> bool:
    """Optional JSON boolean option; strings such as 'false' are rejected."""
    value = data.get(name, False)
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' must be a boolean")
    return value


def create_app(service_factory: Optional[ServiceFactory] = None) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        service_factory: Factory used to build the statistics services

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    factory = service_factory or ServiceFactory()

    # ==================== API Endpoints ==================== #

    def _build_summary_data(report) -> dict:
        """Formatted scalar summaries for display collaborators."""
        return {
            "total_duration": fmt_mmss(report.total_duration),
            "total_effective_time": fmt_mmss(report.total_effective_time),
            "total_stoppage_time": fmt_mmss(report.total_stoppage_time),
            "effective_percentage": int(report.effective_percentage),
            "periods": [
                {
                    "period": row.short_name,
                    "clock": fmt_match_minute(row.observed_seconds, row.regulation_seconds),
                    "stoppage": fmt_short(row.stoppage_seconds),
                    "added_time": f"+{row.suggested_added_minutes}'",
                }
                for row in report.periods
            ],
        }

    @app.route("/api/stoppage-types", methods=["GET"])
    def get_stoppage_types():
        """List the stoppage type catalogue."""
        return jsonify({
            "success": True,
            "stoppage_types": [t.to_dict() for t in StoppageType],
        })

    @app.route("/api/matches/report", methods=["POST"])
    def match_report():
        """Compute the statistics of one match."""
        try:
            data = _payload()
            record = MatchRecord.from_json(data["match"])
            live_elapsed = data.get("live_elapsed")
            if live_elapsed is not None:
                live_elapsed = float(live_elapsed)
            played_only = _flag(data, "played_only")
            infer_starters = _flag(data, "infer_starters")
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.debug("Rejected match report request: %s", e)
            return jsonify({"success": False, "error": str(e)}), 400

        try:
            analytics = factory.create_match_analytics(
                record, live_elapsed=live_elapsed, infer_starters=infer_starters
            )
            report = analytics.generate_match_report(played_only=played_only)
            return jsonify({
                "success": True,
                "report": asdict(report),
                "summary": _build_summary_data(report),
            })
        except Exception as e:
            logger.exception("Match report failed for %s", record.id)
            return jsonify({"success": False, "error": str(e)}), 500

    @app.route("/api/season/report", methods=["POST"])
    def season_report():
        """Compute season statistics over the finished matches supplied."""
        try:
            data = _payload()
            raw_matches = data.get("matches") or []
            if not isinstance(raw_matches, list):
                raise ValueError("'matches' must be a list")
            records: List[MatchRecord] = [MatchRecord.from_json(m) for m in raw_matches]
            infer_starters = _flag(data, "infer_starters")
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.debug("Rejected season report request: %s", e)
            return jsonify({"success": False, "error": str(e)}), 400

        try:
            report = factory.create_season_analytics(
                records, infer_starters=infer_starters
            ).generate_season_report()
            return jsonify({"success": True, "report": asdict(report)})
        except Exception as e:
            logger.exception("Season report failed")
            return jsonify({"success": False, "error": str(e)}), 500

    return app


def run_web_app(host: str = DEFAULT_WEB_HOST, port: int = DEFAULT_WEB_PORT) -> None:
    """
    Run the web application.

    Args:
        host: Host address to bind to (default: localhost only)
        port: Port number to listen on
    """
    app = create_app()
    logger.info("Serving statistics API on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_web_app()
