"""
Flask Web Application
----------------------
Routes:
  GET  /                               → dashboard / generator / library UI
  GET  /api/standards                  → compliance standard vocabulary
  POST /api/generate                   → requirement + standards → pending batch
  GET  /api/batches/<id>               → a pending batch awaiting review
  POST /api/batches/<id>/accept        → save a pending batch to the library
  POST /api/batches/<id>/discard       → drop a pending batch
  GET  /api/test-cases                 → library, newest first
  GET  /api/test-cases/<id>            → one test case
  GET  /api/dashboard                  → status / priority / compliance counts
  POST /api/export                     → push the library to Jira
"""

import logging
from typing import Optional

from flask import Flask, jsonify, render_template, request

import config
from agents.dashboard_agent import DashboardAgent
from agents.errors import (
    ConfigurationError,
    DuplicateTestCaseError,
    ExportError,
    GenerationError,
    GenerationInProgressError,
    InvalidRequirementError,
    UnknownBatchError,
)
from agents.jira_exporter import JiraExporter
from models.test_case_model import ComplianceStandard
from orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def _error(exc: Exception, status: int):
    message = exc.args[0] if exc.args else str(exc)
    return jsonify({"error": str(message), "kind": type(exc).__name__}), status


def _generation_status(exc: GenerationError) -> int:
    if isinstance(exc, InvalidRequirementError):
        return 400
    if isinstance(exc, GenerationInProgressError):
        return 409
    if isinstance(exc, ConfigurationError):
        return 500
    # transport, empty response, schema violation
    return 502


def create_app(
    orchestrator: Optional[Orchestrator] = None,
    exporter: Optional[JiraExporter] = None,
) -> Flask:
    app = Flask(__name__, template_folder="ui/templates")
    orchestrator = orchestrator or Orchestrator()
    exporter = exporter or JiraExporter()
    dashboard = DashboardAgent()

    @app.route("/")
    def index():
        return render_template(
            "index.html",
            standards=[s.value for s in ComplianceStandard],
            default_standard=ComplianceStandard.HIPAA.value,
        )

    @app.route("/api/standards")
    def standards():
        return jsonify([s.value for s in ComplianceStandard])

    @app.route("/api/generate", methods=["POST"])
    def generate():
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({"error": "Request body must be a JSON object.", "kind": "InvalidRequirementError"}), 400
        requirement = data.get("requirement", "")
        selected = data.get("standards", [])
        if not isinstance(requirement, str) or not requirement.strip():
            return jsonify({"error": "No requirement provided.", "kind": "InvalidRequirementError"}), 400
        if not isinstance(selected, list):
            return jsonify({"error": "standards must be a list.", "kind": "InvalidRequirementError"}), 400
        try:
            batch = orchestrator.generate(requirement, selected, traceability_id=data.get("traceabilityId"))
        except GenerationError as exc:
            logger.warning("Generation failed: %s: %s", type(exc).__name__, exc)
            return _error(exc, _generation_status(exc))
        return jsonify(batch.to_dict())

    @app.route("/api/batches/<batch_id>")
    def batch(batch_id):
        try:
            return jsonify(orchestrator.pending(batch_id).to_dict())
        except UnknownBatchError as exc:
            return _error(exc, 404)

    @app.route("/api/batches/<batch_id>/accept", methods=["POST"])
    def accept(batch_id):
        try:
            cases = orchestrator.accept(batch_id)
        except UnknownBatchError as exc:
            return _error(exc, 404)
        except DuplicateTestCaseError as exc:
            return _error(exc, 409)
        return jsonify({"accepted": [tc.to_dict() for tc in cases], "total": len(orchestrator.library)})

    @app.route("/api/batches/<batch_id>/discard", methods=["POST"])
    def discard(batch_id):
        orchestrator.discard(batch_id)
        return "", 204

    @app.route("/api/test-cases")
    def test_cases():
        return jsonify([tc.to_dict() for tc in orchestrator.library.all()])

    @app.route("/api/test-cases/<case_id>")
    def test_case(case_id):
        tc = orchestrator.library.get(case_id)
        if tc is None:
            return jsonify({"error": f"No test case {case_id}."}), 404
        return jsonify(tc.to_dict())

    @app.route("/api/dashboard")
    def dashboard_stats():
        stats = dashboard.summarize(orchestrator.library.all())
        return jsonify({**stats.to_dict(), "generating": orchestrator.busy})

    @app.route("/api/export", methods=["POST"])
    def export():
        try:
            result = exporter.export(orchestrator.library.all())
        except ExportError as exc:
            return _error(exc, 502)
        return jsonify(result.to_dict())

    return app


if __name__ == "__main__":
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    create_app().run(host="0.0.0.0", port=config.PORT, debug=False)
