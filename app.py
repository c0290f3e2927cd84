from flask import Flask, request, jsonify, session
import logging
import uuid
from concurrent.futures import ThreadPoolExecutor

from advisors.engine import AdvisoryService
from config.settings import ADVISORY_WORKERS, FLASK_SECRET_KEY, LOG_LEVEL
from session.context import SessionContext
from session.controller import AdvisoryMergeController, AnalysisInProgress
from subjects.curriculum import core_subjects, electives
from subjects.domain_subject import Domain


# -------------------------------------------------
# Setup
# -------------------------------------------------

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = FLASK_SECRET_KEY

ADVISORY_SERVICE = AdvisoryService()
ADVISORY_EXECUTOR = ThreadPoolExecutor(max_workers=ADVISORY_WORKERS, thread_name_prefix="advisory")

SESSION_CONTEXTS = {}
SESSION_CONTROLLERS = {}


# -------------------------------------------------
# Helpers: session state
# -------------------------------------------------

def _session_id():
    if "session_id" not in session:
        session["session_id"] = str(uuid.uuid4())
    return session["session_id"]


def get_session_context():
    sid = _session_id()
    if sid not in SESSION_CONTEXTS:
        SESSION_CONTEXTS[sid] = SessionContext()
    return SESSION_CONTEXTS[sid]


def get_controller():
    sid = _session_id()
    if sid not in SESSION_CONTROLLERS:
        SESSION_CONTROLLERS[sid] = AdvisoryMergeController(ADVISORY_SERVICE, executor=ADVISORY_EXECUTOR)
    return SESSION_CONTROLLERS[sid]


def parse_domain(value):
    try:
        return Domain(str(value).upper())
    except ValueError:
        return None


# -------------------------------------------------
# Routes
# -------------------------------------------------

@app.route("/api/domain", methods=["GET"])
def get_active_domain():
    ctx = get_session_context()
    return jsonify({"domain": ctx.active_domain.value})


@app.route("/api/domain", methods=["POST"])
def set_active_domain():
    domain = parse_domain((request.json or {}).get("domain"))
    if domain is None:
        return jsonify({"error": "Invalid domain"}), 400

    ctx = get_session_context()
    controller = get_controller()

    if ctx.active_domain is not domain:
        try:
            controller.reset(domain)
        except AnalysisInProgress:
            return jsonify({"error": "Analysis in progress"}), 409
        ctx.switch_domain(domain)

    return jsonify({"status": "ok", "domain": domain.value})


@app.route("/api/profile", methods=["GET"])
def get_profile_form():
    ctx = get_session_context()
    return jsonify({
        "domain": ctx.active_domain.value,
        "form": ctx.forms[ctx.active_domain],
    })


@app.route("/api/profile", methods=["POST"])
def update_profile_form():
    fields = request.json or {}
    if not isinstance(fields, dict):
        return jsonify({"error": "Expected an object of form fields"}), 400

    ctx = get_session_context()
    ctx.update_form(fields)
    return jsonify({
        "status": "ok",
        "domain": ctx.active_domain.value,
        "form": ctx.forms[ctx.active_domain],
    })


@app.route("/api/curriculum", methods=["GET"])
def get_curriculum():
    level = (request.args.get("level") or "SECONDARY").upper()
    stream = (request.args.get("stream") or "SCIENTIFIC").upper()
    return jsonify({
        "level": level,
        "stream": stream if level == "SECONDARY" else None,
        "core": core_subjects(level, stream),
        "electives": electives(level, stream),
    })


@app.route("/api/analysis", methods=["POST"])
def run_analysis():
    ctx = get_session_context()
    controller = get_controller()

    profile = ctx.active_profile()
    try:
        controller.request_analysis(profile)
    except AnalysisInProgress:
        return jsonify({"error": "Analysis in progress"}), 409

    return jsonify(controller.snapshot.to_dict()), 202


@app.route("/api/projection", methods=["GET"])
def get_projection():
    controller = get_controller()
    return jsonify(controller.snapshot.to_dict())


if __name__ == "__main__":
    app.run(debug=True)
