"""
main.py — Card Sorting Visualizer Flask App
============================================
JSON API in front of the sorting engine.  The browser renderer (cards,
slide animations, confetti, beeps) lives elsewhere and only talks to
these routes.

Routes:
  GET  /api/algorithms          – registry cards (label, pseudocode, complexity)
  GET  /api/state               – config, dataset, last run
  POST /api/dataset/generate    – new random cards       {size?, seed?}
  POST /api/dataset/import      – explicit values        {values: [...]}
  POST /api/dataset/reset       – discard the cards
  POST /api/config/algo         – {algo_key}
  POST /api/config/speed        – {speed: slow|medium|fast}
  POST /api/config/size         – {size}
  POST /api/run                 – sort with the selected algorithm
  POST /api/step/next           – advance one recorded step
  POST /api/step/prev           – rewind one recorded step
  POST /api/step/goto           – jump to step N        {index}
  POST /api/compare             – comparison mode       {left, right}

State management:
  Each browser session gets its own SortEngine, kept in process memory
  and keyed by a random id stored in the Flask session cookie.  At most
  MAX_ENGINES engines are kept; the least recently used idle ones are
  dropped first.  Nothing is persisted; restarting the server forgets
  every session.

Step review:
  /api/step/* move the cursor of the last run's Stepper over its buffered
  trace.  The cursor starts before the first step after every run.
"""

import asyncio
import logging
import secrets
import threading
from collections import OrderedDict
from typing import Any, Dict, List

from flask import Flask, jsonify, request, session

from algorithms import get_algorithm, list_algorithms
from engine import Recorder, SortEngine, Stepper, compare, load_config
from errors import AlreadyRunning, SortEngineError
from logging_setup import init_logging

logger = logging.getLogger(__name__)


app = Flask(__name__)
app.secret_key = secrets.token_hex(32)

MAX_ENGINES = 256

_ENGINES: "OrderedDict[str, SortEngine]" = OrderedDict()
_ENGINES_LOCK = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_engine() -> SortEngine:
    """Return this session's engine, creating one on first use."""
    sid = session.get("sid")
    if sid is None:
        sid = secrets.token_hex(16)
        session["sid"] = sid
    with _ENGINES_LOCK:
        engine = _ENGINES.get(sid)
        if engine is None:
            engine = SortEngine(load_config())
            _ENGINES[sid] = engine
            logger.debug("Created engine for session %s", sid)
            _evict_idle_engines()
        else:
            _ENGINES.move_to_end(sid)
    return engine


def _evict_idle_engines() -> None:
    """Drop least recently used idle engines past MAX_ENGINES.  Call under _ENGINES_LOCK."""
    for sid in list(_ENGINES):
        if len(_ENGINES) <= MAX_ENGINES:
            break
        if not _ENGINES[sid].is_running:
            del _ENGINES[sid]
            logger.debug("Evicted engine for session %s", sid)


def get_state(engine: SortEngine) -> Dict[str, Any]:
    state = engine.snapshot()
    stepper = engine.last_run.stepper if engine.last_run else None
    state["current_step"] = stepper.current_idx if stepper else -1
    state["total_steps"]  = stepper.total_steps_fetched if stepper else 0
    return state


def _payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _frame_values(engine: SortEngine, frame: List[str]) -> List[int]:
    by_id = {it.id: it.value for it in engine.sequence} if engine.sequence else {}
    return [by_id[item_id] for item_id in frame if item_id in by_id]


def _step_response(engine: SortEngine, stepper: Stepper):
    frame = stepper.current_frame
    return jsonify({
        "step":         stepper.current_step.to_dict(),
        "frame":        frame,
        "values":       _frame_values(engine, frame),
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps_fetched,
    })


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------
@app.errorhandler(AlreadyRunning)
def handle_already_running(exc: AlreadyRunning):
    return jsonify({"error": str(exc)}), 409


@app.errorhandler(SortEngineError)
def handle_engine_error(exc: SortEngineError):
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# API: Registry & State
# ---------------------------------------------------------------------------
@app.route("/api/algorithms", methods=["GET"])
def api_algorithms():
    return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})


@app.route("/api/state", methods=["GET"])
def api_state():
    return jsonify(get_state(get_engine()))


# ---------------------------------------------------------------------------
# API: Dataset
# ---------------------------------------------------------------------------
@app.route("/api/dataset/generate", methods=["POST"])
def api_dataset_generate():
    engine = get_engine()
    data = _payload()
    seq = engine.generate(size=data.get("size"), seed=data.get("seed"))
    return jsonify({"sequence": seq.to_dict(), "values": seq.values()})


@app.route("/api/dataset/import", methods=["POST"])
def api_dataset_import():
    engine = get_engine()
    seq = engine.initialize(_payload().get("values"))
    return jsonify({"sequence": seq.to_dict(), "values": seq.values()})


@app.route("/api/dataset/reset", methods=["POST"])
def api_dataset_reset():
    engine = get_engine()
    engine.reset()
    return jsonify(get_state(engine))


# ---------------------------------------------------------------------------
# API: Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    engine = get_engine()
    engine.set_algorithm(_payload().get("algo_key", "bubble"))
    info = get_algorithm(engine.config.algorithm)
    return jsonify({"algorithm": info.to_dict()})


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    engine = get_engine()
    engine.set_speed(_payload().get("speed", "medium"))
    return jsonify({"speed": engine.config.speed, "swap_delay": engine.config.swap_delay})


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    engine = get_engine()
    engine.set_size(_payload().get("size"))
    return jsonify({"size": engine.config.size})


# ---------------------------------------------------------------------------
# API: Run Algorithm
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    engine = get_engine()
    algo_key = _payload().get("algo_key")

    outcome = asyncio.run(engine.run(algo_key))
    run = engine.last_run
    run.stepper.rewind()

    return jsonify({
        "outcome":     outcome.to_dict(),
        "run":         run.to_dict(),
        "steps":       [s.to_dict() for s in run.trace],
        "values":      engine.sequence.values(),
        "total_steps": len(run.trace),
    })


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
def _review_stepper(engine: SortEngine):
    run = engine.last_run
    return run.stepper if run is not None else None


@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    engine = get_engine()
    stepper = _review_stepper(engine)
    if stepper is None:
        return jsonify({"error": "Run an algorithm first"}), 400
    if not stepper.next_step():
        return jsonify({"error": "Already at last step"}), 400
    return _step_response(engine, stepper)


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    engine = get_engine()
    stepper = _review_stepper(engine)
    if stepper is None:
        return jsonify({"error": "Run an algorithm first"}), 400
    if not stepper.prev_step():
        return jsonify({"error": "Already at first step"}), 400
    return _step_response(engine, stepper)


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    engine = get_engine()
    stepper = _review_stepper(engine)
    if stepper is None:
        return jsonify({"error": "Run an algorithm first"}), 400
    idx = _payload().get("index", 0)
    if isinstance(idx, bool) or not isinstance(idx, int) or not stepper.goto_step(idx):
        return jsonify({"error": "Invalid step index"}), 400
    return _step_response(engine, stepper)


# ---------------------------------------------------------------------------
# API: Comparison Mode
# ---------------------------------------------------------------------------
@app.route("/api/compare", methods=["POST"])
def api_compare():
    engine = get_engine()
    data = _payload()
    if engine.sequence is None:
        return jsonify({"error": "Generate cards first"}), 400
    # compare on the board as it stood before the last run sorted it
    run = engine.last_run
    values = _frame_values(engine, run.initial_frame) if run else engine.sequence.values()

    recorders = []
    for key in (data.get("left", "bubble"), data.get("right", "merge")):
        rec = Recorder()
        rec.start(key, values)
        rec.run_to_completion()
        recorders.append(rec)
    result = compare(recorders[0], recorders[1]).to_dict()
    # full traces so the client can replay both boards side by side
    result["replays"] = [rec.export() for rec in recorders]
    return jsonify(result)


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    init_logging()
    logger.info("Card Sorting Visualizer: starting Flask server on http://localhost:5000")
    app.run(debug=False)
