# api/main.py
"""
Flask entrypoint for the REPL snippet API.
"""

from flask import Flask, request, jsonify
import logging
from api.controller import generate_bootstrap, generate_eval
from api.validation import validate_bootstrap_request

app = Flask(__name__)

# Basic logging config
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@app.route("/health", methods=["GET"])
def health():
    return jsonify({"ok": True})


@app.route("/bootstrap", methods=["GET"])
def bootstrap():
    ok, err = validate_bootstrap_request(request.args)
    if not ok:
        return jsonify({"error": err}), 400

    res = generate_bootstrap(request.args.get("lang"))
    if res.get("error"):
        logger.warning("Bootstrap error: %s", res["error"])
        return jsonify({"error": res["error"]}), 400

    return jsonify(res["result"]), 200


@app.route("/eval", methods=["POST"])
def eval_code():
    # Ensure valid JSON payload
    data = request.get_json(force=True, silent=True)
    if data is None:
        return jsonify({"error": "Invalid JSON payload."}), 400

    res = generate_eval(data)

    if res.get("error"):
        logger.warning("Eval snippet error: %s", res["error"])
        return jsonify({"error": res["error"]}), 400

    return jsonify(res["result"]), 200


if __name__ == "__main__":
    # For local development:
    # Run with: python -m api.main  (run from the repo root)
    app.run(host="0.0.0.0", port=8081)
