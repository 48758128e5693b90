from argparse import ArgumentParser

from flask import Flask, request, jsonify, Response
from flask_cors import CORS
from pydantic import ValidationError

from alignmate.core.align_code import align_code
from alignmate.utils.constants import DEFAULT_PORT
from alignmate.utils.settings import get_settings

import logging

log = logging.getLogger(__name__)


app = Flask(__name__)
CORS(app, resources={r"/*": {"origins": "*"}})


@app.route("/align", methods=["POST"])
def align():
    data = request.get_json(silent=True) or {}
    code = data.get("code", "")
    if not isinstance(code, str):
        return jsonify({"error": "`code` must be a string"}), 400
    try:
        settings = get_settings(data)
    except ValidationError as e:
        log.error("Invalid alignment settings: %s", e)
        return jsonify({"error": str(e)}), 400

    return Response(align_code(code, settings=settings), mimetype="text/plain")


if __name__ == "__main__":
    parser = ArgumentParser()
    parser.add_argument("--port", default=DEFAULT_PORT, type=str, required=False)
    args = parser.parse_args()
    app.run(host="0.0.0.0", port=args.port)
