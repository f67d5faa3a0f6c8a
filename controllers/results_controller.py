import logging
from datetime import datetime

from flask import Blueprint, jsonify, send_file

from models.result import Result
from utils.errors import ValidationError, server_error
from utils.reports import BUILDERS, MIMETYPES, build_pdf

logger = logging.getLogger(__name__)

results_bp = Blueprint("results", __name__)


# All attendance results
@results_bp.route("/getResults", methods=["GET"])
def get_results():
    try:
        results = [Result.to_json(doc) for doc in Result.find_all()]
        return jsonify({"success": True, "results": results})
    except Exception:
        logger.exception("Failed to fetch results")
        return server_error()


# ---------------- Export CSV / Excel / PDF ----------------
@results_bp.route("/getResults/export/<fmt>", methods=["GET"])
def export_results(fmt):
    fmt = fmt.lower()
    if fmt not in MIMETYPES:
        return ValidationError(f"Unsupported export format: {fmt}").to_response()

    try:
        records = Result.find_all()
        stamp = datetime.utcnow().strftime("%Y-%m-%d")
        if fmt == "pdf":
            output = build_pdf(records, generated_on=stamp)
        else:
            output = BUILDERS[fmt](records)
        return send_file(output, mimetype=MIMETYPES[fmt], as_attachment=True,
                         download_name=f"attendance-results-{stamp}.{fmt}")
    except Exception:
        logger.exception("Failed to export results as %s", fmt)
        return server_error()
