from flask import Blueprint, current_app, request, jsonify, g
from loguru import logger

from models.schemas import UploadInput

upload_bp = Blueprint("upload", __name__)

FILE_FIELD = "file"


def upload_input_from_request() -> UploadInput:
    """
    Multipart uploads name the file through the part's filename,
    JSON uploads through an "originalname" field.
    """
    part = request.files.get(FILE_FIELD)
    if part is not None:
        return UploadInput(originalname=part.filename or None)

    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        return UploadInput()

    name = payload.get("originalname")
    # only string names are echoed; anything else counts as undeclared
    return UploadInput(originalname=name if isinstance(name, str) else None)


@upload_bp.route("/upload", methods=["POST"])
def upload_file():
    service = current_app.extensions["upload_service"]
    file = upload_input_from_request()

    try:
        result = service.upload(file)
    except Exception as e:
        logger.exception("Upload failed for {} [{}]", file.originalname, getattr(g, "request_id", "unknown"))
        return jsonify({"message": "File upload failed", "error": str(e)}), 500

    logger.debug("Upload acknowledged: {}", result.filename)
    return jsonify({"message": "File uploaded successfully", "data": result.model_dump()}), 200
