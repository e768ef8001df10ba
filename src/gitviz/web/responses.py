from flask import Response, jsonify

from gitviz.errors import GitvizError, ValidationError

SVG_MIMETYPE = "image/svg+xml"


def error_status(error: GitvizError) -> int:
    if isinstance(error, ValidationError):
        return 400
    return 500


def error_response(error: GitvizError) -> Response:
    response = jsonify({"success": False, "errors": error.errors})
    response.status_code = error_status(error)
    return response


def svg_response(svg: str, max_age_sec: int) -> Response:
    response = Response(svg, content_type=SVG_MIMETYPE)
    response.headers["Cache-Control"] = f"public, max-age={max_age_sec}"
    return response
