import datetime
import logging

from flask import Flask, jsonify, request

from gitviz import __version__
from gitviz.client import GitvizClient
from gitviz.errors import GitvizError, InternalError, ValidationError
from gitviz.logs import Clock, configure_logging
from gitviz.settings import GitvizSettings

from .params import build_request_config
from .responses import error_response, svg_response

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to render commit history"


def create_app(
    settings: GitvizSettings | None = None,
    client: GitvizClient | None = None,
    clock: Clock | None = None,
) -> Flask:
    client = client or GitvizClient(settings=settings)
    settings = client.settings
    configure_logging(settings, clock=clock)

    app = Flask(__name__)
    logger.info("Started gitviz v%s", __version__)

    @app.get("/")
    def visualize():
        repository_url = request.args.get("repo")
        try:
            config = build_request_config(request.args, request.headers)
            svg = client.visualize(config)
        except ValidationError as exc:
            logger.error("Validation errors: %s", exc.errors)
            return error_response(exc)
        except GitvizError as exc:
            logger.error("Error: %s", exc.message, exc_info=exc.__cause__ is not None)
            return error_response(exc)
        except Exception:
            logger.exception("Error: unexpected failure for %s", repository_url)
            return error_response(InternalError(GENERIC_FAILURE_MESSAGE))
        return svg_response(svg, settings.cache_max_age_sec)

    @app.get("/healthz")
    def healthz():
        return jsonify(
            {
                "status": "ok",
                "version": __version__,
                "time": datetime.datetime.now(datetime.UTC).isoformat(),
            }
        )

    return app
