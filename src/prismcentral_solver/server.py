"""Flask application serving solvers over the challenge webhook API."""

from http import HTTPStatus
from typing import Any

from flask import Flask, jsonify, request
from pydantic import ValidationError

from prismcentral_solver._logging import get_logger, reset_challenge, set_challenge
from prismcentral_solver.config import Settings
from prismcentral_solver.exceptions import SolverError
from prismcentral_solver.models import (
    ChallengeAction,
    ChallengePayload,
    ChallengeRequest,
    ChallengeResponse,
    Status,
)
from prismcentral_solver.solvers.base import Solver

logger = get_logger(__name__)

API_VERSION = "v1alpha1"


def _failure(uid: str, message: str, reason: str = "") -> ChallengeResponse:
    return ChallengeResponse(
        uid=uid,
        success=False,
        status=Status(message=message, reason=reason),
    )


def _reply(response: ChallengeResponse, code: HTTPStatus = HTTPStatus.OK) -> tuple[Any, int]:
    payload = ChallengePayload(response=response)
    return jsonify(payload.model_dump(mode="json", by_alias=True, exclude_none=True)), code


def _solve(solver: Solver, challenge: ChallengeRequest) -> ChallengeResponse:
    """Run a challenge action and fold any solver error into the response."""
    token = set_challenge(challenge.uid)
    try:
        if challenge.action == ChallengeAction.PRESENT:
            solver.present(challenge)
        elif challenge.action == ChallengeAction.CLEAN_UP:
            solver.cleanup(challenge)
        else:
            return _failure(
                challenge.uid, f"Unsupported action: {challenge.action!r}", "BadRequest"
            )
    except SolverError as e:
        logger.error(
            "Challenge action failed",
            extra={"action": challenge.action, "challenge_uid": challenge.uid, "error": str(e)},
        )
        return _failure(challenge.uid, str(e), type(e).__name__)
    finally:
        reset_challenge(token)

    return ChallengeResponse(uid=challenge.uid, success=True)


def create_app(solver: Solver, settings: Settings) -> Flask:
    """Create the Flask application for a solver.

    Args:
        solver: An initialized solver.
        settings: Process settings; ``group_name`` scopes the API path.

    Returns:
        The configured Flask application.
    """
    app = Flask(__name__)
    group = settings.group_name

    @app.get("/healthz")
    def healthz() -> tuple[Any, int]:
        return jsonify({"status": "ok"}), HTTPStatus.OK

    @app.get(f"/apis/{group}/{API_VERSION}")
    def discovery() -> tuple[Any, int]:
        """Return the API resource list naming the solver resource."""
        return (
            jsonify(
                {
                    "kind": "APIResourceList",
                    "apiVersion": "v1",
                    "groupVersion": f"{group}/{API_VERSION}",
                    "resources": [
                        {
                            "name": solver.name,
                            "singularName": solver.name,
                            "namespaced": False,
                            "kind": "ChallengePayload",
                            "verbs": ["create"],
                        }
                    ],
                }
            ),
            HTTPStatus.OK,
        )

    @app.post(f"/apis/{group}/{API_VERSION}/<resource>")
    def challenge(resource: str) -> tuple[Any, int]:
        """Handle a ChallengePayload for the named solver."""
        if resource != solver.name:
            return _reply(
                _failure("", f"Unknown solver: {resource}", "NotFound"), HTTPStatus.NOT_FOUND
            )

        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return _reply(
                _failure("", "Request body must be a JSON object", "BadRequest"),
                HTTPStatus.BAD_REQUEST,
            )

        try:
            payload = ChallengePayload.model_validate(body)
        except ValidationError as e:
            return _reply(
                _failure("", f"Invalid ChallengePayload: {e}", "BadRequest"),
                HTTPStatus.BAD_REQUEST,
            )

        if payload.request is None:
            return _reply(
                _failure("", "ChallengePayload has no request", "BadRequest"),
                HTTPStatus.BAD_REQUEST,
            )

        logger.info(
            "Received challenge request",
            extra={
                "action": payload.request.action,
                "challenge_uid": payload.request.uid,
                "fqdn": payload.request.resolved_fqdn,
                "api_version": payload.api_version,
            },
        )
        return _reply(_solve(solver, payload.request))

    return app
