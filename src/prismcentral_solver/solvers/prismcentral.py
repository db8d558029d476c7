"""Prism Central solver for ACME DNS-01 challenges."""

from pydantic_core import PydanticSerializationError

from prismcentral_solver._logging import get_challenge_extra, get_logger
from prismcentral_solver.config import Settings, load_config
from prismcentral_solver.dispatcher import RequestDispatcher
from prismcentral_solver.exceptions import RequestBuildError
from prismcentral_solver.models import ChallengeRequest, TriggerPayload
from prismcentral_solver.solvers.base import Solver

logger = get_logger(__name__)


class PrismCentralSolver(Solver):
    """Solver that hands challenge records to a Prism Central playbook.

    Each call fires an incoming webhook trigger carrying the challenge
    key, FQDN and zone; the playbook behind the webhook manages the
    actual TXT record. Credentials, endpoint and webhook identifier come
    from the issuer's solver config on every call.

    Args:
        dispatcher: Dispatcher used to deliver payloads. Built from the
            settings in initialize() when omitted.
    """

    def __init__(self, dispatcher: RequestDispatcher | None = None):
        self.dispatcher = dispatcher or RequestDispatcher()

    @property
    def name(self) -> str:
        return "prismcentral-solver"

    def initialize(self, settings: Settings) -> None:
        self.dispatcher = RequestDispatcher(timeout=settings.request_timeout)

    def _trigger(self, request: ChallengeRequest, cleanup: bool) -> None:
        cfg = load_config(request.config)

        webhook_id = cfg.webhook_id
        if cleanup and cfg.cleanup_webhook_id:
            webhook_id = cfg.cleanup_webhook_id

        payload = TriggerPayload.for_challenge(webhook_id, request)
        try:
            data = payload.model_dump_json().encode()
        except PydanticSerializationError as e:
            raise RequestBuildError("error marshaling JSON", e) from e

        logger.debug(
            "Data for DNS challenge",
            extra={
                "fqdn": request.resolved_fqdn,
                "webhook_id": webhook_id,
                "payload": data.decode(),
                **get_challenge_extra(),
            },
        )

        self.dispatcher.send(data, cfg.api_endpoint, cfg.username, cfg.password)

    def present(self, request: ChallengeRequest) -> None:
        """Fire the configured webhook to publish the challenge record.

        Args:
            request: The challenge request.

        Raises:
            SolverError: If decoding, serialization or delivery fails.
        """
        self._trigger(request, cleanup=False)
        logger.info(
            "Successfully presented DNS challenge",
            extra={
                "fqdn": request.resolved_fqdn,
                "zone": request.resolved_zone,
                **get_challenge_extra(),
            },
        )

    def cleanup(self, request: ChallengeRequest) -> None:
        """Fire the cleanup webhook (or the configured one) to withdraw the record.

        Args:
            request: The challenge request.

        Raises:
            SolverError: If decoding, serialization or delivery fails.
        """
        self._trigger(request, cleanup=True)
        logger.info(
            "Successfully cleaned up DNS challenge",
            extra={
                "fqdn": request.resolved_fqdn,
                "zone": request.resolved_zone,
                **get_challenge_extra(),
            },
        )
