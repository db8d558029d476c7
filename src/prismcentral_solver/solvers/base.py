"""Abstract base class for DNS-01 webhook solvers."""

from abc import ABC, abstractmethod

from prismcentral_solver.config import Settings
from prismcentral_solver.models import ChallengeRequest


class Solver(ABC):
    """Abstract interface for DNS-01 webhook solvers.

    Solvers publish and withdraw the ACME challenge record for a
    challenge request. The webhook server dispatches to a solver by its
    name, which must be unique within the serving group.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Name used to reference this solver from an issuer."""
        ...

    def initialize(self, settings: Settings) -> None:
        """Prepare the solver once, before any request is served.

        Args:
            settings: Process settings read at startup.
        """

    @abstractmethod
    def present(self, request: ChallengeRequest) -> None:
        """Publish the challenge record.

        May be called more than once for the same record.

        Args:
            request: The challenge request.

        Raises:
            SolverError: If the record could not be published.
        """
        ...

    @abstractmethod
    def cleanup(self, request: ChallengeRequest) -> None:
        """Withdraw the challenge record matching ``request.key``.

        Args:
            request: The challenge request.

        Raises:
            SolverError: If the record could not be withdrawn.
        """
        ...
