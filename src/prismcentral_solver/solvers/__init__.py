"""DNS-01 webhook solvers."""

from prismcentral_solver.solvers.base import Solver
from prismcentral_solver.solvers.prismcentral import PrismCentralSolver

__all__ = ["Solver", "PrismCentralSolver"]
