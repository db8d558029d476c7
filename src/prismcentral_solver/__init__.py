"""prismcentral_solver - ACME DNS-01 webhook solver backed by Prism Central webhook triggers."""

from prismcentral_solver.solvers import PrismCentralSolver, Solver

__all__ = ["PrismCentralSolver", "Solver"]
__version__ = "0.1.0"
