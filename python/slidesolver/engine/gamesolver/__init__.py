from slidesolver.engine.gamesolver.autosolve import (
    PhaseReport,
    PuzzleSolver,
    SolverConfig,
    SolverError,
)
from slidesolver.engine.gamesolver.solver import Solver

__all__ = ["PhaseReport", "PuzzleSolver", "Solver", "SolverConfig", "SolverError"]
