"""Problem file loading and result writing."""

from promethee.io.problem_loader import ProblemLoader
from promethee.io.results_writer import ResultsWriter

__all__ = ["ProblemLoader", "ResultsWriter"]
