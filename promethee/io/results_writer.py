"""Save engine results as CSV tables and a JSON summary."""

import json
from pathlib import Path

from promethee.core.preference_pipeline import PreferenceResults
from promethee.types import PartialPreferenceMatrix, PreferenceMatrix
from promethee.utils.logging import get_logger

logger = get_logger(__name__)


class ResultsWriter:
    """Writes every matrix of a PreferenceResults to an output directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = output_dir

    def write(self, results: PreferenceResults) -> list[Path]:
        """Write result files.

        Args:
            results: Results of one engine run

        Returns:
            Paths of the files written
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        outputs = {
            "preferences": results.preferences,
            "partial_preferences": results.partial_preferences,
            "discordances": results.discordances,
            "partial_discordances": results.partial_discordances,
            "preferences_with_discordance": results.preferences_with_discordance,
        }
        written = []
        for name, matrix in outputs.items():
            if matrix is None:
                continue
            written.append(self._write_matrix(name, matrix))

        summary_path = self.output_dir / "summary.json"
        summary = {
            name: [
                {"pair": list(pair), "value": value}
                for pair, value in matrix.items()
            ]
            for name, matrix in outputs.items()
            if isinstance(matrix, PreferenceMatrix)
        }
        with open(summary_path, "w") as f:
            json.dump(summary, f, indent=2)
        written.append(summary_path)

        logger.info("Saved preference results", output_dir=str(self.output_dir), files=len(written))
        return written

    def _write_matrix(self, name: str, matrix: PreferenceMatrix | PartialPreferenceMatrix) -> Path:
        path = self.output_dir / f"{name}.csv"
        frame = matrix.to_frame()
        if isinstance(matrix, PartialPreferenceMatrix):
            frame.to_csv(path)
        else:
            frame.to_csv(path, index_label="entity")
        return path
