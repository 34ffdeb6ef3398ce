"""JSON output — deterministic analysis.json generation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from adjgraph.model import AnalysisReport


def render_json(report: AnalysisReport, out_path: Path) -> Path:
    """Write analysis.json into *out_path* and return the written path."""
    from pathlib import Path as _Path

    data = report.model_dump(mode="json")
    _Path(str(out_path)).mkdir(parents=True, exist_ok=True)
    out_file = _Path(str(out_path), "analysis.json")
    out_file.write_text(
        json.dumps(data, sort_keys=True, indent=2) + "\n",
        encoding="utf-8",
    )
    return out_file
