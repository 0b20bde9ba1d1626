"""Generate markdown run reports."""
from __future__ import annotations
from pathlib import Path
import pandas as pd
import json


def write_report(run_dir: Path):
    metrics_path = run_dir / "metrics.csv"
    if not metrics_path.exists():
        return None
    df = pd.read_csv(metrics_path)
    try:
        summary = df.describe().to_markdown()
    except ImportError:
        summary = df.describe().to_string()
    best_path = run_dir / "best_solution.json"
    best_section = ""
    if best_path.exists():
        best = json.loads(best_path.read_text())
        best_section = "\n".join(
            [
                "## Best solution",
                "",
                f"- **generation**: {best['generation']}",
                f"- **fitness**: {best['fitness']:.4f}",
                f"- **treasures**: {best['treasures_found']}",
                f"- **iterations**: {best['iterations']}",
                f"- **steps**: `{best['steps']}` ({len(best['steps'])})",
                f"- **stop reason**: {best['stop_reason']}",
                "",
                f"Genes: `{best['genes']}`",
            ]
        )
    plot_png = run_dir / "plots" / "fitness.png"
    plot_section = f"![fitness]({plot_png})" if plot_png.exists() else ""
    report_path = run_dir / "report.md"
    report_path.write_text(
        "\n".join(
            [
                "# Run Report",
                "",
                best_section,
                "",
                "## Metrics summary",
                summary,
                "",
                plot_section,
            ]
        )
    )
    return report_path
