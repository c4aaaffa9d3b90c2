# File: genomeconcord/generate_html_report.py
# Location: genomeconcord/generate_html_report.py

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from .models import PEOPLE


def generate_html_report(summary: Dict[str, Any], output_dir: str, cfg: Dict[str, Any]) -> str:
    """
    Generate a static HTML report of the family analysis summary.

    Parameters
    ----------
    summary : Dict[str, Any]
        Summary dictionary as produced by ``converter.build_summary``.
    output_dir : str
        Directory to write the generated HTML report.
    cfg : Dict[str, Any]
        The main configuration dictionary containing report settings.

    Returns
    -------
    str
        Path of the written index.html
    """
    templates_dir = Path(__file__).parent / "templates"
    if not templates_dir.exists():
        raise FileNotFoundError(f"Templates directory not found at: {templates_dir}")

    env = Environment(
        loader=FileSystemLoader(str(templates_dir)), autoescape=select_autoescape(["html"])
    )
    template = env.get_template("index.html")

    html_content = template.render(
        title=cfg.get("report_title", "Family Genome Concordance Report"),
        summary=summary,
        people=PEOPLE,
    )

    output_path = Path(output_dir) / "index.html"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as out_f:
        out_f.write(html_content)
    return str(output_path)
