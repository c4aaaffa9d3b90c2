"""Tests for HTML report rendering."""

import pytest

from genomeconcord.concordance import analyze_family
from genomeconcord.config import load_config
from genomeconcord.converter import build_summary
from genomeconcord.generate_html_report import generate_html_report
from genomeconcord.haplogroup_rules import load_haplogroup_rules
from genomeconcord.parser import dataset_metadata, read_genotype_file
from genomeconcord.traits import load_trait_tables


@pytest.fixture
def summary(genotype_file):
    records = read_genotype_file(str(genotype_file))
    analysis = analyze_family(records, load_haplogroup_rules(), load_trait_tables())
    return build_summary(analysis, dataset_metadata(records), load_config())


def test_report_written(summary, tmp_path):
    """Test index.html contains every section of the summary."""
    cfg = {"report_title": "Smith Family"}
    path = generate_html_report(summary, str(tmp_path / "html"), cfg)
    assert path.endswith("index.html")

    with open(path, encoding="utf-8") as f:
        html = f.read()
    assert "<title>Smith Family</title>" in html
    assert "Total SNPs processed: <strong>7</strong>" in html
    assert "75.00%" in html
    assert "1 Mismatches" in html
    assert "37.5%" in html
    assert "were taken" in html
    assert "Likely Blue/Light Eyes" in html
    assert 'id="traits-wellness"' in html


def test_default_title_and_escaping(summary, tmp_path):
    """Test the default title and that summary text is escaped."""
    summary["haplogroups"]["maternal"] = "<script>x</script>"
    path = generate_html_report(summary, str(tmp_path), {})
    with open(path, encoding="utf-8") as f:
        html = f.read()
    assert "Family Genome Concordance Report" in html
    assert "<script>x</script>" not in html
    assert "&lt;script&gt;" in html
