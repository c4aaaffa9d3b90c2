"""Test cases for the family analysis orchestrator."""

import pytest

from genomeconcord.concordance import analyze_family
from genomeconcord.concordance.analyzer import FamilyAnalysis
from genomeconcord.concordance.haplogroup import classify_haplogroup
from genomeconcord.concordance.mendelian import check_mendelian
from genomeconcord.concordance.mitochondrial import check_mitochondrial
from genomeconcord.concordance.sibling import estimate_sibling_sharing
from genomeconcord.error_handling import DataValidationError
from genomeconcord.models import InterpretationRule, TraitDefinition


@pytest.fixture
def lactose_table():
    """A one-trait table matching rs100 of the family fixture."""
    return [
        TraitDefinition(
            rsid="rs100",
            trait="Test Trait",
            rules=(InterpretationRule("contains", ("A",), "Has A"),),
            default="No A",
        )
    ]


class TestAnalyzeFamily:
    """Test that the orchestrator matches the individual analyses."""

    def test_matches_individual_analyses(self, family_records, simple_rule_table):
        """Test sequential orchestration returns the same reports."""
        analysis = analyze_family(family_records, simple_rule_table)
        assert isinstance(analysis, FamilyAnalysis)
        assert analysis.mendelian == check_mendelian(family_records)
        assert analysis.mitochondrial == check_mitochondrial(family_records)
        assert analysis.sibling == estimate_sibling_sharing(family_records)
        assert analysis.haplogroup == classify_haplogroup(family_records, simple_rule_table)
        assert analysis.traits == {}

    def test_threaded_matches_sequential(self, family_records, simple_rule_table, lactose_table):
        """Test running on a thread pool gives identical results."""
        tables = {"traits": lactose_table}
        sequential = analyze_family(family_records, simple_rule_table, tables, n_workers=1)
        threaded = analyze_family(family_records, simple_rule_table, tables, n_workers=4)
        assert sequential == threaded

    def test_generator_input_shared_by_all_analyses(self, family_records, simple_rule_table):
        """Test a generator is materialized once so every analysis sees all records."""
        analysis = analyze_family((r for r in family_records), simple_rule_table, n_workers=2)
        assert analysis.mendelian.total_checked == 3
        assert analysis.mitochondrial.total_checked == 3
        assert analysis.haplogroup.label == "H7"

    def test_trait_tables_are_keyed_by_name(self, family_records, lactose_table):
        """Test trait results are returned per table."""
        analysis = analyze_family(family_records, [], {"traits": lactose_table, "empty": []})
        assert set(analysis.traits) == {"traits", "empty"}
        assert analysis.traits["empty"] == []
        result = analysis.traits["traits"][0]
        assert result.for_person("father").interpretation == "Has A"
        assert result.for_person("mother").interpretation == "No A"

    def test_empty_input(self):
        """Test empty input yields zero reports and no NaN."""
        analysis = analyze_family([], [])
        assert analysis.mendelian.total_checked == 0
        assert analysis.mitochondrial.total_checked == 0
        assert analysis.sibling.shared_percentage == 0.0
        assert analysis.haplogroup.label == "Undetermined"

    def test_none_records_rejected(self, simple_rule_table):
        """Test a missing record sequence is a caller error."""
        with pytest.raises(DataValidationError):
            analyze_family(None, simple_rule_table)
