"""Tests for the family genotype file reader."""

import pytest

from genomeconcord.concordance import check_mendelian
from genomeconcord.error_handling import FileFormatError
from genomeconcord.models import GenotypeRecord
from genomeconcord.parser import (
    dataset_metadata,
    parse_genotype_line,
    parse_genotype_lines,
    read_genotype_file,
    records_to_dataframe,
)


class TestParseGenotypeLine:
    """Test single-line parsing."""

    def test_column_order(self):
        """Test fields map as marker, chrom, pos, father, son1, son2, mother."""
        record = parse_genotype_line("rs1\t7\t12345\tAG\tAA\tGG\tCT")
        assert record == GenotypeRecord(
            marker_id="rs1",
            chromosome="7",
            position=12345,
            father="AG",
            son1="AA",
            son2="GG",
            mother="CT",
        )

    def test_any_whitespace(self):
        """Test spaces and tabs are both accepted as separators."""
        record = parse_genotype_line("  rs1  MT   7028 \t C C  C   C  ")
        assert record.chromosome == "MT"
        assert record.position == 7028
        assert record.mother == "C"

    def test_no_call_tokens_normalized(self):
        """Test '--' and '__' become empty genotypes."""
        record = parse_genotype_line("rs1 1 10 -- __ AG --")
        assert record.father == ""
        assert record.son1 == ""
        assert record.son2 == "AG"
        assert record.mother == ""

    def test_extra_fields_ignored(self):
        """Test fields after the seventh are dropped."""
        record = parse_genotype_line("rs1 1 10 AA AA AA AA extra stuff")
        assert record.mother == "AA"

    @pytest.mark.parametrize(
        "line",
        ["", "   ", "# comment", "  # indented comment", "rs1 1 10 AA AA AA"],
    )
    def test_skipped_lines(self, line):
        """Test blank, comment and short lines are skipped."""
        assert parse_genotype_line(line) is None

    def test_non_integer_position_kept(self):
        """Test a bad position keeps the genotypes with no position."""
        record = parse_genotype_line("rs1 1 pos AG AA GG AG")
        assert record.position is None
        assert record.father == "AG"
        assert record.son2 == "GG"

    def test_non_integer_position_still_analyzed(self):
        """Test a record without a position still counts in the trio check."""
        records = parse_genotype_lines(["rs1 1 pos AG AA GG AG", "rs2 1 12.5 AA GG GG AA"])
        report = check_mendelian(records)
        assert report.total_checked == 2
        assert report.consistent_count == 1
        assert report.inconsistent_records[0].marker_id == "rs2"


class TestReadGenotypeFile:
    """Test reading whole files."""

    def test_read_valid_file(self, genotype_file):
        """Test records are returned in file order with no-calls normalized."""
        records = read_genotype_file(str(genotype_file))
        assert [r.marker_id for r in records] == [
            "rs4988235",
            "rs12913832",
            "rs100",
            "rs300",
            "i7028",
            "i2706",
            "i4793",
        ]
        assert records[4].father == ""
        assert records[5].mother == ""
        assert records[5].son1 == "A"

    def test_missing_file(self, tmp_path):
        """Test a missing file raises FileFormatError."""
        with pytest.raises(FileFormatError):
            read_genotype_file(str(tmp_path / "missing.txt"))

    def test_duplicates_kept(self):
        """Test duplicate markers are not deduplicated."""
        records = parse_genotype_lines(["rs1 1 10 AA AA AA AA"] * 3)
        assert len(records) == 3


def test_dataset_metadata(genotype_file):
    """Test the marker count and first-seen chromosome order."""
    metadata = dataset_metadata(read_genotype_file(str(genotype_file)))
    assert metadata == {"count": 7, "chromosomes": ["2", "15", "1", "3", "MT"]}


def test_dataset_metadata_empty():
    """Test metadata of an empty dataset."""
    assert dataset_metadata([]) == {"count": 0, "chromosomes": []}


def test_records_to_dataframe(genotype_file):
    """Test the DataFrame has one row per record and fixed columns."""
    df = records_to_dataframe(read_genotype_file(str(genotype_file)))
    assert list(df.columns) == [
        "marker_id",
        "chromosome",
        "position",
        "father",
        "mother",
        "son1",
        "son2",
    ]
    assert len(df) == 7
    assert df.loc[0, "son2"] == "GA"


def test_records_to_dataframe_empty():
    """Test an empty record list still has the columns."""
    df = records_to_dataframe([])
    assert df.empty
    assert "marker_id" in df.columns


def test_records_to_dataframe_missing_position():
    """Test unknown positions stay integers-or-missing in the frame."""
    df = records_to_dataframe(parse_genotype_lines(["rs1 1 10 AA AA AA AA", "rs2 1 x AA AA AA AA"]))
    assert str(df["position"].dtype) == "Int64"
    assert df.loc[0, "position"] == 10
    assert df["position"].isna().tolist() == [False, True]
