"""Tests for sequence utility functions."""

import pytest
from dna_converter.utils.sequences import (
    validate_sequence,
    get_complement,
    transcribe,
    count_nucleotides,
    calculate_gc,
    round_half_up,
)


RAW_INPUTS = [
    "atgc",
    "ATG CCA\nTGA",
    "5'-ATGNNNRYCG-3'",
    "hello world",
    "",
]


class TestValidateSequence:
    """Tests for sequence validation."""

    def test_uppercases(self):
        """Test lowercase input is uppercased."""
        assert validate_sequence("atgc") == "ATGC"

    def test_drops_invalid_characters(self):
        """Test whitespace, digits and ambiguity codes are removed."""
        assert validate_sequence("5'-ATG NNN\ncgU-3'") == "ATGCG"

    def test_all_invalid_is_empty(self):
        """Test input without A/T/G/C gives an empty string."""
        assert validate_sequence("xyz!") == ""

    @pytest.mark.parametrize("raw", RAW_INPUTS)
    def test_idempotent(self, raw):
        """Test validating twice changes nothing."""
        once = validate_sequence(raw)
        assert validate_sequence(once) == once
        assert set(once) <= set("ATGC")


class TestComplement:
    """Tests for complementary strand generation."""

    def test_complement_simple(self):
        """Test complement keeps base positions (no reversal)."""
        assert get_complement("ATGC") == "TACG"

    def test_complement_empty(self):
        """Test complement of empty string."""
        assert get_complement("") == ""

    @pytest.mark.parametrize("seq", ["A", "ATGGTGCACCTG", "GGGCCCAAATTT"])
    def test_complement_involution(self, seq):
        """Test complementing twice returns the original with the same length."""
        assert len(get_complement(seq)) == len(seq)
        assert get_complement(get_complement(seq)) == seq


class TestTranscribe:
    """Tests for DNA -> mRNA transcription."""

    def test_transcribe(self, hbb_dna, hbb_rna):
        """Test T is replaced by U."""
        assert transcribe(hbb_dna) == hbb_rna

    def test_transcribe_no_t(self):
        """Test result has no T and the same length."""
        rna = transcribe("TTTAGCT")
        assert "T" not in rna
        assert len(rna) == 7


class TestCountNucleotides:
    """Tests for nucleotide counting."""

    def test_dna_counts(self):
        """Test DNA counts omit U."""
        assert count_nucleotides("ATGC") == {"A": 1, "T": 1, "G": 1, "C": 1}

    def test_rna_counts(self):
        """Test RNA counts omit T."""
        assert count_nucleotides("AUGCUU") == {"A": 1, "U": 3, "G": 1, "C": 1}

    def test_key_order(self):
        """Test keys come out as A, T, G, C."""
        assert list(count_nucleotides("CGTA")) == ["A", "T", "G", "C"]

    def test_no_t_or_u_guessed_as_dna(self):
        """Test a sequence without T or U is counted as DNA by default."""
        assert count_nucleotides("GGCA") == {"A": 1, "T": 0, "G": 2, "C": 1}

    def test_explicit_rna_alphabet(self):
        """Test an explicit alphabet overrides the guess."""
        assert count_nucleotides("GGCA", alphabet="rna") == {"A": 1, "U": 0, "G": 2, "C": 1}

    def test_explicit_dna_alphabet(self):
        """Test an explicit DNA alphabet keeps T."""
        assert count_nucleotides("AT", alphabet="DNA") == {"A": 1, "T": 1, "G": 0, "C": 0}

    def test_unknown_alphabet(self):
        """Test an unknown alphabet tag is rejected."""
        with pytest.raises(ValueError, match="alphabet"):
            count_nucleotides("ATGC", alphabet="protein")


class TestCalculateGC:
    """Tests for GC content calculation."""

    def test_gc_hbb(self):
        """Test GC percentage of a 27 bp sequence is rounded to two decimals."""
        assert calculate_gc("ATGGTGCACCTGACTCCTGAGGAGAAG") == 55.56

    def test_gc_all_gc(self):
        """Test GC percentage of all G/C sequence."""
        assert calculate_gc("GCGCGC") == 100.0

    def test_gc_no_gc(self):
        """Test GC percentage of all A/T sequence."""
        assert calculate_gc("ATATAT") == 0.0

    def test_gc_rna(self):
        """Test U counts toward the length of RNA."""
        assert calculate_gc("AUGC") == 50.0

    def test_gc_empty(self):
        """Test GC percentage of empty string."""
        assert calculate_gc("") == 0.0

    def test_gc_rounds_ties_up(self):
        """Test exact halves round up, like toFixed(2)."""
        assert calculate_gc("G" + "A" * 31) == 3.13
        assert calculate_gc("GGCCG" + "A" * 27) == 15.63


class TestRoundHalfUp:
    """Tests for two-decimal rounding."""

    def test_ties(self):
        """Test exact halves round away from zero."""
        assert round_half_up(3.125) == 3.13
        assert round_half_up(0.5, digits=0) == 1.0

    def test_non_ties(self):
        """Test ordinary values round to nearest."""
        assert round_half_up(55.5555) == 55.56
        assert round_half_up(33.3333) == 33.33
