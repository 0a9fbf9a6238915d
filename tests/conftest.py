"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def hbb_dna():
    """Return the start of the human beta-globin coding sequence, ending in a stop."""
    return "ATGGTGCACCTGACTCCTGAGGAGAAGTAG"


@pytest.fixture
def hbb_rna():
    """Return the mRNA for hbb_dna."""
    return "AUGGUGCACCUGACUCCUGAGGAGAAGUAG"


@pytest.fixture
def sample_fasta():
    """Return FASTA text with two records and one empty record."""
    return (
        ">hbb Homo sapiens beta globin\n"
        "ATGGTGCACCTGACT\n"
        "CCTGAGGAGAAGTAG\n"
        ">empty no sequence here\n"
        ">short\n"
        "GGCC\n"
    )


@pytest.fixture
def params_file(tmp_path):
    """Write a params.txt and return its path."""
    path = tmp_path / "params.txt"
    path.write_text("# conversion settings\nALPHABET = DNA\nLINE_WIDTH = 10\n")
    return path
