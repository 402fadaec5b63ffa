"""Tests for genotype validation."""

import pytest

from garden.genetics import Gene, default_genotype, parse_sequence, validate_genotype
from garden.plant_factory import GENERIC_STARTER, STARTER_SEQUENCES


def test_default_genotype_is_valid():
    assert validate_genotype(default_genotype()) == []


@pytest.mark.parametrize("sequence", [GENERIC_STARTER, STARTER_SEQUENCES["carrot"], STARTER_SEQUENCES["tomato"]])
def test_presets_are_valid(sequence):
    assert validate_genotype(parse_sequence(sequence)) == []


def test_corn_growth_digits_out_of_range():
    issues = validate_genotype(parse_sequence(STARTER_SEQUENCES["corn"]))
    assert issues == ["GR: level 4 not in [0.5, 1.5]"]


@pytest.mark.parametrize("wire", ["00", "11", "22", "12", "10"])
def test_growth_rate_fractional_bounds_are_valid(wire):
    assert validate_genotype(parse_sequence(f"GR:{wire}")) == []


def test_unknown_gene():
    genotype = default_genotype()
    genotype["XX"] = Gene.from_wire("11")
    assert validate_genotype(genotype) == ["XX: unknown gene"]


def test_missing_gene():
    genotype = default_genotype()
    del genotype["WN"]
    assert validate_genotype(genotype) == ["WN: missing gene"]


def test_unknown_allele():
    assert validate_genotype(parse_sequence("FC:RZ")) == ["FC: unknown allele 'Z'"]


def test_qualitative_needs_two_alleles():
    assert validate_genotype(parse_sequence("LS:1")) == ["LS: expected two alleles, got '1'"]


def test_scalar_quantitative_values():
    assert validate_genotype(parse_sequence("SZ:3-GR:1")) == []
    assert validate_genotype(parse_sequence("SZ:9")) == ["SZ: level 9 not in [1, 5]"]
    assert validate_genotype(parse_sequence("SZ:abc")) == ["SZ: non-numeric value 'abc'"]


def test_non_numeric_allele():
    assert validate_genotype(parse_sequence("YD:4x")) == ["YD: non-numeric allele 'x'"]


def test_level_out_of_range():
    assert validate_genotype(parse_sequence("SZ:99")) == ["SZ: level 9 not in [1, 5]"]
    assert validate_genotype(parse_sequence("RS:00")) == ["RS: level 0 not in [1, 3]"]


def test_issues_are_reported_together():
    issues = validate_genotype(parse_sequence("FC:Q-SZ:77"))
    assert len(issues) == 2
