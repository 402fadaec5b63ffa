"""Tests for phenotype resolution and trait interactions."""

import pytest

from garden.genetics import Gene, get_trait, parse_sequence, resolve_phenotype
from garden.genetics.expression import (
    calculate_trait_interactions,
    count_homozygous,
    quantitative_level,
    resolve_qualitative,
)

CARROT = "FC:RY-SZ:22-LS:33-BP:11-GR:12-YD:44-RS:22-WN:22"


def flower(pair: str) -> dict:
    return resolve_qualitative(get_trait("FC"), Gene.from_wire(pair))


def leaf(pair: str) -> dict:
    return resolve_qualitative(get_trait("LS"), Gene.from_wire(pair))


class TestQualitative:
    def test_homozygous_is_the_allele(self):
        assert flower("RR") == {"name": "Red", "value": "#FF5555", "dominance": 2}
        assert flower("WW") == {"name": "White", "value": "#FFFFFF", "dominance": 1}

    def test_blend_ignores_order(self):
        assert flower("RB") == {"name": "Purple", "value": "#9955FF"}
        assert flower("BR") == {"name": "Purple", "value": "#9955FF"}
        assert flower("YR")["name"] == "Orange"
        assert flower("PB")["name"] == "Purple"

    def test_higher_dominance_wins_without_blend(self):
        assert flower("WP")["name"] == "Pink"
        assert flower("PW")["name"] == "Pink"

    def test_equal_dominance_goes_to_first_allele(self):
        assert leaf("12")["name"] == "Oval"
        assert leaf("21")["name"] == "Heart"
        assert leaf("32")["name"] == "Pointed"

    def test_unknown_allele_falls_back_to_first_defined(self):
        assert flower("RZ")["name"] == "Red"
        assert flower("ZZ")["name"] == "Red"
        assert leaf("19")["name"] == "Oval"

    def test_haploid_falls_back_to_first_defined(self):
        assert flower("R")["name"] == "Red"


class TestQuantitative:
    @pytest.mark.parametrize(
        "wire, expected",
        [
            ("33", 3),
            ("15", 3),
            ("12", 2),  # 1.5 rounds half up
            ("99", 5),
            ("00", 1),
            ("ab", 1),  # non-numeric digits use the minimum
            ("7", 5),  # haploid value parsed directly
            ("x", 3),  # unparseable haploid uses the default
        ],
    )
    def test_size_levels_stay_in_range(self, wire, expected):
        assert quantitative_level(get_trait("SZ"), Gene.from_wire(wire)) == expected

    @pytest.mark.parametrize(
        "wire, expected",
        [("11", 1), ("10", 1), ("00", 0.5), ("12", 1.5), ("08", 1.5), ("99", 1.5)],
    )
    def test_growth_rate_levels(self, wire, expected):
        assert quantitative_level(get_trait("GR"), Gene.from_wire(wire)) == expected

    def test_record_carries_value_map_fields(self):
        phenotype = resolve_phenotype(parse_sequence("YD:55"))
        assert phenotype["YD"]["value"] == 5
        assert phenotype["YD"]["coinMultiplier"] == 1.5
        assert phenotype["YD"]["seedChance"] == 0.7


class TestTraitInteractions:
    def test_carrot_preset(self):
        phenotype = resolve_phenotype(parse_sequence(CARROT))

        assert phenotype["FC"]["name"] == "Orange"
        assert phenotype["FC"]["value"] == "#FF9955"
        assert phenotype["SZ"]["value"] == 2
        assert phenotype["YD"]["value"] == 4
        assert phenotype["YD"]["coinMultiplier"] == 1.2

    def test_growth_scaled_by_size(self):
        phenotype = resolve_phenotype(parse_sequence(CARROT))
        assert phenotype["GR"]["value"] == 1.5
        assert phenotype["GR"]["effectiveValue"] == pytest.approx(1.65)
        # 6 base days / 1.1 growth modifier
        assert phenotype["GR"]["daysToMature"] == 5

    def test_water_scaled_by_size(self):
        assert resolve_phenotype(parse_sequence(CARROT))["WN"]["effectiveWaterPerDay"] == 18
        big = resolve_phenotype(parse_sequence("SZ:44-WN:22"))
        assert big["WN"]["effectiveWaterPerDay"] == 22

    def test_fast_growth_costs_resistance(self):
        carrot = resolve_phenotype(parse_sequence(CARROT))
        assert carrot["RS"]["effectivePestDamageChance"] == pytest.approx(0.25)

        normal = resolve_phenotype(parse_sequence("GR:11-RS:22"))
        assert normal["RS"]["effectivePestDamageChance"] == 0.2

    def test_pest_chance_is_capped(self):
        phenotype = {"GR": {"value": 9.0}, "RS": {"pestDamageChance": 0.5}}
        calculate_trait_interactions(phenotype, {})
        assert phenotype["RS"]["effectivePestDamageChance"] == 1.0

    def test_inbreeding_depression_above_threshold(self):
        # Six homozygous genes: one over the threshold
        phenotype = resolve_phenotype(parse_sequence(CARROT))
        assert phenotype["YD"]["effectiveCoinMultiplier"] == pytest.approx(1.2 * 0.9)

    def test_default_genotype_is_not_inbred(self):
        # Scalar quantitative defaults are haploid, so only FC and LS count
        genotype = parse_sequence(None)
        assert count_homozygous(genotype) == 2
        assert resolve_phenotype(genotype)["YD"]["effectiveCoinMultiplier"] == 1.0

    def test_no_inbreeding_depression_at_threshold(self):
        genotype = parse_sequence("FC:RB-SZ:33-LS:12-BP:11-GR:10-YD:33-RS:22-WN:22")
        assert count_homozygous(genotype) == 5
        assert resolve_phenotype(genotype)["YD"]["effectiveCoinMultiplier"] == 1.0

    def test_homozygous_qualitative_genes_count(self):
        assert count_homozygous(parse_sequence("FC:RR-LS:11-SZ:12-BP:22")) == 3

    def test_missing_traits_are_skipped(self):
        phenotype = resolve_phenotype({"GR": Gene.from_wire("11")})
        assert set(phenotype) == {"GR"}
        assert phenotype["GR"]["effectiveValue"] == 1.0
        assert phenotype["GR"]["daysToMature"] == 10

    def test_unknown_keys_are_ignored(self):
        phenotype = resolve_phenotype({"XX": Gene.from_wire("11"), "WN": Gene.from_wire("11")})
        assert set(phenotype) == {"WN"}
        assert phenotype["WN"]["effectiveWaterPerDay"] == 10

    def test_phenotype_is_recomputed_not_shared(self):
        first = resolve_phenotype(parse_sequence(None))
        first["SZ"]["value"] = 99
        assert resolve_phenotype(parse_sequence(None))["SZ"]["value"] == 3
