"""Tests for the Plant entity: growth ticks, harvesting and display info."""

import pytest

from garden.entities.plant import Plant, PlantEvent, PlantState
from garden.genetics import default_genotype, generate_default_sequence
from garden.util.rng import MissingRNGError

CARROT = "FC:RY-SZ:22-LS:33-BP:11-GR:12-YD:44-RS:22-WN:22"
TOMATO = "FC:RR-SZ:33-LS:11-BP:22-GR:10-YD:33-RS:33-WN:22"


def make_ready(plant: Plant) -> Plant:
    plant.progress = 100.0
    plant.ready = True
    return plant


class TestConstruction:
    def test_default_plant(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        assert plant.to_sequence() == generate_default_sequence()
        assert plant.progress == 0
        assert plant.health == 100
        assert plant.ready is False
        assert plant.watered is True
        assert plant.state is PlantState.GROWING

    def test_default_plant_is_not_inbred(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        assert plant.phenotype["YD"]["effectiveCoinMultiplier"] == 1.0
        assert plant.get_info().sell_price == 10

    def test_phenotype_resolved_at_construction(self, seeded_rng):
        plant = Plant(CARROT, rng=seeded_rng)
        assert plant.phenotype["FC"]["name"] == "Orange"

    def test_from_genotype(self, seeded_rng):
        plant = Plant(CARROT, rng=seeded_rng)
        clone = Plant.from_genotype(plant.genes, rng=seeded_rng)
        assert clone.to_sequence() == CARROT
        assert clone.phenotype == plant.phenotype


class TestUpdate:
    def test_default_growth_tick(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        result = plant.update()
        assert result.event is PlantEvent.GROWING
        assert plant.progress == pytest.approx(10.0)
        assert plant.health == 100

    def test_matures_after_ten_ticks(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        events = [plant.update(100).event for _ in range(10)]
        assert events[:-1] == [PlantEvent.GROWING] * 9
        assert events[-1] is PlantEvent.MATURED
        assert plant.progress == 100
        assert plant.ready is True
        assert plant.state is PlantState.READY

    def test_progress_clamped_at_100(self, seeded_rng):
        plant = Plant(CARROT, rng=seeded_rng)
        results = [plant.update(100) for _ in range(7)]
        assert results[-1].event is PlantEvent.MATURED
        assert plant.progress == 100

    def test_ready_plant_update_is_noop(self, seeded_rng):
        plant = make_ready(Plant(rng=seeded_rng))
        plant.health = 40.0
        for _ in range(3):
            assert plant.update(0, pest_present=True, weather_event="storm") is None
        assert plant.progress == 100
        assert plant.health == 40.0
        assert plant.ready is True

    def test_mild_underwatering_slows_growth(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.update(water_level=15)
        assert plant.progress == pytest.approx(7.5)
        assert plant.health == 100
        assert plant.watered is False

    def test_severe_underwatering_hurts_health(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.update(water_level=5)
        assert plant.progress == pytest.approx(2.5)
        assert plant.health == pytest.approx(96.25)
        assert plant.watered is False

        plant.update(water_level=20)
        assert plant.watered is True

    def test_pest_hit(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.0))
        plant.update(pest_present=True)
        assert plant.progress == pytest.approx(5.0)
        assert plant.health == 90

    def test_pest_miss(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.99))
        plant.update(pest_present=True)
        assert plant.progress == pytest.approx(10.0)
        assert plant.health == 100

    def test_drought_hit(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.9))
        plant.update(weather_event="drought")
        assert plant.progress == pytest.approx(3.0)
        assert plant.health == 85

    def test_drought_resisted(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.1))
        plant.update(weather_event="drought")
        assert plant.progress == pytest.approx(10.0)
        assert plant.health == 100

    def test_storm_hit(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.0))
        result = plant.update(weather_event="storm")
        assert result.event is PlantEvent.GROWING
        assert plant.progress == 0
        assert plant.health == 80

    def test_storm_scales_with_size(self, scripted_rng):
        # Default plant: 0.2 weather chance * 3/5 size = 0.12
        plant = Plant(rng=scripted_rng(0.15))
        plant.update(weather_event="storm")
        assert plant.health == 100

        corn = Plant("SZ:55", rng=scripted_rng(0.15))
        corn.update(weather_event="storm")
        assert corn.health == 80

    def test_unknown_weather_is_ignored(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.update(weather_event="hail")
        assert plant.progress == pytest.approx(10.0)

    def test_death_clamps_health_to_zero(self, scripted_rng):
        plant = Plant(rng=scripted_rng(0.0))
        plant.health = 5.0
        result = plant.update(weather_event="storm")
        assert result.event is PlantEvent.DIED
        assert plant.health == 0
        assert plant.state is PlantState.DEAD
        assert not plant.is_alive

    def test_dead_plant_stays_dead(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.health = 0.0
        progress = plant.progress
        assert plant.update().event is PlantEvent.DIED
        assert plant.progress == progress

    def test_rng_is_required_at_construction(self):
        with pytest.raises(MissingRNGError):
            Plant()
        with pytest.raises(MissingRNGError):
            Plant.from_genotype(default_genotype())


class TestHarvest:
    def test_not_ready(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.update()
        before = (plant.progress, plant.health, plant.ready, plant.watered)

        result = plant.harvest()

        assert result.success is False
        assert result.rewards is None
        assert result.message == "Plant not ready for harvest"
        assert (plant.progress, plant.health, plant.ready, plant.watered) == before

    def test_rewards(self, scripted_rng):
        plant = make_ready(Plant(rng=scripted_rng(0.0)))
        result = plant.harvest()

        assert result.success is True
        assert result.rewards.coins == 10
        assert result.rewards.seeds == 1
        assert result.rewards.gene_sequence == generate_default_sequence()
        assert result.message == "Harvested White Oval Plant for 10 coins and 1 seeds!"

    def test_grown_plant_harvests(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        for _ in range(10):
            plant.update(100)
        result = plant.harvest()
        assert result.success is True
        assert result.rewards.coins == 10

    def test_no_seed(self, scripted_rng):
        plant = make_ready(Plant(rng=scripted_rng(0.9)))
        assert plant.harvest().rewards.seeds == 0

    def test_seeds_are_zero_or_one(self, seeded_rng):
        plant = make_ready(Plant(CARROT, rng=seeded_rng))
        seeds = {plant.harvest().rewards.seeds for _ in range(50)}
        assert seeds <= {0, 1}

    def test_coins_follow_effective_multiplier(self, seeded_rng):
        plant = make_ready(Plant(CARROT, rng=seeded_rng))
        multiplier = plant.phenotype["YD"]["effectiveCoinMultiplier"]
        assert plant.harvest().rewards.coins == round(10 * multiplier) == 11

    def test_harvest_does_not_reset(self, seeded_rng):
        plant = make_ready(Plant(rng=seeded_rng))
        plant.harvest()
        assert plant.ready is True
        assert plant.progress == 100

    def test_to_dict(self, scripted_rng):
        data = make_ready(Plant(rng=scripted_rng(0.0))).harvest().to_dict()
        assert data["rewards"]["coins"] == 10
        assert Plant(rng=scripted_rng()).harvest().to_dict() == {
            "success": False,
            "message": "Plant not ready for harvest",
        }


class TestInfo:
    def test_default_info(self, seeded_rng):
        info = Plant(rng=seeded_rng).get_info()
        assert info.name == "White Oval Plant"
        assert info.flower_color == "#FFFFFF"
        assert info.leaf_shape == "oval"
        assert info.size == 3
        assert info.growth_days == 10
        assert info.water_needs == 20
        assert info.resistance == 80
        assert info.sell_price == 10
        assert info.emoji == "\U0001F33C"
        assert info.growth == 0
        assert info.is_ready is False

    def test_carrot_info(self, seeded_rng):
        info = Plant(CARROT, rng=seeded_rng).get_info()
        assert info.name == "Orange Pointed Plant"
        assert info.growth_days == 5
        assert info.water_needs == 18
        assert info.resistance == 75
        assert info.sell_price == 11
        assert info.emoji == "\U0001F33A"

    def test_tomato_info(self, seeded_rng):
        info = Plant(TOMATO, rng=seeded_rng).get_info()
        assert info.name == "Red Oval Plant"
        assert info.resistance == 95
        assert info.sell_price == 8

    def test_info_has_no_side_effects(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        plant.update()
        assert plant.get_info() == plant.get_info()
        assert plant.get_info().growth == pytest.approx(10.0)

    def test_emoji_falls_back_to_seedling(self, seeded_rng):
        plant = Plant(rng=seeded_rng)
        del plant.phenotype["FC"]
        assert plant.get_emoji() == "\U0001F331"
        assert plant.get_info().name == "Unknown Oval Plant"
