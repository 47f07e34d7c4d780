"""Behavioural properties of the engine over many generated configurations."""

import random

import pytest

from conftest import DL380, R750, UNKNOWN_DIMM, make_config, make_engine

from chassisconf.model.parts import PartCategory

CATEGORIES = list(PartCategory)


def _random_configs(chassis_id, count, seed=1234, max_per_category=4):
    """Generate configurations from a chassis's accepted parts plus a stray id."""
    engine = make_engine()
    rng = random.Random(seed)
    pools = {c: engine.available_parts(chassis_id, c) for c in CATEGORIES}
    pools[PartCategory.MEMORY].append(UNKNOWN_DIMM)
    configs = []
    for _ in range(count):
        configs.append(make_config(
            processors=rng.choices(pools[PartCategory.PROCESSOR], k=rng.randint(0, max_per_category)),
            memory=rng.choices(pools[PartCategory.MEMORY], k=rng.randint(0, max_per_category)),
            accelerators=rng.choices(pools[PartCategory.ACCELERATOR], k=rng.randint(0, max_per_category)),
        ))
    return configs


@pytest.mark.parametrize("chassis_id", [R750, DL380])
class TestEngineProperties:
    def test_precheck_agrees_with_validate(self, chassis_id):
        """A valid configuration plus an accepted part stays valid."""
        engine = make_engine()
        checked = 0
        for config in _random_configs(chassis_id, 200):
            if not engine.validate(chassis_id, config).ok:
                continue
            for category in CATEGORIES:
                for part_id in engine.available_parts(chassis_id, category):
                    if engine.precheck(chassis_id, config, part_id, category).accepted:
                        grown = config.with_part(part_id, category)
                        assert engine.validate(chassis_id, grown).ok
                        checked += 1
        assert checked > 0

    def test_rejection_means_validate_fails(self, chassis_id):
        """A rejected candidate always leaves the grown configuration invalid."""
        engine = make_engine()
        for config in _random_configs(chassis_id, 100, seed=99):
            if not engine.validate(chassis_id, config).ok:
                continue
            for category in CATEGORIES:
                for part_id in engine.available_parts(chassis_id, category):
                    result = engine.precheck(chassis_id, config, part_id, category)
                    if not result.accepted:
                        grown = config.with_part(part_id, category)
                        assert result.violation in engine.validate(chassis_id, grown).violations

    def test_validation_idempotent(self, chassis_id):
        engine = make_engine()
        for config in _random_configs(chassis_id, 50):
            assert engine.validate(chassis_id, config) == engine.validate(chassis_id, config)

    def test_order_independent(self, chassis_id):
        engine = make_engine()
        rng = random.Random(7)
        for config in _random_configs(chassis_id, 50):
            shuffled = config.model_copy(deep=True)
            for category in CATEGORIES:
                rng.shuffle(shuffled.parts(category))
            assert engine.validate(chassis_id, shuffled) == engine.validate(chassis_id, config)
            assert (
                engine.summarize(chassis_id, shuffled).total_power_draw
                == engine.summarize(chassis_id, config).total_power_draw
            )

    def test_removal_never_adds_violations(self, chassis_id):
        engine = make_engine()
        for config in _random_configs(chassis_id, 100, max_per_category=5):
            before = {v.kind: v.excess for v in engine.validate(chassis_id, config).violations}
            for category in CATEGORIES:
                for index in range(len(config.parts(category))):
                    smaller = config.model_copy(deep=True)
                    smaller.remove(category, index)
                    after = engine.validate(chassis_id, smaller).violations
                    for violation in after:
                        assert violation.kind in before
                        assert violation.excess <= before[violation.kind]
