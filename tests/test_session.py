"""Tests for the interactive configurator session."""

import pytest

from conftest import (
    DL380,
    H100,
    MICRON_64,
    R750,
    SAMSUNG_32,
    XEON_4314,
    XEON_8380,
    make_engine,
)

from chassisconf.engine import NO_CHASSIS_SELECTED
from chassisconf.model.parts import PartCategory
from chassisconf.session import ConfiguratorSession

CPU = PartCategory.PROCESSOR
MEM = PartCategory.MEMORY
GPU = PartCategory.ACCELERATOR


def _session(chassis_id=R750, **settings):
    return ConfiguratorSession(make_engine(**settings), chassis_id)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

class TestSelection:
    def test_initial_state(self):
        session = ConfiguratorSession(make_engine())
        assert session.chassis_id is None
        assert session.chassis is None
        assert session.configuration.is_empty
        assert session.errors == []

    def test_select(self):
        session = _session()
        assert session.chassis.name == R750
        assert session.available_parts(GPU)[0] == H100

    def test_switch_resets(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.drop(MICRON_64, MEM)
        session.drop(MICRON_64, MEM)
        session.drop(MICRON_64, MEM)
        assert session.errors
        session.select_chassis(DL380)
        assert session.configuration.is_empty
        assert session.errors == []
        assert session.chassis.name == DL380

    def test_reselect_same_chassis_resets(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.select_chassis(R750)
        assert session.configuration.processors == []

    def test_deselect(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.select_chassis(None)
        assert session.chassis_id is None
        assert session.configuration.is_empty
        assert session.available_parts(CPU) == []

    def test_unknown_chassis(self):
        session = _session("Supermicro X12")
        assert session.chassis is None
        result = session.drop(XEON_8380, CPU)
        assert result.reason == NO_CHASSIS_SELECTED
        assert session.errors == [NO_CHASSIS_SELECTED]


# ---------------------------------------------------------------------------
# Drop
# ---------------------------------------------------------------------------

class TestDrop:
    def test_accepted_drop_commits(self):
        session = _session()
        assert session.drop(XEON_8380, CPU).accepted
        assert session.configuration.processors == [XEON_8380]
        assert session.is_complete

    def test_rejected_drop_blocks(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.drop(XEON_8380, CPU)
        result = session.drop(XEON_8380, CPU)
        assert not result.accepted
        assert session.configuration.processors == [XEON_8380, XEON_8380]
        assert session.errors == ["At most 2 processors can be installed."]
        assert not session.is_complete

    def test_accepted_drop_clears_previous_rejection(self):
        session = _session()
        for _ in range(3):
            session.drop(MICRON_64, MEM)
        assert session.errors == ["Memory is limited to 128GB."]
        assert session.drop(XEON_4314, CPU).accepted
        assert session.errors == []

    def test_no_chassis(self):
        session = ConfiguratorSession(make_engine())
        session.drop(SAMSUNG_32, MEM)
        assert session.configuration.is_empty
        assert session.errors == [NO_CHASSIS_SELECTED]

    def test_errors_is_a_copy(self):
        session = _session()
        session.errors.append("tampered")
        assert session.errors == []


# ---------------------------------------------------------------------------
# Remove
# ---------------------------------------------------------------------------

class TestRemove:
    def test_remove_revalidates(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.drop(XEON_8380, CPU)
        assert session.remove(CPU, 0) == XEON_8380
        assert session.errors == []
        assert len(session.configuration.processors) == 1

    def test_remove_clears_stale_rejection(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.drop(XEON_8380, CPU)
        session.drop(XEON_8380, CPU)
        assert session.errors
        session.remove(CPU, 1)
        assert session.errors == []

    def test_remove_reports_remaining_violations(self):
        """Parts installed around the engine are still caught on removal."""
        session = _session()
        for _ in range(4):
            session.configuration.add(XEON_8380, CPU)
        session.remove(CPU, 0)
        assert session.errors == ["At most 2 processors can be installed."]
        session.remove(CPU, 0)
        assert session.errors == []

    def test_remove_out_of_range(self):
        with pytest.raises(IndexError):
            _session().remove(GPU, 0)

    def test_revalidate(self):
        session = _session()
        for _ in range(3):
            session.configuration.add(H100, GPU)
        assert session.revalidate() == ["Power draw exceeds the maximum allowed 1400W."]


# ---------------------------------------------------------------------------
# Totals
# ---------------------------------------------------------------------------

class TestTotals:
    def test_totals(self):
        session = _session()
        session.drop(XEON_8380, CPU)
        session.drop(SAMSUNG_32, MEM)
        session.drop(H100, GPU)
        totals = session.totals()
        assert totals.total_power_draw == 270 + 5 + 700
        assert totals.total_memory_capacity == 32
        assert totals.max_accelerator_count == 3

    def test_strict_session(self):
        session = _session(check_compatibility=True)
        result = session.drop("Intel Xeon Gold 6248R", CPU)
        assert not result.accepted
        assert session.configuration.is_empty
