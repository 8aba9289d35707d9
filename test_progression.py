import pytest

from progression import ProgressionTable, Tier


def test_scenario_thresholds(scenario_table):
    assert scenario_table.lookup(0).image_id == 'imgA'
    assert scenario_table.lookup(4).image_id == 'imgA'
    assert scenario_table.lookup(5).image_id == 'imgB'
    assert scenario_table.lookup(19).image_id == 'imgB'
    assert scenario_table.lookup(20).image_id == 'imgC'
    assert scenario_table.lookup(10_000).image_id == 'imgC'


def test_lookup_returns_highest_qualifying_threshold():
    table = ProgressionTable.from_config()
    for units in range(0, 700):
        tier = table.lookup(units)
        expected = max(t.threshold for t in table.tiers if t.threshold <= units)
        assert tier.threshold == expected


def test_lookup_is_idempotent(scenario_table):
    for units in (0, 6, 21):
        assert scenario_table.lookup(units) is scenario_table.lookup(units)


def test_first_tier(scenario_table):
    assert scenario_table.first.threshold == 0
    assert scenario_table.lookup(0) is scenario_table.first


def test_default_table_from_config():
    table = ProgressionTable.from_config()
    assert len(table) == 7
    assert table.first == Tier('fish1', 5, 0)
    assert table.lookup(500).image_id == 'kit'


@pytest.mark.parametrize("tiers", [
    [],
    [Tier('a', 5, 1)],
    [Tier('a', 5, 0), Tier('b', 10, 20), Tier('c', 15, 5)],
    [Tier('a', 0, 0)],
    [Tier('a', 5, 0), Tier('b', 10, -1)],
])
def test_invalid_tables_are_rejected(tiers):
    with pytest.raises(ValueError):
        ProgressionTable(tiers)
