import pytest

from varisat.config import SolverConfig, SolverConfigUpdate, config_help


def test_defaults_match_documentation():
    config = SolverConfig()
    assert config.vsids_decay == 0.95
    assert config.clause_activity_decay == 0.999
    assert config.reduce_locals_interval == 15000
    assert config.reduce_mids_interval == 10000
    assert config.luby_restart_interval_scale == 128


def test_empty_update_changes_nothing():
    config = SolverConfig()
    SolverConfigUpdate().apply(config)
    assert config == SolverConfig()


def test_apply_sets_given_values_only():
    config = SolverConfig()
    SolverConfigUpdate(vsids_decay=0.8, reduce_mids_interval=7).apply(config)
    assert config.vsids_decay == 0.8
    assert config.reduce_mids_interval == 7
    assert config.clause_activity_decay == SolverConfig().clause_activity_decay


@pytest.mark.parametrize(
    "kwargs",
    [
        {"vsids_decay": 1.0},
        {"vsids_decay": 0.4},
        {"clause_activity_decay": 1.5},
        {"reduce_locals_interval": 0},
        {"luby_restart_interval_scale": -3},
    ],
)
def test_out_of_range_values_are_rejected(kwargs):
    with pytest.raises(ValueError, match="must be in range"):
        SolverConfigUpdate(**kwargs).apply(SolverConfig())


def test_error_message_names_field_and_range():
    with pytest.raises(ValueError) as info:
        SolverConfigUpdate(vsids_decay=2.0).apply(SolverConfig())
    assert str(info.value) == "vsids_decay must be in range 0.5..1.0 but was set to 2.0"


def test_failed_apply_leaves_config_unchanged():
    config = SolverConfig()
    update = SolverConfigUpdate(vsids_decay=0.7, reduce_locals_interval=0)
    with pytest.raises(ValueError):
        update.apply(config)
    assert config == SolverConfig()


def test_integer_fields_reject_floats():
    with pytest.raises(TypeError):
        SolverConfigUpdate(reduce_mids_interval=2.5).apply(SolverConfig())


def test_merge_overwrites_with_set_values():
    base = SolverConfigUpdate(vsids_decay=0.6, reduce_locals_interval=5)
    base.merge(SolverConfigUpdate(vsids_decay=0.9, reduce_mids_interval=3))
    assert base == SolverConfigUpdate(
        vsids_decay=0.9, reduce_locals_interval=5, reduce_mids_interval=3
    )


def test_help_lists_every_option_with_docs():
    text = config_help()
    for name in (
        "vsids_decay",
        "clause_activity_decay",
        "reduce_locals_interval",
        "reduce_mids_interval",
        "luby_restart_interval_scale",
    ):
        assert f"{name}:\n" in text
    assert "    [default: 0.95]  [range: 0.5..1.0]\n" in text
    assert text.startswith(
        "vsids_decay:\n    Multiplicative decay for the VSIDS decision heuristic.\n\n"
    )