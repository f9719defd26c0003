"""Tests for configuration loading."""

import json

import pytest

from shift_roster.config import DAYS, RosterConfig, ShiftType, load_config


def test_defaults():
    cfg = load_config(None)

    assert cfg.days == DAYS
    assert cfg.shift_names == ["Opening", "Mid", "Closing"]
    assert cfg.shift_hours() == {"Opening": 8, "Mid": 6, "Closing": 8}
    assert cfg.overtime_buffer == 8
    assert cfg.default_hour_goal == 40
    assert cfg.unbounded_hour_goal == 999


def test_goal_helpers():
    cfg = RosterConfig()
    assert cfg.resolve_goal(None) == 40
    assert cfg.resolve_goal(12) == 12
    assert cfg.is_unbounded(999)
    assert not cfg.is_unbounded(40)
    assert not cfg.is_unbounded(None)


def test_load_yaml(tmp_path):
    path = tmp_path / "roster.yaml"
    path.write_text(
        """
days: [Monday, Tuesday]
shift_types:
  - name: Early
    time_range: "06:00-12:00"
  - name: Late
    time_range: "18:00-02:00"
  - name: Split
    hours: 4.5
overtime_buffer: 4
unbounded_hour_goal: 500
"""
    )

    cfg = load_config(path)

    assert cfg.days == ["Monday", "Tuesday"]
    assert cfg.shift_types == [
        ShiftType("Early", "06:00-12:00", 6),
        ShiftType("Late", "18:00-02:00", 8),
        ShiftType("Split", "", 4.5),
    ]
    assert cfg.overtime_buffer == 4
    assert cfg.unbounded_hour_goal == 500
    # untouched keys keep their defaults
    assert cfg.default_hour_goal == 40


def test_load_json(tmp_path):
    path = tmp_path / "roster.json"
    path.write_text(json.dumps({"default_hour_goal": 32, "role_flags": ["manager"]}))

    cfg = load_config(path)

    assert cfg.default_hour_goal == 32
    assert cfg.role_flags == ("manager",)
    assert cfg.shift_names == ["Opening", "Mid", "Closing"]


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == RosterConfig()


@pytest.mark.parametrize(
    "body",
    [
        "shift_types: Opening",
        "shift_types:\n  - hours: 8",
        "shift_types:\n  - name: Mystery",
        "shift_types:\n  - name: Opening\n    hours: lots",
        "days: Monday",
        "overtime_buffer:",
        "default_hour_goal: null",
        "unbounded_hour_goal: [999]",
        "overtime_buffer: plenty",
        "role_flags: manager",
        "- just\n- a list",
    ],
)
def test_malformed_config_raises(tmp_path, body):
    path = tmp_path / "bad.yaml"
    path.write_text(body)
    with pytest.raises(ValueError):
        load_config(path)


def test_unsupported_suffix(tmp_path):
    path = tmp_path / "roster.toml"
    path.write_text("days = []")
    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(path)


def test_sample_config_matches_defaults():
    from pathlib import Path

    sample = Path(__file__).resolve().parents[1] / "roster_config.yaml"
    cfg = load_config(sample)

    defaults = RosterConfig()
    assert cfg.shift_types == defaults.shift_types
    assert cfg.days == defaults.days
    assert cfg.overtime_buffer == defaults.overtime_buffer
