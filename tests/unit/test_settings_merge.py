# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for settings.json merging."""

from airules.pipeline.settings import merge_settings


class TestMergeSettings:
    def test_permissions_union_keeps_existing_first(self):
        existing = {"permissions": {"allow": ["Bash(ls)", "Read(*)"], "deny": []}}
        incoming = {"permissions": {"allow": ["Read(*)", "Bash(npm test)"], "deny": ["Read(.env)"]}}

        merged = merge_settings(existing, incoming)

        assert merged["permissions"]["allow"] == ["Bash(ls)", "Read(*)", "Bash(npm test)"]
        assert merged["permissions"]["deny"] == ["Read(.env)"]

    def test_env_overlay_incoming_wins(self):
        existing = {"env": {"A": "1", "B": "2"}}
        incoming = {"env": {"B": "3", "C": "4"}}

        assert merge_settings(existing, incoming)["env"] == {"A": "1", "B": "3", "C": "4"}

    def test_other_keys_kept(self):
        existing = {"model": "opus", "permissions": {"ask": ["Bash(rm *)"]}}
        merged = merge_settings(existing, {"permissions": {"allow": ["Read(*)"]}})

        assert merged["model"] == "opus"
        assert merged["permissions"]["ask"] == ["Bash(rm *)"]
        assert merged["permissions"]["allow"] == ["Read(*)"]

    def test_empty_inputs(self):
        assert merge_settings({}, {}) == {"permissions": {"allow": [], "deny": []}}

    def test_inputs_not_mutated(self):
        existing = {"permissions": {"allow": ["a"]}, "env": {"A": "1"}}
        incoming = {"permissions": {"allow": ["b"]}, "env": {"B": "2"}}

        merge_settings(existing, incoming)

        assert existing == {"permissions": {"allow": ["a"]}, "env": {"A": "1"}}
        assert incoming == {"permissions": {"allow": ["b"]}, "env": {"B": "2"}}
