# tests/test_config_store.py
"""
Configuration Store Tests - load / update / reset / refresh / save
"""

from unittest.mock import MagicMock

import pytest

from neurazor.core.exceptions import ConfigKindMismatchException
from neurazor.models.enumerations import GameKind
from neurazor.scoring.config_store import ConfigurationStore
from neurazor.scoring.defaults import default_config
from neurazor.scoring.version_registry import VersionRegistry


KIND = GameKind.MENTAL_MATH


def tweaked(accuracy=0.5):
    config = default_config(KIND)
    config.weights.accuracy = accuracy
    return config


class TestLoad:

    def test_default_when_nothing_saved(self, store):
        assert store.load(KIND) == default_config(KIND)

    def test_without_registry(self):
        assert ConfigurationStore().load(KIND) == default_config(KIND)

    def test_active_version_used(self, registry):
        registry.save(KIND, tweaked(0.6))
        assert ConfigurationStore(registry).load(KIND).weights.accuracy == 0.6

    def test_returns_copy(self, store):
        config = store.load(KIND)
        config.weights.accuracy = 0.99
        assert store.load(KIND).weights.accuracy == 0.35

    def test_kind_given_as_string(self, store):
        assert store.load("stroop_test").game_kind == GameKind.STROOP_TEST


class TestUpdate:

    def test_replaces_current(self, store):
        store.update(KIND, tweaked(0.5))
        assert store.load(KIND).weights.accuracy == 0.5

    def test_last_writer_wins(self, store):
        store.update(KIND, tweaked(0.5))
        store.update(KIND, tweaked(0.7))
        assert store.load(KIND).weights.accuracy == 0.7

    def test_does_not_create_version(self, store, registry):
        store.update(KIND, tweaked(0.5))
        assert registry.list_versions(KIND) == []

    def test_kind_mismatch(self, store):
        with pytest.raises(ConfigKindMismatchException):
            store.update(KIND, default_config(GameKind.STROOP_TEST))
        assert store.load(KIND) == default_config(KIND)

    def test_other_kinds_untouched(self, store):
        store.update(KIND, tweaked(0.5))
        assert store.load(GameKind.STROOP_TEST) == default_config(GameKind.STROOP_TEST)


class TestReset:

    def test_restores_default(self, store):
        store.update(KIND, tweaked(0.5))
        assert store.reset(KIND) == default_config(KIND)

    def test_idempotent(self, store):
        first = store.reset(KIND)
        second = store.reset(KIND)
        assert first == second == default_config(KIND)

    def test_load_after_reset_ignores_saved_version(self, registry):
        registry.save(KIND, tweaked(0.6))
        store = ConfigurationStore(registry)
        store.reset(KIND)

        assert store.load(KIND) == default_config(KIND)
        assert registry.get_active(KIND).version_name == "V1"

    def test_refresh_rereads_active(self, registry):
        registry.save(KIND, tweaked(0.6))
        store = ConfigurationStore(registry)
        store.reset(KIND)

        assert store.refresh(KIND).weights.accuracy == 0.6


class TestSave:

    def test_saves_current_config(self, store, registry):
        store.update(KIND, tweaked(0.4))
        version = store.save(KIND, "more speed", "admin")

        assert version.version_name == "V1"
        assert registry.get_active_config(KIND).weights.accuracy == 0.4

    def test_requires_registry(self):
        with pytest.raises(RuntimeError):
            ConfigurationStore().save(KIND)

    def test_failed_save_keeps_current(self):
        persistence = MagicMock()
        persistence.list_versions.return_value = []
        persistence.save_version.side_effect = ConnectionError("storage down")
        store = ConfigurationStore(VersionRegistry(persistence))
        store.update(KIND, tweaked(0.4))

        with pytest.raises(ConnectionError):
            store.save(KIND)

        assert store.load(KIND).weights.accuracy == 0.4


class TestActiveVersionTracking:

    def test_rollback_rereads_config(self, store, registry):
        store.update(KIND, tweaked(0.35))
        store.save(KIND)
        store.update(KIND, tweaked(0.9))
        store.save(KIND)

        registry.set_active(KIND, "V1")

        assert store.load(KIND).weights.accuracy == 0.35
        assert store.loaded_from(KIND) == "V1"

    def test_direct_registry_save_picked_up(self, store, registry):
        store.update(KIND, tweaked(0.5))

        registry.save(KIND, tweaked(0.6))

        assert store.load(KIND).weights.accuracy == 0.6
        assert store.loaded_from(KIND) == "V1"

    def test_save_keeps_edits(self, store):
        store.update(KIND, tweaked(0.4))
        store.save(KIND)

        assert store.loaded_from(KIND) == "V1"
        assert store.load(KIND).weights.accuracy == 0.4

    def test_edits_kept_while_active_unchanged(self, store, registry):
        registry.save(KIND, tweaked(0.6))
        store.update(KIND, tweaked(0.7))

        assert store.load(KIND).weights.accuracy == 0.7
        assert store.loaded_from(KIND) == "V1"

    def test_defaults_have_no_source(self, store):
        assert store.loaded_from(KIND) is None


class TestWarnings:

    def test_defaults_have_no_warnings(self, store):
        assert store.warnings(KIND) == []

    def test_unnormalised_weights_reported(self, store):
        store.update(KIND, tweaked(0.5))
        warnings = store.warnings(KIND)
        assert len(warnings) == 1
        assert warnings[0].total == pytest.approx(1.15)
