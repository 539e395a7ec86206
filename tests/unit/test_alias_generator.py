"""Unit tests for derived-table alias generation."""

import threading

from sqlfluent.query_builder.aliases import (
    AliasGenerator,
    _reset_default_alias_generator,
    get_default_alias_generator,
)
from sqlfluent.settings import _reload_settings


class TestAliasGenerator:
    """Test the alias counter."""

    def test_sequence_starts_at_one(self):
        generator = AliasGenerator()
        assert [generator.next_alias() for _ in range(3)] == ["t_1", "t_2", "t_3"]

    def test_custom_prefix_and_start(self):
        generator = AliasGenerator(prefix="dt", start=10)
        assert generator.next_alias() == "dt10"
        assert generator.next_alias() == "dt11"

    def test_generators_are_independent(self):
        first = AliasGenerator()
        second = AliasGenerator()

        first.next_alias()
        first.next_alias()

        assert second.next_alias() == "t_1"

    def test_concurrent_callers_get_unique_aliases(self):
        """Test that no alias is handed out twice across threads."""
        generator = AliasGenerator()
        results = []
        results_lock = threading.Lock()

        def worker():
            local = [generator.next_alias() for _ in range(500)]
            with results_lock:
                results.extend(local)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 4000
        assert len(set(results)) == 4000


class TestDefaultAliasGenerator:
    """Test the process-wide generator."""

    def test_default_is_a_singleton(self):
        assert get_default_alias_generator() is get_default_alias_generator()

    def test_reset_creates_a_fresh_generator(self):
        first = get_default_alias_generator()
        first.next_alias()

        _reset_default_alias_generator()
        second = get_default_alias_generator()

        assert second is not first
        assert second.next_alias() == "t_1"

    def test_prefix_is_read_from_settings(self, monkeypatch):
        monkeypatch.setenv("SQLFLUENT_ALIAS_PREFIX", "derived_")
        _reload_settings()
        _reset_default_alias_generator()

        assert get_default_alias_generator().next_alias() == "derived_1"
