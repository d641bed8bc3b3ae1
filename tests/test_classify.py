"""
Tests for import path classification.
"""

from pathlib import Path

import pytest

import gogroup.classifier as classifier_mod
from gogroup.classifier import CANONICAL_ORDER, Category, GorootStdlibLookup, ImportClassifier, classify
from gogroup.config import Settings


class StubLookup:
    """Stdlib lookup answering from a fixed set of packages."""

    def __init__(self, packages):
        self.packages = set(packages)
        self.calls = []

    def is_builtin(self, path: str) -> bool:
        self.calls.append(path)
        return path in self.packages


class TestCategoryOrder:

    def test_canonical_order_is_fixed(self):
        assert CANONICAL_ORDER == (
            Category.BUILTIN,
            Category.THIRD_PARTY,
            Category.INTERNAL_PRIVATE,
            Category.OWN_MODULE,
        )


class TestImportClassifier:
    """Decision order: internal-private, own module, builtin, third party."""

    def test_builtin(self, settings, lookup):
        classifier = ImportClassifier(settings, lookup)
        assert classifier.classify("fmt") == Category.BUILTIN
        assert classifier.classify("net/http") == Category.BUILTIN

    def test_third_party_default(self, settings, lookup):
        classifier = ImportClassifier(settings, lookup)
        assert classifier.classify("github.com/pkg/errors") == Category.THIRD_PARTY
        assert classifier.classify("golang.org/x/sync/errgroup") == Category.THIRD_PARTY

    def test_internal_private_substring(self, settings, lookup):
        classifier = ImportClassifier(settings, lookup)
        assert classifier.classify("git.corp.internal/platform/auth") == Category.INTERNAL_PRIVATE
        assert classifier.classify("mirror/git.corp.internal/x") == Category.INTERNAL_PRIVATE

    def test_own_module_prefix(self, settings, lookup):
        classifier = ImportClassifier(settings, lookup)
        assert classifier.classify("example.com/acme/app/internal/store") == Category.OWN_MODULE

    def test_internal_private_wins_over_own_module(self, lookup):
        """A path matching both the domain and the prefix is internal-private."""
        settings = Settings(self_module="git.corp.internal/me", internal_private_domains=("git.corp.internal",))
        classifier = ImportClassifier(settings, lookup)
        assert classifier.classify("git.corp.internal/me/pkg") == Category.INTERNAL_PRIVATE

    def test_own_module_wins_over_builtin(self):
        lookup = StubLookup({"app/util"})
        classifier = ImportClassifier(Settings(self_module="app"), lookup)
        assert classifier.classify("app/util") == Category.OWN_MODULE
        assert lookup.calls == []

    def test_empty_prefix_never_matches(self):
        classifier = ImportClassifier(Settings(self_module=""), StubLookup(()))
        assert classifier.classify("example.com/acme/app") == Category.THIRD_PARTY
        assert classifier.classify("") == Category.THIRD_PARTY

    def test_cheap_rules_skip_lookup(self, settings):
        """String rules decide before the stdlib lookup is consulted."""
        lookup = StubLookup(())
        classifier = ImportClassifier(settings, lookup)
        classifier.classify("git.corp.internal/x")
        classifier.classify("example.com/acme/app/x")
        assert lookup.calls == []
        classifier.classify("github.com/x/y")
        assert lookup.calls == ["github.com/x/y"]

    @pytest.mark.parametrize("path", [
        "",
        "fmt",
        "C",
        "../relative",
        "ünïcødé/pkg",
        "a" * 500,
        "with\x00nul",
        "/abs/path",
    ])
    def test_total(self, settings, lookup, path):
        """Every string maps to exactly one category, never an error."""
        assert classify(path, settings, lookup) in set(Category)

    def test_deterministic(self, settings, lookup):
        paths = ["fmt", "github.com/a/b", "git.corp.internal/c", "example.com/acme/app/d"]
        classifier = ImportClassifier(settings, lookup)
        first = [classifier.classify(p) for p in paths]
        second = [classify(p, settings, lookup) for p in paths]
        assert first == second


class TestGorootStdlibLookup:

    def test_existing_package(self, goroot: Path):
        lookup = GorootStdlibLookup(goroot)
        assert lookup.is_builtin("encoding/json")
        assert not lookup.is_builtin("github.com/pkg/errors")

    def test_goroot_from_environment(self, goroot: Path, monkeypatch):
        monkeypatch.setenv("GOROOT", str(goroot))
        lookup = GorootStdlibLookup()
        assert lookup.goroot == goroot
        assert lookup.is_builtin("strings")

    def test_goroot_from_go_env(self, goroot: Path, monkeypatch):
        monkeypatch.delenv("GOROOT", raising=False)
        monkeypatch.setattr(classifier_mod, "_go_env_goroot", lambda: str(goroot))
        assert GorootStdlibLookup().is_builtin("context")

    def test_missing_toolchain_degrades_to_third_party(self, settings, monkeypatch):
        """Without a Go root the lookup answers False instead of failing."""
        monkeypatch.delenv("GOROOT", raising=False)

        def no_go(*args, **kwargs):
            raise FileNotFoundError("go")

        monkeypatch.setattr(classifier_mod.subprocess, "check_output", no_go)
        lookup = GorootStdlibLookup()
        assert lookup.goroot is None
        assert not lookup.is_builtin("fmt")
        assert classify("fmt", settings, lookup) == Category.THIRD_PARTY

    def test_goroot_resolved_once(self, goroot: Path, monkeypatch):
        calls = []

        def fake_go_env():
            calls.append(1)
            return str(goroot)

        monkeypatch.delenv("GOROOT", raising=False)
        monkeypatch.setattr(classifier_mod, "_go_env_goroot", fake_go_env)
        lookup = GorootStdlibLookup()
        lookup.is_builtin("fmt")
        lookup.is_builtin("os")
        assert calls == [1]

    def test_hung_toolchain_times_out(self, monkeypatch):
        """A `go env` call that never returns is cut off and treated as missing."""
        seen = {}

        def hung(cmd, **kwargs):
            seen.update(kwargs)
            raise classifier_mod.subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(classifier_mod.subprocess, "check_output", hung)
        assert classifier_mod._go_env_goroot() is None
        assert seen["timeout"] == classifier_mod.GO_ENV_TIMEOUT

    def test_nonexistent_goroot(self, tmp_path: Path):
        lookup = GorootStdlibLookup(tmp_path / "nowhere")
        assert not lookup.is_builtin("fmt")


class TestDefaultLookup:

    @pytest.fixture(autouse=True)
    def fresh_default(self):
        classifier_mod.default_lookup.cache_clear()
        yield
        classifier_mod.default_lookup.cache_clear()

    def test_shared_across_classifiers(self, settings):
        first = ImportClassifier(settings)
        second = ImportClassifier(settings)
        assert first.lookup is second.lookup
        assert first.lookup is classifier_mod.default_lookup()

    def test_go_env_queried_once_for_many_files(self, goroot: Path, settings, monkeypatch):
        """Checking several files without an injected lookup resolves GOROOT once."""
        calls = []

        def fake_go_env():
            calls.append(1)
            return str(goroot)

        monkeypatch.delenv("GOROOT", raising=False)
        monkeypatch.setattr(classifier_mod, "_go_env_goroot", fake_go_env)
        for _ in range(3):
            assert classify("fmt", settings) == Category.BUILTIN
        assert calls == [1]

    def test_injected_lookup_bypasses_default(self, settings):
        stub = StubLookup(["fmt"])
        assert ImportClassifier(settings, stub).lookup is stub
