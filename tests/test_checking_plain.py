"""Tests for plain-file mode."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from localecheck.checking import check_plain, plain_source
from localecheck.enums import Dialect, EventKind
from localecheck.resources import PropertiesResourceLoader

WriteResources = Callable[[dict[str, str]], Path]


class TestPlainSource:
    """Test source construction from the base resource."""

    def test_identifiers_from_base_keys(self, write_resources: WriteResources) -> None:
        root = write_resources({"i18n/Messages.properties": "b = B\na = A"})
        source = plain_source(
            PropertiesResourceLoader(root), "i18n/Messages", ["de"], dialect=Dialect.PRINTF
        )
        assert source.name == "i18n/Messages"
        assert [i.id for i in source.identifiers] == ["b", "a"]
        assert all(i.declared_dialect is Dialect.PRINTF for i in source.identifiers)
        assert [r.locale for r in source.resources] == ["", "de"]


class TestCheckPlain:
    """Test plain-mode checking."""

    def test_mismatch_and_missing(self, write_resources: WriteResources) -> None:
        root = write_resources(
            {
                "i18n/Messages.properties": "greet = Hello %s\ncount = %d files",
                "i18n/Messages_de.properties": "greet = Hallo %d\nextra = x",
            }
        )
        report = check_plain(
            PropertiesResourceLoader(root), "i18n/Messages", ["de"], dialect=Dialect.PRINTF
        )
        assert [(e.kind, e.key) for e in report.events] == [
            (EventKind.FORMAT_MISMATCH, "greet"),
            (EventKind.MISSING_KEY, "count"),
            (EventKind.UNUSED_KEY, "extra"),
        ]

    def test_directory_mode_with_base_locale(self, write_resources: WriteResources) -> None:
        root = write_resources(
            {
                "msgs/en.properties": "n = {0} items",
                "msgs/fr.properties": "n = {0} articles",
            }
        )
        report = check_plain(
            PropertiesResourceLoader(root),
            "msgs/",
            ["fr"],
            base_locale="en",
            dialect=Dialect.MESSAGE,
        )
        assert report.passed
        assert [o.resource_name for o in report.outcomes] == [
            "msgs/en.properties",
            "msgs/fr.properties",
        ]

    def test_missing_base(self, tmp_path: Path) -> None:
        """Missing base resource stops the check with one error."""
        report = check_plain(PropertiesResourceLoader(tmp_path), "Messages", ["de"])
        (missing,) = report.events
        assert missing.kind is EventKind.MISSING_LOCALE_FILE
        assert missing.key == "Messages.properties"

    def test_empty_base(self, write_resources: WriteResources) -> None:
        """Base resource without keys reports NO_MESSAGES."""
        root = write_resources({"Messages.properties": "# nothing here\n"})
        report = check_plain(PropertiesResourceLoader(root), "Messages", ["de"])
        (empty,) = report.events
        assert empty.kind is EventKind.NO_MESSAGES
        assert empty.describe() == "No base messages found in Messages.properties"
        assert not report.passed

    def test_presence_only_without_dialect(self, write_resources: WriteResources) -> None:
        """Without a dialect, values are never parsed."""
        root = write_resources(
            {"Messages.properties": "a = 100%", "Messages_de.properties": "a = {oops"}
        )
        report = check_plain(PropertiesResourceLoader(root), "Messages", ["de"])
        assert report.passed
