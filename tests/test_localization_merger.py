"""Tests for stringbank.localization.merger.

Covers the translation line format, dump/reconcile/apply, and loading
translation files through a table cache.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from stringbank.localization import (
    AttributeAccessor,
    MappingAccessor,
    apply,
    dump,
    format_line,
    get_localization,
    load_and_apply,
    property_names,
    reconcile,
    set_localization,
    split_line,
)
from stringbank.resources import MemoryResourceStore, ResourceLocator
from stringbank.tables import StringTableCache

property_name_text = st.text(
    alphabet=st.characters(categories=["Lu", "Ll", "Nd"], include_characters="_"),
    min_size=1,
    max_size=12,
)
value_text = st.text(alphabet=st.characters(exclude_categories=["Cs"]), max_size=20)


class TestLineFormat:
    """Test format_line / split_line / property_names."""

    def test_format_line(self) -> None:
        """Lines are name, separator, value."""
        assert format_line("Title", "Legality") == "Title = Legality"

    def test_split_line(self) -> None:
        """The first separator splits name from value."""
        assert split_line("Title = Legality") == ("Title", "Legality")

    def test_value_may_contain_separator(self) -> None:
        """Only the first occurrence splits."""
        assert split_line("Eq = a = b") == ("Eq", "a = b")

    def test_empty_value(self) -> None:
        """A separator at the end yields an empty value."""
        assert split_line("Title = ") == ("Title", "")

    @pytest.mark.parametrize("line", ["", "Title", "Title=Legality", "Title =Legality"])
    def test_no_separator(self, line: str) -> None:
        """Lines without ' = ' are malformed."""
        assert split_line(line) is None

    def test_property_names_positional(self) -> None:
        """Malformed lines map to None in place."""
        assert property_names(["A = 1", "junk", "B = 2"]) == ["A", None, "B"]


class TestDump:
    """Test dump."""

    def test_dump_in_declaration_order(self) -> None:
        """One line per property, in order."""
        accessor = MappingAccessor({"B": "2", "A": "1"}, "Strings")
        assert dump(accessor) == ["B = 2", "A = 1"]

    def test_dump_empty(self) -> None:
        """No properties, no lines."""
        assert dump(MappingAccessor({}, "Strings")) == []


class TestReconcile:
    """Test reconcile."""

    def test_saved_override_kept(self) -> None:
        """A saved translation replaces the current line of the same property."""
        assert reconcile(["A = 1", "B = 2"], ["A = 99"]) == ["A = 99", "B = 2"]

    def test_no_saved_data(self) -> None:
        """Without saved lines the current lines are returned."""
        current = ["A = 1", "B = 2"]
        result = reconcile(current, None)
        assert result == current
        assert result is not current

    def test_empty_saved_data(self) -> None:
        """An empty saved set keeps every current line."""
        assert reconcile(["A = 1"], []) == ["A = 1"]

    def test_retired_properties_dropped(self) -> None:
        """Saved lines for properties that no longer exist are not carried over."""
        assert reconcile(["A = 1"], ["Old = x", "A = uno"]) == ["A = uno"]

    def test_current_order_wins(self) -> None:
        """Output follows current order, not saved order."""
        assert reconcile(["A = 1", "B = 2"], ["B = deux", "A = un"]) == ["A = un", "B = deux"]

    def test_first_duplicate_wins(self) -> None:
        """If the saved set repeats a property, the first occurrence is used."""
        assert reconcile(["A = 1"], ["A = first", "A = second"]) == ["A = first"]

    def test_malformed_saved_lines_ignored(self) -> None:
        """Saved lines without separator never match."""
        assert reconcile(["A = 1"], ["A", "A=2"]) == ["A = 1"]

    def test_malformed_current_line_kept(self) -> None:
        """A current line without separator is kept as-is."""
        assert reconcile(["junk", "A = 1"], ["junk = x"]) == ["junk", "A = 1"]

    def test_saved_value_kept_verbatim(self) -> None:
        """The saved line's full text is kept, including separators in the value."""
        assert reconcile(["Eq = a"], ["Eq = b = c"]) == ["Eq = b = c"]

    @given(
        st.lists(st.tuples(property_name_text, value_text), max_size=15, unique_by=lambda p: p[0]),
        st.lists(st.tuples(property_name_text, value_text), max_size=15),
    )
    def test_shape_and_origin(
        self,
        current: list[tuple[str, str]],
        saved: list[tuple[str, str]],
    ) -> None:
        """Same length and names as current; each line comes from saved when possible."""
        current_lines = [format_line(n, v) for n, v in current]
        saved_lines = [format_line(n, v) for n, v in saved]
        saved_names = {n for n, _ in saved}
        event(f"overlap={len(saved_names & {n for n, _ in current})}")

        result = reconcile(current_lines, saved_lines)

        assert len(result) == len(current_lines)
        assert property_names(result) == [n for n, _ in current]
        for (name, _), line, current_line in zip(current, result, current_lines, strict=True):
            if name in saved_names:
                first = next(s for s, (n, _) in zip(saved_lines, saved, strict=True) if n == name)
                assert line == first
            else:
                assert line == current_line


class TestGetLocalization:
    """Test get_localization."""

    def test_first_run_is_dump(self) -> None:
        """Without saved lines the dump is returned."""
        accessor = MappingAccessor({"A": "1", "B": "2"}, "Strings")
        assert get_localization(accessor) == ["A = 1", "B = 2"]

    def test_reconciles_with_saved(self) -> None:
        """Saved translations are merged into the dump."""
        accessor = MappingAccessor({"A": "1", "B": "2", "C": "3"}, "Strings")
        saved = ["B = deux", "Gone = x"]
        assert get_localization(accessor, saved) == ["A = 1", "B = deux", "C = 3"]


class TestApply:
    """Test apply."""

    def test_sets_values(self) -> None:
        """Well-formed lines set their properties."""
        strings = {"A": "1", "B": "2"}
        applied = apply(MappingAccessor(strings, "Strings"), ["A = un", "B = deux"])
        assert applied == 2
        assert strings == {"A": "un", "B": "deux"}

    def test_none_lines_is_noop(self) -> None:
        """None means nothing to apply."""
        strings = {"A": "1"}
        assert apply(MappingAccessor(strings, "Strings"), None) == 0
        assert strings == {"A": "1"}

    def test_skips_malformed_and_none_entries(self) -> None:
        """Lines without separator and None entries are skipped silently."""
        strings = {"A": "1", "B": "2"}
        applied = apply(MappingAccessor(strings, "Strings"), ["junk", None, "", "B = deux"])
        assert applied == 1
        assert strings == {"A": "1", "B": "deux"}

    def test_unknown_property_logged_and_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        """An unknown property is a warning, not an abort."""
        strings = {"A": "1", "B": "2"}
        with caplog.at_level(logging.WARNING, logger="stringbank.localization.merger"):
            applied = apply(MappingAccessor(strings, "Strings"), ["Gone = x", "A = un", "B = deux"])
        assert applied == 2
        assert strings == {"A": "un", "B": "deux"}
        assert "Property not present: Gone" in caplog.text

    def test_long_values_truncated_in_log(self, caplog: pytest.LogCaptureFixture) -> None:
        """Logged values are bounded."""
        with caplog.at_level(logging.WARNING, logger="stringbank.localization.merger"):
            apply(MappingAccessor({}, "Strings"), ["Gone = " + "x" * 500])
        assert "x" * 100 + "..." in caplog.text
        assert "x" * 101 not in caplog.text

    def test_value_containing_separator(self) -> None:
        """Values keep everything after the first separator."""
        strings = {"Eq": ""}
        apply(MappingAccessor(strings, "Strings"), ["Eq = a = b"])
        assert strings == {"Eq": "a = b"}

    @given(
        st.dictionaries(property_name_text, value_text, max_size=15),
        st.dictionaries(property_name_text, value_text, max_size=15),
    )
    def test_dump_then_apply_round_trip(
        self,
        original: dict[str, str],
        scrambled: dict[str, str],
    ) -> None:
        """Applying a dump restores the dumped values."""
        event(f"property_count={min(len(original), 10)}")
        lines = dump(MappingAccessor(dict(original), "Strings"))
        target = {name: scrambled.get(name, "") for name in original}
        applied = apply(MappingAccessor(target, "Strings"), lines)
        assert applied == len(original)
        assert target == original


class TestAttributeRoundTrip:
    """Test dump then apply through AttributeAccessor."""

    def test_class_round_trip(self) -> None:
        """Every dumped line of a class applies back."""

        class LegalityStrings:
            Title = "Legality"
            Valid = "Valid."

            @property
            def computed(self) -> str:
                return "computed"

        accessor = AttributeAccessor(LegalityStrings)
        lines = dump(accessor)
        assert lines == ["Title = Legality", "Valid = Valid."]
        LegalityStrings.Title = "changed"
        assert apply(accessor, lines) == len(lines)
        assert LegalityStrings.Title == "Legality"

    def test_instance_with_property_round_trip(self, caplog: pytest.LogCaptureFixture) -> None:
        """Read-only properties are not dumped, so applying the dump warns about nothing."""

        class StatusStrings:
            Title = "Legality"

            @property
            def computed(self) -> str:
                return self.Title.upper()

        accessor = AttributeAccessor(StatusStrings())
        lines = dump(accessor)
        with caplog.at_level(logging.WARNING, logger="stringbank.localization.merger"):
            applied = apply(accessor, lines)
        assert lines == ["Title = Legality"]
        assert applied == len(lines)
        assert "Property not present" not in caplog.text


class TestLoadAndApply:
    """Test loading translation files through a table cache."""

    @pytest.fixture
    def cache(self) -> StringTableCache:
        """Cache over a store with two translation files."""
        store = MemoryResourceStore({
            "ns.text.legality_fr.txt": "Title = Légalité\r\nGone = x\r\nValid = Valide",
            "ns.text.Strings_de.txt": "Title = Legalität",
        })
        return StringTableCache(ResourceLocator(store, "ns"))

    def test_load_and_apply(self, cache: StringTableCache) -> None:
        """{prefix}_{locale} is read and applied; CRLF is normalized."""
        strings = {"Title": "Legality", "Valid": "Valid"}
        applied = load_and_apply(MappingAccessor(strings, "Strings"), cache, "legality", "fr")
        assert applied == 2
        assert strings == {"Title": "Légalité", "Valid": "Valide"}

    def test_missing_file_is_noop(
        self, cache: StringTableCache, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A missing translation file leaves values unchanged and logs a warning."""
        strings = {"Title": "Legality"}
        with caplog.at_level(logging.WARNING, logger="stringbank.localization.merger"):
            applied = load_and_apply(MappingAccessor(strings, "Strings"), cache, "legality", "ko")
        assert applied == 0
        assert strings == {"Title": "Legality"}
        assert "legality_ko" in caplog.text

    def test_set_localization_uses_type_name(self, cache: StringTableCache) -> None:
        """set_localization reads {type_name}_{locale}."""
        strings = {"Title": "Legality"}
        assert set_localization(MappingAccessor(strings, "Strings"), cache, "de") == 1
        assert strings == {"Title": "Legalität"}
