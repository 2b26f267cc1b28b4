"""Tests for OneOrMany and fragment extraction."""

import pytest

from docembed.services.embedder.embeddable import Embeddable, extract_fragments
from docembed.services.embedder.errors import EmptyListError, ExtractionError
from docembed.utils.one_or_many import OneOrMany
from tests.conftest import Definition


class TestOneOrMany:
    def test_one(self) -> None:
        items = OneOrMany.one("a")
        assert len(items) == 1
        assert items.first() == "a"
        assert items.rest() == []

    def test_many_keeps_order(self) -> None:
        items = OneOrMany.many(["a", "b", "c"])
        assert list(items) == ["a", "b", "c"]
        assert items[1] == "b"

    def test_many_empty_raises(self) -> None:
        with pytest.raises(EmptyListError):
            OneOrMany.many([])

    def test_add_appends(self) -> None:
        items = OneOrMany.one(1)
        items.add(2)
        items.add(3)
        assert items.to_list() == [1, 2, 3]

    def test_equality(self) -> None:
        assert OneOrMany.many([1, 2]) == OneOrMany(1, [2])
        assert OneOrMany.one(1) != OneOrMany.many([1, 2])


class TestExtractFragments:
    def test_embeddable_protocol(self) -> None:
        definition = Definition("w", ["x", "y"])
        assert isinstance(definition, Embeddable)
        assert extract_fragments(definition).to_list() == ["x", "y"]

    def test_plain_string(self) -> None:
        assert extract_fragments("hello").to_list() == ["hello"]

    def test_extractor_returning_single_string(self) -> None:
        assert extract_fragments({"t": "abc"}, lambda d: d["t"]).to_list() == ["abc"]

    def test_non_embeddable_object(self) -> None:
        with pytest.raises(ExtractionError, match="not embeddable"):
            extract_fragments(42)

    def test_empty_fragments(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_fragments(Definition("w", []))
        assert isinstance(exc_info.value.cause, EmptyListError)

    def test_non_string_fragment(self) -> None:
        with pytest.raises(ExtractionError, match="must be str"):
            extract_fragments({"n": 1}, lambda d: [d["n"]])
