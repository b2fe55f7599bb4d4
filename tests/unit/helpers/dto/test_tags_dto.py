"""Unit tests for gigtags.helpers.dto.tags_dto module.

Tests the Tag value type, spans and TagCollection queries.
"""

import dataclasses
from datetime import date, datetime

import pytest

from gigtags.helpers.dto.tags_dto import Span, SpanKind, Tag, TagCollection
from gigtags.helpers.exceptions import InvalidTagError, NotATimestampError, NotAUrlError


class TestTag:
    """Tests for Tag dataclass."""

    @pytest.mark.unit
    def test_can_create_tag(self) -> None:
        """Should create a tag with facet and term."""
        tag = Tag(facet="energy", term="low")
        assert tag.facet == "energy"
        assert tag.term == "low"
        assert tag.has_term

    @pytest.mark.unit
    def test_term_defaults_to_none(self) -> None:
        """Term is optional."""
        tag = Tag(facet="vinyl")
        assert tag.term is None
        assert not tag.has_term

    @pytest.mark.unit
    def test_is_frozen(self) -> None:
        """Tags cannot be mutated."""
        tag = Tag(facet="energy", term="low")
        with pytest.raises(dataclasses.FrozenInstanceError):
            tag.term = "high"  # type: ignore[misc]

    @pytest.mark.unit
    @pytest.mark.parametrize("facet", ["", "two words", "a:b", "#a", "a%20"])
    def test_invalid_facet_rejected(self, facet: str) -> None:
        """Facets violating the grammar raise InvalidTagError."""
        with pytest.raises(InvalidTagError):
            Tag(facet=facet)

    @pytest.mark.unit
    def test_empty_term_rejected(self) -> None:
        """An empty term is not allowed; use None instead."""
        with pytest.raises(InvalidTagError):
            Tag(facet="mood", term="")

    @pytest.mark.unit
    def test_term_may_hold_any_text(self) -> None:
        """Decoded terms may contain reserved characters."""
        tag = Tag(facet="note", term="22:00 #live 100%")
        assert tag.term == "22:00 #live 100%"

    @pytest.mark.unit
    def test_invalid_tag_error_is_value_error(self) -> None:
        """InvalidTagError is a ValueError."""
        with pytest.raises(ValueError):
            Tag(facet="")

    @pytest.mark.unit
    def test_equality_is_case_sensitive(self) -> None:
        """Facet and term compare exactly."""
        assert Tag("mood", "dark") == Tag("mood", "dark")
        assert Tag("mood", "dark") != Tag("Mood", "dark")
        assert Tag("mood", "dark") != Tag("mood", "Dark")
        assert Tag("mood") != Tag("mood", "dark")

    @pytest.mark.unit
    def test_hashable(self) -> None:
        """Equal tags hash equally."""
        assert len({Tag("mood", "dark"), Tag("mood", "dark"), Tag("mood")}) == 2

    @pytest.mark.unit
    def test_ordering(self) -> None:
        """Tags sort by facet, then term-less first, then term."""
        tags = [Tag("b"), Tag("a", "z"), Tag("a", "b"), Tag("a")]
        assert sorted(tags) == [Tag("a"), Tag("a", "b"), Tag("a", "z"), Tag("b")]

    @pytest.mark.unit
    def test_str_is_canonical_form(self) -> None:
        """str() renders the canonical encoded form."""
        assert str(Tag("date", "2024-07-01T22:00:00")) == "#date:2024-07-01T22%3A00%3A00"
        assert Tag("vinyl").to_text() == "#vinyl"

    @pytest.mark.unit
    def test_encoded_term(self) -> None:
        """encoded_term() percent-encodes the term or returns None."""
        assert Tag("a", "x y").encoded_term() == "x%20y"
        assert Tag("a").encoded_term() is None


class TestTagTypedValues:
    """Tests for Tag.as_timestamp and Tag.as_url."""

    @pytest.mark.unit
    def test_as_timestamp(self) -> None:
        """A timestamp term is interpreted."""
        assert Tag("date", "2024-07-01T22:00:00").as_timestamp() == datetime(2024, 7, 1, 22)

    @pytest.mark.unit
    def test_as_timestamp_without_term(self) -> None:
        """A term-less tag is not a timestamp."""
        with pytest.raises(NotATimestampError):
            Tag("date").as_timestamp()

    @pytest.mark.unit
    def test_as_url(self) -> None:
        """A URL term is interpreted."""
        assert Tag("link", "https://example.com/x").as_url().host == "example.com"

    @pytest.mark.unit
    def test_as_url_invalid(self) -> None:
        """A non-URL term raises NotAUrlError."""
        with pytest.raises(NotAUrlError):
            Tag("link", "example").as_url()

    @pytest.mark.unit
    def test_typed_extraction_does_not_mutate(self) -> None:
        """Extraction leaves the tag unchanged."""
        tag = Tag("date", "2024-07-01")
        tag.as_timestamp()
        assert tag == Tag("date", "2024-07-01")


class TestTagDateSuffix:
    """Tests for Tag.with_date_suffix and Tag.date_suffix."""

    @pytest.mark.unit
    def test_with_date_suffix(self) -> None:
        """Builds a facet with a '~yyyyMMdd' suffix."""
        tag = Tag.with_date_suffix("played", date(2024, 7, 1), term="twice")
        assert tag == Tag("played~20240701", "twice")

    @pytest.mark.unit
    def test_date_suffix(self) -> None:
        """Splits the facet into prefix and date."""
        assert Tag("played~20240701").date_suffix() == ("played", date(2024, 7, 1))
        assert Tag("played").date_suffix() is None


class TestSpan:
    """Tests for Span dataclass."""

    @pytest.mark.unit
    def test_slice(self) -> None:
        """slice() returns the covered substring."""
        span = Span(SpanKind.TAG_CANDIDATE, 3, 8, separator=5)
        assert span.slice("ab #x:yz tail") == "#x:yz"
        assert span.is_candidate

    @pytest.mark.unit
    def test_text_span(self) -> None:
        """Text spans have no separator."""
        span = Span(SpanKind.TEXT, 0, 2)
        assert span.separator is None
        assert not span.is_candidate


class TestTagCollection:
    """Tests for TagCollection dataclass."""

    @pytest.fixture
    def collection(self) -> TagCollection:
        """Collection with repeated facets and residual text."""
        tags = (Tag("genre", "house"), Tag("mood", "dark"), Tag("genre", "techno"), Tag("vinyl"))
        segments = ("Opener ", tags[0], " ", tags[1], " ", tags[2], " ", tags[3], "!")
        return TagCollection(tags=tags, segments=segments)

    @pytest.mark.unit
    def test_empty_collection(self) -> None:
        """Default collection is empty."""
        collection = TagCollection()
        assert len(collection) == 0
        assert collection.tags_for("genre") == ()
        assert collection.text() == ""

    @pytest.mark.unit
    def test_len_and_iter(self, collection: TagCollection) -> None:
        """len() and iteration cover the tags."""
        assert len(collection) == 4
        assert list(collection) == list(collection.tags)

    @pytest.mark.unit
    def test_contains(self, collection: TagCollection) -> None:
        """Membership compares tags by value."""
        assert Tag("mood", "dark") in collection
        assert Tag("mood", "light") not in collection

    @pytest.mark.unit
    def test_tags_for_keeps_insertion_order(self, collection: TagCollection) -> None:
        """tags_for() returns tags with the facet in insertion order."""
        assert collection.tags_for("genre") == (Tag("genre", "house"), Tag("genre", "techno"))
        assert collection.tags_for("missing") == ()

    @pytest.mark.unit
    def test_first_and_has_facet(self, collection: TagCollection) -> None:
        """first() returns the earliest tag with the facet."""
        assert collection.first("genre") == Tag("genre", "house")
        assert collection.first("missing") is None
        assert collection.has_facet("vinyl")
        assert not collection.has_facet("missing")

    @pytest.mark.unit
    def test_facets(self, collection: TagCollection) -> None:
        """facets() lists distinct facets in first-occurrence order."""
        assert collection.facets() == ("genre", "mood", "vinyl")

    @pytest.mark.unit
    def test_text(self, collection: TagCollection) -> None:
        """text() joins the residual text segments."""
        assert collection.text_segments() == ("Opener ", " ", " ", " ", "!")
        assert collection.text() == "Opener    !"

    @pytest.mark.unit
    def test_serialize(self, collection: TagCollection) -> None:
        """serialize() and str() render the canonical form."""
        expected = "Opener #genre:house #mood:dark #genre:techno #vinyl!"
        assert collection.serialize() == expected
        assert str(collection) == expected
