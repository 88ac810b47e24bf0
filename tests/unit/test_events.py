#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_events.py
"""Unit tests for the event stream data model."""

import dataclasses

import pytest

from mdstream import events
from mdstream.events import (
    EVENT_TYPES,
    TAG_TYPES,
    CodeBlock,
    End,
    Heading,
    Link,
    List,
    MathSpan,
    Paragraph,
    RawHtml,
    Start,
    TaskMarker,
    Text,
)


@pytest.mark.unit
class TestEventModel:
    """Tests for tags and events."""

    def test_tag_set_is_closed(self):
        """Test that the tag union lists every tag class."""
        assert len(TAG_TYPES) == 16
        assert Paragraph in TAG_TYPES
        assert Text not in TAG_TYPES

    def test_event_set_is_closed(self):
        """Test that the event union lists every event class."""
        assert len(EVENT_TYPES) == 11
        assert Start in EVENT_TYPES
        assert Paragraph not in EVENT_TYPES

    def test_events_compare_by_value(self):
        """Test that equal payloads give equal events."""
        assert Start(Heading(2)) == Start(Heading(level=2))
        assert Start(Heading(2)) != Start(Heading(3))
        assert End(Link("a")) != End(Link("b"))

    def test_events_are_frozen(self):
        """Test that events cannot be mutated."""
        event = Text("hello")
        with pytest.raises(dataclasses.FrozenInstanceError):
            event.text = "changed"  # type: ignore[misc]

    def test_defaults(self):
        """Test default payload values."""
        assert CodeBlock() == CodeBlock(kind="fenced", info="")
        assert List() == List(ordered=False, start=1)
        assert TaskMarker().done is False
        assert MathSpan("x").kind == "inline"
        assert RawHtml("<b>").inline is False

    def test_exports(self):
        """Test that __all__ names resolve."""
        for name in events.__all__:
            assert hasattr(events, name)
