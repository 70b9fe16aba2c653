import dataclasses

import pytest

from cmarkhtml.events import Alignment, Event, EventKind, LinkType, Tag, TagKind


def test_start_and_end_carry_tag():
    tag = Tag(TagKind.HEADING, level=2)
    assert Event.start(tag).kind is EventKind.START
    assert Event.start(tag).tag == tag
    assert Event.end(tag).kind is EventKind.END
    assert Event.end(tag).tag == tag


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Event.text, EventKind.TEXT),
        (Event.html, EventKind.HTML),
        (Event.footnote_reference, EventKind.FOOTNOTE_REFERENCE),
    ],
)
def test_valued_events(factory, kind):
    event = factory("payload")
    assert event.kind is kind
    assert event.value == "payload"
    assert event.tag is None


@pytest.mark.parametrize(
    "factory, kind",
    [
        (Event.soft_break, EventKind.SOFT_BREAK),
        (Event.hard_break, EventKind.HARD_BREAK),
        (Event.rule, EventKind.RULE),
    ],
)
def test_bare_events(factory, kind):
    event = factory()
    assert event.kind is kind
    assert event.value == ""


@pytest.mark.parametrize("checked", [True, False])
def test_task_list_marker(checked):
    event = Event.task_list_marker(checked)
    assert event.kind is EventKind.TASK_LIST_MARKER
    assert event.checked is checked


def test_tag_alignments_become_tuple():
    tag = Tag(TagKind.TABLE, alignments=[Alignment.LEFT, Alignment.NONE])
    assert tag.alignments == (Alignment.LEFT, Alignment.NONE)
    assert hash(tag) == hash(Tag(TagKind.TABLE, alignments=(Alignment.LEFT, Alignment.NONE)))


def test_events_compare_by_value():
    assert Event.text("a") == Event.text("a")
    assert Event.text("a") != Event.html("a")


def test_link_tag_fields():
    tag = Tag(TagKind.LINK, link_type=LinkType.EMAIL, dest="someone@example.com", title="t")
    assert tag.link_type is LinkType.EMAIL
    assert tag.dest == "someone@example.com"
    assert tag.title == "t"
    assert tag.start is None


def test_event_is_immutable():
    event = Event.text("a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.value = "b"
    assert event.value == "a"