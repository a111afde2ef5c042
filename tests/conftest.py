"""Shared fixtures: the guild::automod sample module and helpers."""

import pytest

from navindex.item_record import ItemRecord
from navindex.kind import Kind

AUTOMOD = ("guild", "automod")

AUTOMOD_FRAGMENT = (
    'window.SIDEBAR_ITEMS = {"enum":[["Action","An action which will execute '
    'whenever a rule is triggered."],["ActionType","Type of [`Action`]."],'
    '["EventType","Indicates in what event context a rule should be checked."],'
    '["KeywordPresetType","Internally pre-defined wordsets which will be searched '
    'for in content."],["Trigger","Characterizes the type of content which can '
    'trigger the rule."],["TriggerType","Type of [`Trigger`]."]],"struct":'
    '[["ActionExecution","Gateway event payload sent when a rule is triggered and '
    'an action is executed (e.g. message is blocked)."],["Rule","Configured auto '
    'moderation rule."],["TriggerMetadata","Individual change for trigger metadata '
    'within an audit log entry."]]};'
)


def make_record(
    name: str,
    kind: Kind = Kind.STRUCT,
    module_path: tuple[str, ...] = AUTOMOD,
    summary: str = "",
) -> ItemRecord:
    """Create an ItemRecord for testing."""
    return ItemRecord(name=name, kind=kind, summary=summary, module_path=module_path)


@pytest.fixture
def automod_records() -> list[ItemRecord]:
    """The items of guild::automod in analyzer (unsorted) order."""
    return [
        make_record("Rule", Kind.STRUCT, summary="Configured auto moderation rule."),
        make_record(
            "EventType",
            Kind.ENUM,
            summary="Indicates in what event context a rule should be checked.",
        ),
        make_record(
            "Trigger",
            Kind.ENUM,
            summary="Characterizes the type of content which can trigger the rule.",
        ),
        make_record("TriggerType", Kind.ENUM, summary="Type of [`Trigger`]."),
        make_record(
            "KeywordPresetType",
            Kind.ENUM,
            summary=(
                "Internally pre-defined wordsets which will be searched for in "
                "content."
            ),
        ),
        make_record(
            "TriggerMetadata",
            Kind.STRUCT,
            summary="Individual change for trigger metadata within an audit log entry.",
        ),
        make_record("ActionType", Kind.ENUM, summary="Type of [`Action`]."),
        make_record(
            "ActionExecution",
            Kind.STRUCT,
            summary=(
                "Gateway event payload sent when a rule is triggered and an action "
                "is executed (e.g. message is blocked)."
            ),
        ),
        make_record(
            "Action",
            Kind.ENUM,
            summary="An action which will execute whenever a rule is triggered.",
        ),
    ]


@pytest.fixture
def workspace_records(automod_records: list[ItemRecord]) -> list[ItemRecord]:
    """A small crate: automod plus sibling and parent modules."""
    return [
        *automod_records,
        make_record("Guild", Kind.STRUCT, ("guild",), "Information about a guild."),
        make_record("GuildId", Kind.STRUCT, ("guild",), "An identifier for a guild."),
        make_record("guild_id", Kind.FUNCTION, ("guild",), "Returns the guild id."),
        make_record(
            "ScheduledEvent",
            Kind.STRUCT,
            ("guild", "scheduled_event"),
            "Information about a guild scheduled event.",
        ),
        make_record(
            "ScheduledEventType",
            Kind.ENUM,
            ("guild", "scheduled_event"),
            "Type of event.",
        ),
        make_record(
            "ButtonStyle", Kind.ENUM, ("application", "component"), "Button style."
        ),
        make_record(
            "Trigger",
            Kind.MACRO,
            ("macros",),
            "A macro that happens to share a name.",
        ),
    ]
