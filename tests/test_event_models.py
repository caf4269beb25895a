from icsreport.datetime_decoder import decode_timestamp
from icsreport.event_models import InsideEvent, Outside, RawEventRecord, ResolvedEvent


def test_new_record_is_empty():
    record = RawEventRecord()
    assert (record.start, record.end, record.summary) == (None, None, None)
    assert record.resolve() is None


def test_complete_record_resolves():
    start = decode_timestamp("20220112T010000")
    end = decode_timestamp("20220112T030000")
    record = RawEventRecord(start=start, end=end, summary="Standup")
    resolved = record.resolve()
    assert resolved == ResolvedEvent(start, end, "Standup")
    assert resolved.sort_key() == (start, end, "Standup")


def test_resolved_events_order_naturally():
    early = ResolvedEvent(decode_timestamp("20220112T010000"), decode_timestamp("20220112T020000"), "z")
    late = ResolvedEvent(decode_timestamp("20220112T020000"), decode_timestamp("20220112T020000"), "a")
    assert early < late
    assert sorted([late, early]) == [early, late]


def test_inside_event_owns_a_fresh_record():
    first = InsideEvent()
    second = InsideEvent()
    assert first.record == RawEventRecord()
    assert first.record is not second.record
    assert Outside() == Outside()
