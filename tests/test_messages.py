import pytest

from camsim.messages import (
    DISCOVER_TYPE,
    STATUS_TYPE,
    DiscoverMessage,
    Message,
    StatusMessage,
    decode_message,
)


def test_status_wire_bytes():
    assert StatusMessage(7, 1, 3).to_bytes() == b"\x01\x00\x03"


def test_status_length_is_three():
    assert len(StatusMessage(1, 1, 2).to_bytes()) == 3


def test_discover_length_is_fourteen():
    assert len(DiscoverMessage(1, 2, 1500, 90, 250).to_bytes()) == 14


def test_discover_wire_bytes():
    data = DiscoverMessage(1, 2, 500.0, 0.0, 0.0).to_bytes()
    assert data == b"\x02\x00" + b"\x00\x00\xfa\x43" + b"\x00" * 8


@pytest.mark.parametrize("status", [1, 2, 3])
def test_status_in_range_kept(status):
    assert StatusMessage(1, 1, status).status == status


@pytest.mark.parametrize("status", [0, 4, -1, 100])
def test_status_out_of_range_zeroed(status):
    assert StatusMessage(1, 1, status).status == 0


@pytest.mark.parametrize(
    "distance, angle, speed",
    [(400, 10, 10), (10001, 10, 10), (1000, 361, 10), (1000, -1, 10), (1000, 10, 1001), (1000, 10, -5)],
)
def test_discover_out_of_range_zeroed(distance, angle, speed):
    msg = DiscoverMessage(1, 2, distance, angle, speed)
    expected = [v if lo <= v <= hi else 0 for v, (lo, hi) in
                [(distance, (500, 10000)), (angle, (0, 360)), (speed, (0, 1000))]]
    assert [msg.distance, msg.angle, msg.speed] == expected


def test_discover_boundaries_kept():
    msg = DiscoverMessage(1, 2, 10000, 360, 1000)
    assert (msg.distance, msg.angle, msg.speed) == (10000.0, 360.0, 1000.0)


def test_discover_nan_zeroed():
    msg = DiscoverMessage(1, 2, float("nan"), 10, 10)
    assert msg.distance == 0.0


def test_status_round_trip():
    original = StatusMessage(5, STATUS_TYPE, 2)
    decoded = StatusMessage.from_bytes(original.to_bytes())
    assert (decoded.message_type, decoded.status) == (original.message_type, original.status)


def test_discover_round_trip_with_fractions():
    original = DiscoverMessage(9, DISCOVER_TYPE, 1234.56, 0.1, 999.9)
    decoded = DiscoverMessage.from_bytes(original.to_bytes())
    assert (decoded.distance, decoded.angle, decoded.speed) == (
        original.distance,
        original.angle,
        original.speed,
    )


def test_decode_message_dispatches_on_length():
    discover = DiscoverMessage(1, 2, 2000, 45, 300)
    status = StatusMessage(1, 1, 1)
    decoded_discover = decode_message(discover.to_bytes())
    decoded_status = decode_message(status.to_bytes())
    assert isinstance(decoded_discover, DiscoverMessage)
    assert isinstance(decoded_status, StatusMessage)
    assert decoded_discover.to_bytes() == discover.to_bytes()
    assert decoded_status.to_bytes() == status.to_bytes()


@pytest.mark.parametrize("data", [b"", b"\x01", b"\x01\x00\x01\x00", b"\x02" * 13])
def test_decode_message_bad_length(data):
    with pytest.raises(ValueError):
        decode_message(data)


def test_from_bytes_wrong_length():
    with pytest.raises(ValueError):
        DiscoverMessage.from_bytes(b"\x02\x00\x00")


@pytest.mark.parametrize("message_type", [0, 3, -1])
def test_invalid_type_rejected(message_type):
    with pytest.raises(ValueError):
        StatusMessage(1, message_type, 1)


def test_from_bytes_invalid_type_rejected():
    with pytest.raises(ValueError):
        StatusMessage.from_bytes(b"\x07\x00\x01")


def test_status_describe():
    assert StatusMessage(1, 1, 2).describe() == "type: 1\tstatus: 2\n"


def test_discover_describe_fields():
    text = DiscoverMessage(1, 2, 1500, 90, 250).describe()
    assert text.startswith("type: 2\tdistance: 1500")
    assert "\tangle: 90" in text
    assert text.endswith("\tspeed:250\n")


def test_records_include_id_and_end_with_newline():
    status = StatusMessage(42, 1, 3).to_record()
    discover = DiscoverMessage(43, 2, 700, 12, 34).to_record()
    assert status.startswith("messageId : 42\tmessageType: 1")
    assert "status: 3" in status
    assert discover.startswith("messageId : 43\tmessageType: 2")
    assert "\tdistance: 700" in discover
    assert status.endswith("\n") and discover.endswith("\n")


def test_base_message_encodes_type_only():
    msg = Message(3, DISCOVER_TYPE)
    assert Message.from_bytes(msg.to_bytes()).message_type == DISCOVER_TYPE
    assert msg.describe() == "type: 2\n"