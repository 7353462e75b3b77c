"""Vector ephemeris report scanning."""

from horizons.motion import parse_motion_report
from horizons.records import Vector3

from sample_reports import MARS_POSITION, MARS_VECTORS, MARS_VELOCITY

START = "$$SOE"
HEADER = "2451545.000000000 = A.D. 2000-Jan-01 12:00:00.0000 TDB"
POSITION = " X = 1.0E+03 Y =-2.0E+03 Z = 3.0E+00"
VELOCITY = " VX= 4.0E-01 VY= 5.0E-01 VZ=-6.0E-01"
END = "$$EOE"


def _report(*lines):
    return "\n".join(["preamble", *lines, "footer"])


def test_mars_report():
    result = parse_motion_report(MARS_VECTORS)
    assert result is not None
    position, velocity = result
    assert position.current == Vector3(*MARS_POSITION)
    assert velocity.current == Vector3(*MARS_VELOCITY)
    assert position.previous == Vector3.ZERO
    assert velocity.previous == Vector3.ZERO


def test_minimal_report():
    result = parse_motion_report(_report(START, HEADER, POSITION, VELOCITY, END))
    assert result is not None
    assert result.position.current == Vector3(1000.0, -2000.0, 3.0)
    assert result.velocity.current == Vector3(0.4, 0.5, -0.6)


def test_missing_any_line_fails():
    lines = [START, HEADER, POSITION, VELOCITY]
    for i in range(len(lines)):
        kept = lines[:i] + lines[i + 1:]
        assert parse_motion_report(_report(*kept, END)) is None, f"without {lines[i]!r}"


def test_swapped_position_velocity_fails():
    assert parse_motion_report(_report(START, HEADER, VELOCITY, POSITION, END)) is None


def test_end_marker_before_start():
    assert parse_motion_report(_report(END, START, HEADER, POSITION, VELOCITY)) is None


def test_no_markers():
    assert parse_motion_report("No ephemeris for target \"Foo\"") is None
    assert parse_motion_report("") is None


def test_truncated_after_marker():
    assert parse_motion_report(START) is None
    assert parse_motion_report("\n".join([START, HEADER])) is None
    assert parse_motion_report("\n".join([START, HEADER, POSITION])) is None


def test_unparsable_vector_fails():
    bad_velocity = " VX= 4.0E-01 VY= n.a. VZ=-6.0E-01"
    assert parse_motion_report(_report(START, HEADER, POSITION, bad_velocity, END)) is None


def test_only_first_record():
    second = " X = 9.0 Y = 9.0 Z = 9.0"
    text = _report(START, HEADER, POSITION, VELOCITY, HEADER, second, VELOCITY, END)
    assert parse_motion_report(text).position.current == Vector3(1000.0, -2000.0, 3.0)


def test_idempotent():
    assert parse_motion_report(MARS_VECTORS) == parse_motion_report(MARS_VECTORS)
