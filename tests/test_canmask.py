import pytest

from mcukit.canmask import accepted_ids, format_bits, main, render_report


@pytest.mark.parametrize("width", [11, 29])
@pytest.mark.parametrize("value", [0, 1, 0x0102, 0x7FF, 0x00010000, 0x1FFFFFFF])
def test_format_bits_round_trip(value, width):
    bits = format_bits(value, width)
    assert len(bits) == width
    assert int(bits, 2) == value & ((1 << width) - 1)


def test_format_bits_standard_example():
    assert format_bits(0x0102, 11) == "00100000010"


def test_format_bits_rejects_width():
    with pytest.raises(ValueError):
        format_bits(1, 16)


def test_exact_mask_accepts_only_the_id():
    assert list(accepted_ids(0x0102, 0xFFFF, 11)) == [0x0102]


def test_partial_mask_accepts_matching_range():
    ids = list(accepted_ids(0x0100, 0x07F8, 11))
    assert len(ids) == 8
    assert ids == sorted(ids)
    assert all(i & 0x07F8 == 0x0100 for i in ids)
    assert ids[0] == 0x0100


def test_extended_exact_mask():
    assert list(accepted_ids(0x00010000, 0x1FFFFFFF, 29)) == [0x00010000]


def test_id_with_bits_outside_mask_accepts_nothing():
    assert list(accepted_ids(0x0101, 0x0100, 11)) == []


def test_extended_scan_stops_at_limit():
    assert list(accepted_ids(0x200000, 0x1FFFFFFF, 29)) == []


def test_zero_mask_accepts_whole_standard_range():
    ids = list(accepted_ids(0, 0, 11))
    assert ids == list(range(0x800))


def test_accepted_ids_rejects_width():
    with pytest.raises(ValueError):
        list(accepted_ids(0, 0, 12))


def test_render_report_rows():
    report = render_report(0x0102, 0xFFFF, 11)
    assert f"0x0102  {format_bits(0x0102, 11)}    ID" in report
    assert f"0xFFFF  {format_bits(0xFFFF, 11)}    Mask" in report
    assert report.endswith(f"0x0102  {format_bits(0x0102, 11)}\n")


def test_render_report_extended_hex_width():
    report = render_report(0x00010000, 0x1FFFFFFF, 29)
    assert "0x00010000" in report
    assert "0x1FFFFFFF" in report


def test_main_prints_accepted_ids(capsys):
    assert main(["0x0100", "0x07F8", "--width", "11"]) == 0
    out = capsys.readouterr().out
    rows = [line for line in out.splitlines() if line.startswith("0x01")]
    assert len(rows) == 1 + 8


def test_main_parses_octal(capsys):
    assert main(["010", "0x1FFFFFFF"]) == 0
    out = capsys.readouterr().out
    assert "0x00000008" in out


def test_main_requires_two_numbers():
    with pytest.raises(SystemExit):
        main(["0x100"])


def test_main_rejects_garbage():
    with pytest.raises(SystemExit):
        main(["zz", "0x7FF"])