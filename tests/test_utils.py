"""Unit tests for date, hour and decimal canonicalisation helpers."""

import math

import pytest

from spotbill import canon, utils


@pytest.mark.parametrize("raw", ["{h}:00", "{h:02d}:00", "{h:02d}:00:00", "{h}:30"])
def test_hour_labels_always_hh_00(raw):
    """Every accepted hour form maps to a 5-character 'HH:00' label."""
    for h in range(24):
        label = utils.convert_hour_str(raw.format(h=h))
        assert len(label) == 5
        assert label == f"{h:02d}:00"
        assert utils.is_hour_label(label)


def test_hour_labels_cover_the_day():
    assert len(canon.HOUR_LABELS) == 24
    assert canon.HOUR_LABELS[0] == "00:00" and canon.HOUR_LABELS[-1] == "23:00"


@pytest.mark.parametrize("raw", ["24:00", "x:00", "", "-1:00"])
def test_hour_rejects_garbage(raw):
    with pytest.raises(ValueError):
        utils.convert_hour_str(raw)


def test_convert_date_pads_and_reverses():
    assert utils.convert_date_str("3.10.2022") == "2022-10-03"
    assert utils.convert_date_str("3.1.2023") == "2023-01-03"
    assert utils.convert_date_str("31.12.2022") == "2022-12-31"
    assert utils.convert_date_str("03.01.2023") == "2023-01-03"


@pytest.mark.parametrize("raw", ["2022-10-03", "3.10", "32.1.2022", "a.b.c"])
def test_convert_date_rejects_malformed(raw):
    with pytest.raises(ValueError):
        utils.convert_date_str(raw)


def test_decimal_comma():
    assert float(utils.replace_comma("12,5")) == 12.5
    assert float(utils.replace_comma("12.5")) == 12.5
    # only the first comma is swapped
    assert utils.replace_comma("1,2,3") == "1.2,3"
    assert utils.replace_comma("0,00") == canon.END_OF_DATA_SENTINEL


def test_split_date_time():
    assert utils.split_date_time("3.10.2022 0:00") == ("3.10.2022", "0:00")
    with pytest.raises(ValueError):
        utils.split_date_time("3.10.2022")


def test_ieee_div_does_not_raise():
    assert utils.ieee_div(1.0, 0) == math.inf
    assert math.isnan(utils.ieee_div(0.0, 0))
    assert utils.ieee_div(3.0, 2) == 1.5


def test_fmt_fixed_precision():
    assert utils.fmt(2.4) == "2.400"
    assert utils.fmt(0.00049) == "0.000"
    assert utils.fmt(-1.23456) == "-1.235"
