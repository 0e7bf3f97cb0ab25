import logging
from datetime import date

import pytest

from bill_report.infrastructure.parsing.filenames import decode_file_name, split_by_separator


def test_decode_valid_file_name():
    identity = decode_file_name("2021-01-01_Alice.csv")

    assert identity.file_name == "2021-01-01_Alice.csv"
    assert identity.name == "Alice"
    assert identity.date == date(2021, 1, 1)


def test_extra_segments_are_dropped():
    identity = decode_file_name("2021-01-01_Alice_march_copy.csv")

    assert identity.name == "Alice"
    assert identity.date == date(2021, 1, 1)


def test_extension_is_cut_at_first_dot():
    assert split_by_separator("2021-01-01_Alice.backup.csv") == ["2021-01-01", "Alice"]
    assert decode_file_name("2021-01-01_Al.ice.csv").name == "Al"


def test_one_segment_keeps_date_and_empty_name():
    identity = decode_file_name("2021-01-01.csv")

    assert identity.date == date(2021, 1, 1)
    assert identity.name == ""


def test_zero_segments_yield_sentinels():
    identity = decode_file_name(".hidden")

    assert identity.date is None
    assert identity.name == ""


def test_unparseable_date_proceeds_with_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="bill_report"):
        identity = decode_file_name("notadate_Bob.csv")

    assert identity.date is None
    assert identity.name == "Bob"
    assert "notadate_Bob.csv" in caplog.text


def test_custom_separator():
    identity = decode_file_name("2021-01-01@Carol.csv", separator="@")

    assert identity.name == "Carol"
    assert identity.date == date(2021, 1, 1)


def test_empty_separator_is_rejected():
    with pytest.raises(ValueError):
        decode_file_name("2021-01-01_Alice.csv", separator="")


@pytest.mark.parametrize("file_name", ["now_Bob.csv", "today_Bob.csv"])
def test_relative_date_words_are_not_dates(file_name):
    identity = decode_file_name(file_name)

    assert identity.date is None
    assert identity.name == "Bob"
