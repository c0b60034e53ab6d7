import re
from datetime import datetime

from meetup.utils import format_timestamp


def test_fields_are_not_zero_padded():
    assert format_timestamp(datetime(2024, 3, 5, 9, 2, 1)) == "2024-3-5 9:2:1"


def test_two_digit_fields_are_kept_whole():
    assert format_timestamp(datetime(2023, 12, 31, 23, 59, 58)) == "2023-12-31 23:59:58"


def test_midnight_renders_zeros():
    assert format_timestamp(datetime(2024, 1, 1, 0, 0, 0)) == "2024-1-1 0:0:0"


def test_defaults_to_local_now():
    before = datetime.now().year
    stamp = format_timestamp()
    assert re.fullmatch(r"\d{4}-\d{1,2}-\d{1,2} \d{1,2}:\d{1,2}:\d{1,2}", stamp)
    assert int(stamp.split("-")[0]) >= before
