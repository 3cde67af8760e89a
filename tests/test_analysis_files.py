import pytest

from sentinel_text.analysis.files import format_file_size, sanitize_filename


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0 Bytes"),
        (500, "500 Bytes"),
        (1023, "1023 Bytes"),
        (1024, "1 KB"),
        (1536, "1.5 KB"),
        (1152, "1.13 KB"),
        (2560 + 5, "2.5 KB"),
        (1048576, "1 MB"),
        (1234567, "1.18 MB"),
        (1073741824, "1 GB"),
        (5 * 1024**4, "5120 GB"),
    ],
)
def test_format_file_size(size, expected):
    assert format_file_size(size) == expected


@pytest.mark.parametrize("size", [-1, float("nan"), float("inf"), float("-inf")])
def test_format_file_size_degenerate_input(size):
    assert format_file_size(size) == "0 Bytes"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("My File!!.PDF", "my_file_.pdf"),
        ("Report (final) v2.txt", "report_final_v2.txt"),
        ("résumé.pdf", "r_sum_.pdf"),
        ("a___b-c.tar.gz", "a_b-c.tar.gz"),
        ("", ""),
    ],
)
def test_sanitize_filename(name, expected):
    assert sanitize_filename(name) == expected
