import pytest

from fieldkit.strings import collapse_repeats, remove_quotes, safe_copy, strict_atoi


@pytest.mark.parametrize(
    "text, expected",
    [
        ("0", 0),
        ("1", 1),
        ("3423", 3423),
        ("032", 32),
        ("99900394", 99900394),
        ("11111", 11111),
        ("08343", 8343),
        ("4294967294", 4294967294),
    ],
)
def test_strict_atoi_accepts_digits(text, expected):
    assert strict_atoi(text) == expected


@pytest.mark.parametrize(
    "text",
    ["", "994.440.", "-3211", "!**&%!", "4233!", "-5", "5.0", "0xffffffff",
     "4294967295", "a"],
)
def test_strict_atoi_rejects(text):
    with pytest.raises(ValueError):
        strict_atoi(text)


def test_strict_atoi_wraps_at_32_bits():
    assert strict_atoi("4294967296") == 0


@pytest.mark.parametrize(
    "src, expected",
    [
        ("Test", "Test"),
        ("Hello", "Hello"),
        ("Helloworld", "Helloworl"),
        ("Helloworld!", "Helloworl"),
        ("xxxxyyyyzzzzaaaa", "xxxxyyyyz"),
        ("1234567890", "123456789"),
        ("", ""),
        ("u-bloxR", "u-bloxR"),
    ],
)
def test_safe_copy_with_buffer_of_ten(src, expected):
    assert safe_copy(src, 10) == expected


@pytest.mark.parametrize("src", ["Test", "Helloworld!", "", "xxx", "DONE"])
def test_safe_copy_with_exact_length_keeps_all(src):
    assert safe_copy(src, len(src) + 1) == src


@pytest.mark.parametrize("n", [1, 2, 5, 20])
def test_safe_copy_is_a_bounded_prefix(n):
    result = safe_copy("xxxxyyyyzzzzaaaa", n)
    assert len(result) <= n - 1
    assert "xxxxyyyyzzzzaaaa".startswith(result)


def test_safe_copy_stops_at_nul():
    assert safe_copy("abc\0def", 10) == "abc"


def test_safe_copy_rejects_zero_size():
    with pytest.raises(ValueError):
        safe_copy("Test", 0)


def test_collapse_repeats_pebbles():
    assert collapse_repeats("pebbles") == "pebles"


def test_collapse_repeats_empty():
    assert collapse_repeats("") == ""


@pytest.mark.parametrize("text", ["pebbles", "aaabbbccc", "Helloworld", "xxxxyyyyzzzzaaaa"])
def test_collapse_repeats_invariants(text):
    result = collapse_repeats(text)
    assert all(a != b for a, b in zip(result, result[1:]))
    assert collapse_repeats(result) == result
    assert set(result) == set(text)


def test_remove_quotes():
    assert remove_quotes('"pebbles"') == "pebbles"


def test_remove_quotes_without_closing_quote():
    assert remove_quotes('"pebbles') == "pebbles"


@pytest.mark.parametrize("text", ["", "x", '""', '"'])
def test_remove_quotes_rejects(text):
    with pytest.raises(ValueError):
        remove_quotes(text)