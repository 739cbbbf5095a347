import pytest

from gtinval.errors import BadCharacter, BadChecksum, FixError, TooLong
from gtinval.validators import CHECKERS, FIXERS, check12, fix8, fix12, fix13, fix14


def test_fix_valid_unchanged():
    assert fix12("036000291452") == "036000291452"
    assert fix13("4006381333931") == "4006381333931"
    assert fix8("12345670") == "12345670"
    assert fix14("92498743135447") == "92498743135447"


def test_fix_strips_whitespace():
    assert fix12("  036000291452 ") == fix12("036000291452")
    assert fix12("087248795257 ") == "087248795257"
    assert fix13("\t4006381333931\n") == "4006381333931"


def test_fix_zero_pads():
    assert fix12("36000291452") == "036000291452"
    assert fix12("87248795257") == "087248795257"
    assert fix12("0") == "000000000000"
    assert fix14("1234123412344") == "01234123412344"
    assert fix13(" 36000291452 ") == "0036000291452"


def test_fix_blank_pads_to_zero_code():
    assert fix12("") == "000000000000"
    assert fix8("   ") == "00000000"


def test_fix_too_long():
    with pytest.raises(TooLong) as exc:
        fix12("0360002914521")
    assert exc.value.length == 12
    assert exc.value.code == "0360002914521"
    with pytest.raises(TooLong):
        fix12("123412341234123")
    with pytest.raises(TooLong):
        fix8(" 123456789 ")


def test_fix_bad_character():
    with pytest.raises(BadCharacter) as exc:
        fix13("036000291A452")
    assert exc.value.char == "A"
    assert exc.value.position == 9


def test_fix_internal_whitespace_not_stripped():
    with pytest.raises(BadCharacter) as exc:
        fix12("0360 0291452")
    assert exc.value.char == " "
    assert exc.value.position == 4


def test_fix_non_ascii():
    with pytest.raises(BadCharacter):
        fix12("❤")
    with pytest.raises(BadCharacter):
        fix8("١٢٣٤٥٦٧٠")


def test_fix_does_not_rewrite_check_digit():
    with pytest.raises(BadChecksum) as exc:
        fix12("000000000002")
    assert exc.value.expected == 0
    assert exc.value.found == 2
    with pytest.raises(BadChecksum):
        fix12("36000291453")


def test_fix_errors_share_base():
    for bad in ("0360002914521", "036000291A45", "000000000002"):
        with pytest.raises(FixError) as exc:
            fix12(bad)
        assert isinstance(exc.value, ValueError)
    with pytest.raises(FixError) as exc:
        fix12("0360002914521")
    assert exc.value.kind == "TooLong"


def test_fix_is_idempotent():
    for raw in (" 36000291452", "87248795257", "", "036000291452  "):
        once = fix12(raw)
        assert fix12(once) == once
        assert check12(once)


def test_too_long_reports_trimmed_size():
    with pytest.raises(TooLong) as exc:
        fix12(" 0360002914521 ")
    assert exc.value.size == 13
    assert "13 characters" in str(exc.value)


def test_every_variant_fixes_on_its_own():
    for length, fixer in FIXERS.items():
        valid = "0" * length
        assert fixer(valid) == valid
        assert fixer("  0 ") == valid
        assert fixer(fixer(" 0")) == fixer(" 0")
        assert CHECKERS[length](fixer("0"))

        with pytest.raises(BadChecksum):
            fixer("0" * (length - 1) + "1")
        with pytest.raises(BadCharacter) as exc:
            fixer("0" * (length - 2) + "x0")
        assert exc.value.position == length - 2
        with pytest.raises(TooLong):
            fixer("0" * (length + 1))


def test_every_variant_is_idempotent_on_real_codes():
    samples = {8: " 12345670", 12: "36000291452 ", 13: "4006381333931", 14: "1234123412344"}
    for length, raw in samples.items():
        once = FIXERS[length](raw)
        assert len(once) == length
        assert FIXERS[length](once) == once
        assert CHECKERS[length](once)
