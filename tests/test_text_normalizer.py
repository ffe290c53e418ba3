from services.text_normalizer import clamp, is_blank, normalize, round_half_up, word_count


def test_normalize_collapses_whitespace_and_line_breaks():
    assert normalize("  Jane\n\nSmith \t Engineer\r\n") == "Jane Smith Engineer"


def test_normalize_is_idempotent():
    raw = "Skills:\n  Python,\tGo \n\n Rust  "
    once = normalize(raw)
    assert normalize(once) == once


def test_normalize_preserves_case():
    assert normalize("PyTorch  AWS") == "PyTorch AWS"


def test_normalize_handles_empty_and_none():
    assert normalize("") == ""
    assert normalize(None) == ""
    assert normalize(" \n\t ") == ""


def test_word_count_and_blank():
    assert word_count("") == 0
    assert word_count("one two  three") == 3
    assert is_blank("   ")
    assert is_blank(None)
    assert not is_blank(" x ")


def test_clamp_and_round_half_up():
    assert clamp(-4) == 0
    assert clamp(140) == 100
    assert clamp(50, 65, 95) == 65
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12
    assert round_half_up(66.666) == 67
