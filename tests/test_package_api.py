import diffmemo as pkg


def test_top_level_exports():
    for name in ("tokenize", "compute_lcs", "generate_diff", "escape_html", "compute_diff"):
        assert name in pkg.__all__
        assert callable(getattr(pkg, name))


def test_compute_diff_end_to_end():
    diff = pkg.compute_diff("The quick brown fox", "The brown fox")
    assert (diff.extra_count, diff.missing_count) == (0, 1)
    assert diff.html == 'The<span class="missing"></span> brown fox'
    assert pkg.markup_to_text(diff.html) == "The brown fox"
