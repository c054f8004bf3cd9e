from mdx import derive_slug


def test_ttfb_sub_parts():
    assert derive_slug("Measure TTFB sub-parts", "TTFB") == "Sub-Parts"


def test_is_deterministic():
    results = {derive_slug("Measure TTFB sub-parts", "TTFB") for _ in range(50)}
    assert results == {"Sub-Parts"}


def test_drops_punctuation_stop_words_and_short_tokens():
    assert derive_slug("Find all images (with lazy & fetchpriority)!", "Images") == "Lazy-Fetchpriority"
    assert derive_slug("Get a CSS x-ray", "Page") == "CSS-Ray"


def test_basename_words_are_excluded_case_insensitively():
    assert derive_slug("LCP image entropy", "LCP-Image-Entropy") == ""
    assert derive_slug("Long animation frames summary", "long_animation_frames") == "Summary"


def test_empty_for_missing_heading():
    assert derive_slug(None, "TTFB") == ""
    assert derive_slug("", "TTFB") == ""
    assert derive_slug("Check the", "TTFB") == ""


def test_keeps_inner_capitalisation():
    assert derive_slug("Measure iFrames and webFonts", "Loading") == "IFrames-WebFonts"
