import pytest

from emoji_guess.services.games.similarity import FALLBACK_FEEDBACK, feedback_for, normalize, similarity


@pytest.mark.parametrize('text', ['France', '  south KOREA ', 'a', '', 'Guinea-Bissau', '🇫🇷'])
def test_identical_after_normalization_scores_one(text):
    assert similarity(normalize(text), normalize(text)) == 1.0


def test_normalize_trims_and_folds_case():
    assert normalize('  FrAnCe \n') == 'france'
    assert normalize(None) == ''


def test_known_value():
    # fr ra an nc ce vs fr ra an nk: three shared bigrams out of nine
    assert similarity('france', 'frank') == pytest.approx(2 / 3)


def test_symmetric_and_bounded():
    pairs = [('france', 'spain'), ('peru', 'perú'), ('new zealand', 'zealand'), ('chad', 'chadd')]
    for a, b in pairs:
        score = similarity(a, b)
        assert score == similarity(b, a)
        assert 0.0 <= score <= 1.0


def test_more_shared_structure_scores_higher():
    assert similarity('france', 'frances') > similarity('france', 'frank') > similarity('france', 'peru')


def test_whitespace_is_ignored():
    assert similarity('new zealand', 'newzealand') == 1.0


def test_short_strings_score_zero_unless_equal():
    assert similarity('a', 'ab') == 0.0
    assert similarity('a', 'a') == 1.0


def test_feedback_tiers_evaluated_top_down():
    assert feedback_for(0.9) == '🔥 Very close!'
    # Bounds are exclusive
    assert feedback_for(0.75) == '👍 Getting warmer!'
    assert feedback_for(0.5) == '🤔 On the right track...'
    assert feedback_for(0.3) == '❄️ Cold...'
    assert feedback_for(0.2) == FALLBACK_FEEDBACK
    assert feedback_for(0.0) == FALLBACK_FEEDBACK
