import random

import pytest

from emoji_guess.services.games.words import COUNTRIES, WordBank, WordSamplingError


def test_default_bank_is_the_country_list():
    bank = WordBank()
    assert len(bank) == len(set(COUNTRIES))
    assert 'France' in bank


def test_sample_returns_distinct_dataset_entries():
    rng = random.Random(1234)
    for size in range(3, 12):
        dataset = [f"word-{i}" for i in range(size)]
        bank = WordBank(dataset, rng=rng)
        for _ in range(50):
            words = bank.sample(3)
            assert len(words) == 3
            assert len(set(words)) == 3
            assert set(words) <= set(dataset)


def test_sample_larger_than_bank_fails():
    with pytest.raises(WordSamplingError):
        WordBank(['France', 'Spain']).sample(3)


def test_non_positive_count_fails():
    with pytest.raises(WordSamplingError):
        WordBank().sample(0)


def test_duplicates_in_custom_list_collapse():
    bank = WordBank(['France', 'France', 'Spain', 'Italy'])
    assert bank.words == ['France', 'Spain', 'Italy']
    assert sorted(bank.sample(3)) == ['France', 'Italy', 'Spain']
