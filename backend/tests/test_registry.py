import random

from emoji_guess.services.games.registry import GUESSER, HOST, RoleRegistry


def test_register_is_idempotent():
    registry = RoleRegistry()
    assert registry.register('Bob')
    assert not registry.register('Bob')
    assert registry.guessers == ['Bob']


def test_promote_moves_guesser_to_host():
    registry = RoleRegistry()
    registry.register('Alice')
    registry.register('Bob')
    assert registry.promote_to_host('Alice')
    assert registry.current_roster() == {'host': 'Alice', 'guessers': ['Bob']}


def test_only_one_host():
    registry = RoleRegistry()
    registry.promote_to_host('Alice')
    registry.register('Bob')
    assert not registry.promote_to_host('Bob')
    assert registry.host == 'Alice'
    assert registry.guessers == ['Bob']


def test_host_cannot_register_as_guesser():
    registry = RoleRegistry()
    registry.promote_to_host('Alice')
    assert not registry.register('Alice')
    assert registry.guessers == []


def test_unregister_reports_role():
    registry = RoleRegistry()
    registry.promote_to_host('Alice')
    registry.register('Bob')
    assert registry.unregister('Bob') == GUESSER
    assert registry.unregister('Alice') == HOST
    assert registry.unregister('Carol') is None
    assert registry.unregister(None) is None
    assert registry.current_roster() == {'host': None, 'guessers': []}


def test_hostless_room_can_take_a_new_host():
    registry = RoleRegistry()
    registry.promote_to_host('Alice')
    registry.register('Bob')
    registry.unregister('Alice')
    assert registry.promote_to_host('Bob')
    assert registry.guessers == []


def test_roster_is_a_snapshot():
    registry = RoleRegistry()
    registry.register('Bob')
    roster = registry.current_roster()
    roster['guessers'].append('Mallory')
    assert registry.guessers == ['Bob']


def test_copy_is_independent():
    registry = RoleRegistry()
    registry.register('Bob')
    clone = registry.copy()
    clone.register('Carol')
    clone.promote_to_host('Bob')
    assert registry.current_roster() == {'host': None, 'guessers': ['Bob']}


def test_invariants_hold_under_random_operations():
    rng = random.Random(42)
    names = ['Alice', 'Bob', 'Carol', 'Dave', 'Eve']
    registry = RoleRegistry()
    for _ in range(2000):
        op = rng.choice(['register', 'promote', 'unregister'])
        name = rng.choice(names)
        if op == 'register':
            registry.register(name)
        elif op == 'promote':
            registry.promote_to_host(name)
        else:
            registry.unregister(name)
        guessers = registry.guessers
        assert registry.host not in guessers
        assert len(guessers) == len(set(guessers))
