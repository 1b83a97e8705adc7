from emoji_guess.socketio_events import ConnectionDirectory


def test_rebind_reports_name_only_when_last_socket_leaves_it():
    directory = ConnectionDirectory()
    assert directory.rebind('sid-1', 'Bob') is None
    assert directory.rebind('sid-2', 'Bob') is None
    # sid-2 still holds Bob
    assert directory.rebind('sid-1', 'Robert') is None
    assert directory.identity_for('sid-1') == 'Robert'
    assert directory.sids_for('Bob') == {'sid-2'}
    assert directory.rebind('sid-2', 'Bobby') == 'Bob'
    assert directory.sids_for('Bob') == set()


def test_rebind_to_same_name_keeps_binding():
    directory = ConnectionDirectory()
    directory.rebind('sid-1', 'Bob')
    assert directory.rebind('sid-1', 'Bob') == 'Bob'
    assert directory.identity_for('sid-1') == 'Bob'
    assert directory.sids_for('Bob') == {'sid-1'}


def test_release():
    directory = ConnectionDirectory()
    directory.rebind('sid-1', 'Bob')
    directory.rebind('sid-2', 'Bob')
    assert directory.release('sid-1') is None
    assert directory.release('sid-2') == 'Bob'
    assert directory.release('sid-3') is None
    assert directory.sids_for(None) == set()
