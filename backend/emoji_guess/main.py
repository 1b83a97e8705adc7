from flask import Blueprint, jsonify
from emoji_guess.services.games.session import get_room

main = Blueprint('main', __name__)

@main.route('/health')
def health():
    return jsonify({'status': 'ok'})

@main.route('/api/room', methods=['GET'])
def get_room_state():
    """
    Returns the public state of the room: roster, phase, clues and scores.
    """
    return jsonify(get_room().snapshot()), 200
