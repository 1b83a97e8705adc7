from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
import click
from config import Config

socketio = SocketIO(async_mode=None)

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get('LOG_LEVEL', 'INFO'))

    allowed_origins = [flask_app.config['ALLOWED_ORIGIN']]
    CORS(flask_app, origins=allowed_origins)

    # Initialize Socket.IO after app is created
    socketio.init_app(flask_app, cors_allowed_origins=allowed_origins)

    # The one room this process serves lives on the app, not in a module global
    from emoji_guess.services.games.engine import GameRules
    from emoji_guess.services.games.scoring import ScoringPolicy
    from emoji_guess.services.games.session import RoomSession
    from emoji_guess.services.games.words import WordBank, WordSamplingError
    rules = GameRules(
        words=WordBank(flask_app.config.get('WORD_LIST')),
        policy=ScoringPolicy.from_config(flask_app.config),
        option_count=int(flask_app.config.get('WORD_OPTION_COUNT', 3)),
    )
    flask_app.extensions['emoji_guess'] = RoomSession(rules)

    from emoji_guess.main import main
    flask_app.register_blueprint(main)

    # Register Socket.IO event handlers
    from emoji_guess.socketio_events import ConnectionDirectory, register_socketio_handlers
    flask_app.extensions['emoji_guess_connections'] = ConnectionDirectory()
    register_socketio_handlers()

    @click.command('sample-words')
    @click.option('--count', default=None, type=int, help='How many words to draw.')
    def sample_words_command(count):
        """Prints a random sample from the configured word bank."""
        try:
            words = rules.words.sample(count or rules.option_count)
        except WordSamplingError as exc:
            raise click.ClickException(str(exc))
        for word in words:
            click.echo(word)

    flask_app.cli.add_command(sample_words_command)

    return flask_app
