import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Socket.IO / HTTP listener
    PORT = int(os.environ.get('PORT', '3001'))
    ALLOWED_ORIGIN = os.environ.get('ALLOWED_ORIGIN') or 'http://localhost:3000'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Candidates offered to the host per round
    WORD_OPTION_COUNT = int(os.environ.get('WORD_OPTION_COUNT', '3'))
    # points = max(base - attempts * penalty, floor)
    POINTS_BASE = int(os.environ.get('POINTS_BASE', '100'))
    POINTS_PENALTY = int(os.environ.get('POINTS_PENALTY', '10'))
    POINTS_FLOOR = int(os.environ.get('POINTS_FLOOR', '10'))
    # Optional: override the built-in country list
    WORD_LIST = None
