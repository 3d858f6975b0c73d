import os
from datetime import timedelta

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///scoreboard.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Signed identity cookie. Flask-Login's remember cookie carries "<id>|<hmac>".
    REMEMBER_COOKIE_NAME = 'user_id'
    REMEMBER_COOKIE_DURATION = timedelta(days=int(os.environ.get('USER_COOKIE_DAYS', '365')))
    REMEMBER_COOKIE_HTTPONLY = True
    # Name given to the ambient game when the first subscriber creates it
    DEFAULT_GAME_NAME = os.environ.get('DEFAULT_GAME_NAME', 'Main')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
