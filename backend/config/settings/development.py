"""
Configuration de développement
"""
from .base import *  # noqa: F401,F403

DEBUG = env.bool('DEBUG', default=True)

ALLOWED_HOSTS = env.list('ALLOWED_HOSTS', default=['localhost', '127.0.0.1'])

LOGGING['loggers']['apps']['level'] = env('LOG_LEVEL', default='DEBUG')
