"""
Configuration de production
"""
from .base import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = env('SECRET_KEY')

SECURE_PROXY_SSL_HEADER = ('HTTP_X_FORWARDED_PROTO', 'https')
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True
