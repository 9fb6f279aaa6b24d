from .base import *  # noqa: F403
from .base import INSTALLED_APPS
from .base import LOGGING
from .base import MIDDLEWARE
from .base import env

USE_DOCKER = env.bool("USE_DOCKER", default=False)

# GENERAL
# ------------------------------------------------------------------------------
DEBUG = True
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="t3XgM0r7vQxS1nYbP9kR2wLfH8cJ5dE4aZ6uN0iO1pW7qT3yV9sB2mK5hG8jF4lD",
)
ALLOWED_HOSTS = ["localhost", "0.0.0.0", "127.0.0.1", "ssr-backend"]  # noqa: S104

# CACHES
# ------------------------------------------------------------------------------
# Redis when running the compose stack, in-process cache otherwise
if USE_DOCKER:
    CACHES = {
        "default": {
            "BACKEND": "django_redis.cache.RedisCache",
            "LOCATION": env("REDIS_URL", default="redis://redis:6379/0"),
            "OPTIONS": {"CLIENT_CLASS": "django_redis.client.DefaultClient"},
        },
    }
    SESSION_ENGINE = "django.contrib.sessions.backends.cache"
    SESSION_CACHE_ALIAS = "default"
else:
    CACHES = {"default": {"BACKEND": "django.core.cache.backends.locmem.LocMemCache"}}

# EMAIL
# ------------------------------------------------------------------------------
EMAIL_BACKEND = "django.core.mail.backends.console.EmailBackend"

# WhiteNoise
# ------------------------------------------------------------------------------
INSTALLED_APPS = ["whitenoise.runserver_nostatic", *INSTALLED_APPS]

# django-debug-toolbar
# ------------------------------------------------------------------------------
INSTALLED_APPS += ["debug_toolbar"]
MIDDLEWARE += ["debug_toolbar.middleware.DebugToolbarMiddleware"]
DEBUG_TOOLBAR_CONFIG = {
    "DISABLE_PANELS": [
        "debug_toolbar.panels.redirects.RedirectsPanel",
        "debug_toolbar.panels.profiling.ProfilingPanel",
    ],
    # the API is JSON only
    "SHOW_TOOLBAR_CALLBACK": lambda request: DEBUG and not request.path.startswith("/api/"),
}
INTERNAL_IPS = ["127.0.0.1"]

# django-extensions
# ------------------------------------------------------------------------------
INSTALLED_APPS += ["django_extensions"]

# SSR Connect
# ------------------------------------------------------------------------------
LOGGING["loggers"]["ssr_connect"] = {"handlers": ["console"], "level": "DEBUG", "propagate": False}

# The Next.js frontend runs on port 3000 and reads the CSRF cookie
CSRF_TRUSTED_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]
CSRF_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_HTTPONLY = False
SESSION_COOKIE_SAMESITE = "Lax"
