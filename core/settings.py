"""Django settings for the Mini CRM project.

This file centralizes environment-driven configuration used by manage
commands, tests, and the running application.
"""

import os
from datetime import timedelta
from pathlib import Path

import dj_database_url
from dotenv import load_dotenv
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# Load environment variables
load_dotenv()

# --------------------------------------------------------------------------
# CORE SECURITY & DEBUG SETTINGS
# --------------------------------------------------------------------------

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "default-insecure-key")
# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = os.getenv("DEBUG", "False") == "True"
ALLOWED_HOSTS = [h.strip() for h in os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",") if h.strip()]

# --------------------------------------------------------------------------
# APPLICATION DEFINITION
# --------------------------------------------------------------------------

SYSTEM_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "api.apps.ApiConfig",
]


THIRD_PARTY_APPS = [
    "rest_framework",
    "rest_framework_simplejwt.token_blacklist",
    "django_filters",
    "drf_spectacular",
    "corsheaders",
]

# Combine all apps
INSTALLED_APPS = SYSTEM_APPS + THIRD_PARTY_APPS

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    # Reject requests where user was deleted/disabled after token issued
    "api.middleware.RejectDisabledUserMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "core.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "core.wsgi.application"


# --------------------------------------------------------------------------
# DATABASE CONFIGURATION
# --------------------------------------------------------------------------

if os.getenv("ENVIRONMENT", "development") == "development":
    # Development: SQLite
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }
else:
    # Production: PostgreSQL
    DATABASES = {"default": dj_database_url.config(default=os.getenv("DATABASE_URL"))}


# --------------------------------------------------------------------------
# AUTHENTICATION & CUSTOM USER MODEL
# --------------------------------------------------------------------------

# Set your Custom User Model
AUTH_USER_MODEL = "api.CustomUser"

# Password validation
AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.CommonPasswordValidator",
    },
    {
        "NAME": "django.contrib.auth.password_validation.NumericPasswordValidator",
    },
]

AUTHENTICATION_BACKENDS = [
    "django.contrib.auth.backends.ModelBackend",
]

# Negative user-status lookups made by the middleware are cached this long.
API_MIDDLEWARE_USER_CACHE_TTL_SECONDS = int(os.getenv("API_MIDDLEWARE_USER_CACHE_TTL_SECONDS", 5))

# --------------------------------------------------------------------------
# DRF & JWT CONFIGURATION
# --------------------------------------------------------------------------


REST_FRAMEWORK = {
    "DEFAULT_FILTER_BACKENDS": [
        "django_filters.rest_framework.DjangoFilterBackend",
    ],
    # Bearer JWT with distinct invalid/expired/removed-user messages
    "DEFAULT_AUTHENTICATION_CLASSES": ("api.utils.authentication.StaffJWTAuthentication",),
    "EXCEPTION_HANDLER": "api.utils.response_utils.custom_exception_handler",
    "DEFAULT_PERMISSION_CLASSES": ("rest_framework.permissions.IsAuthenticated",),
    "DEFAULT_THROTTLE_CLASSES": [
        "rest_framework.throttling.AnonRateThrottle",
        "rest_framework.throttling.UserRateThrottle",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "anon": os.getenv("THROTTLE_ANON_RATE", "1000/hour"),
        "user": os.getenv("THROTTLE_USER_RATE", "5000/hour"),
        "login": os.getenv("THROTTLE_LOGIN_RATE", "10/minute"),
        "inquiry_submit": os.getenv("THROTTLE_INQUIRY_SUBMIT_RATE", "60/minute"),
    },
    # Configuration for drf-spectacular
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

# Settings for drf-spectacular
SPECTACULAR_SETTINGS = {
    # Basic API info
    "TITLE": "Mini CRM API",
    "DESCRIPTION": (
        "REST API for the Mini CRM. Public inquiry submission and tracking, "
        "and staff endpoints for managing inquiries and follow-ups."
    ),
    "VERSION": "1.0.0",
    # Security & schema visibility
    "SERVE_INCLUDE_SCHEMA": False,  # Hide raw schema in production
    "COMPONENT_SPLIT_REQUEST": True,  # Separate request/response schemas
    "DEFAULT_GENERATOR_CLASS": "drf_spectacular.generators.SchemaGenerator",
    # Authentication: JWT only
    "AUTHENTICATION_WHITELIST": [
        "api.utils.authentication.StaffJWTAuthentication",
    ],
    # Global security scheme for Swagger UI "Authorize"
    "SECURITY": [{"bearerAuth": []}],
    "COMPONENTS": {
        "securitySchemes": {
            "bearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
            }
        },
        "parameters": {
            "page": OpenApiParameter(
                name="page",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Page number for paginated results",
            ),
            "limit": OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Number of items per page",
            ),
        },
    },
}


SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME": timedelta(minutes=int(os.getenv("JWT_ACCESS_MINUTES", 120))),
    "REFRESH_TOKEN_LIFETIME": timedelta(days=int(os.getenv("JWT_REFRESH_DAYS", 7))),
    "ROTATE_REFRESH_TOKENS": True,
    "BLACKLIST_AFTER_ROTATION": True,
    "UPDATE_LAST_LOGIN": True,
    "ALGORITHM": "HS256",
    "SIGNING_KEY": SECRET_KEY,
    "VERIFYING_KEY": None,
    "AUTH_HEADER_TYPES": ("Bearer",),
    "AUTH_HEADER_NAME": "HTTP_AUTHORIZATION",
    "USER_ID_FIELD": "id",
    "USER_ID_CLAIM": "user_id",
    # Use your custom serializer to include 'role' in the response
    "TOKEN_OBTAIN_SERIALIZER": "api.serializers.serializers_auth.CustomTokenObtainPairSerializer",
}

# --------------------------------------------------------------------------
# INQUIRIES
# --------------------------------------------------------------------------

INQUIRY_REFERENCE_PREFIX = os.getenv("INQUIRY_REFERENCE_PREFIX", "INQ")
INQUIRY_PAGE_SIZE = int(os.getenv("INQUIRY_PAGE_SIZE", 10))
INQUIRY_MAX_PAGE_SIZE = int(os.getenv("INQUIRY_MAX_PAGE_SIZE", 100))

# --------------------------------------------------------------------------
# STATIC FILES
# --------------------------------------------------------------------------
STATIC_URL = "/static/"

if os.getenv("ENVIRONMENT", "development") == "development":
    STATIC_ROOT = BASE_DIR / "staticfiles"  # For collectstatic in development
else:
    STATIC_ROOT = os.getenv("STATIC_ROOT", "/var/www/backend/api/staticfiles/")


# --------------------------------------------------------------------------
# INTERNATIONALIZATION
# --------------------------------------------------------------------------

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True


# Default primary key field type
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# --------------------------------------------------------------------------
# CORS & COOKIES
# --------------------------------------------------------------------------

CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOWED_ORIGINS", "http://localhost:5173,http://127.0.0.1:5173").split(",")
    if origin.strip()
]

CORS_ALLOW_CREDENTIALS = True

# Session and CSRF cookie settings (Django admin + protected API docs)
SESSION_COOKIE_SAMESITE = "Lax"
SESSION_COOKIE_SECURE = not DEBUG and os.getenv("ENVIRONMENT", "development") != "development"
SESSION_COOKIE_HTTPONLY = True

CSRF_COOKIE_SAMESITE = "Lax"
CSRF_COOKIE_SECURE = SESSION_COOKIE_SECURE
CSRF_TRUSTED_ORIGINS = CORS_ALLOWED_ORIGINS


# --------------------------------------------------------------------------
# LOGGING
# --------------------------------------------------------------------------

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{asctime} {levelname} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
    "loggers": {
        "api": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
            "propagate": False,
        },
        "django.request": {
            "handlers": ["console"],
            "level": "ERROR",
            "propagate": False,
        },
    },
}
