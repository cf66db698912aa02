from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "sqlite:///./taskboard.db")

    # Délai artificiel appliqué à chaque opération du task store
    TASK_LATENCY_MS = int(getenv("TASK_LATENCY_MS", "500"))

    # "opaque" ou "jwt"
    TOKEN_STRATEGY = getenv("TOKEN_STRATEGY", "opaque")
    TOKEN_PREFIX = getenv("TOKEN_PREFIX", "mock-jwt-token")
    JWT_SECRET = getenv("JWT_SECRET", "dev-secret-change-in-prod")
    JWT_EXPIRE_MIN = int(getenv("JWT_EXPIRE_MIN", "43200"))  #expire au bout d'1 mois

    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")

    HOME_ROUTE = getenv("HOME_ROUTE", "/")
    LOGIN_ROUTE = getenv("LOGIN_ROUTE", "/login")

settings = Settings()
