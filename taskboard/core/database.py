from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from taskboard.core.config import settings

engine = create_engine(
    settings.DATABASE_URL,
    connect_args={"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {},
    echo=False,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db(bind=None):
    """Crée les tables si elles n'existent pas"""
    # Import pour enregistrer le modèle sur Base.metadata
    from taskboard.models import storage_entry  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
