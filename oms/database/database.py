from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from oms.models.database_models import Base
from oms.config import settings


engine = create_engine(settings.database_url, pool_pre_ping=True)
sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=engine):
    Base.metadata.create_all(bind)


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
