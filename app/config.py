from pydantic import BaseModel
import os
import logging
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "secret"


class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "AdoptaPet")
    env: str = os.getenv("APP_ENV", "dev")
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "adoptapet")
    jwt_secret: str = os.getenv("JWT_SECRET") or DEFAULT_JWT_SECRET
    jwt_secret_configured: bool = bool(os.getenv("JWT_SECRET"))
    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:5173")
    max_image_bytes: int = int(os.getenv("MAX_IMAGE_BYTES", str(5 * 1024 * 1024)))


_settings: Settings | None = None
def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
        if not _settings.jwt_secret_configured:
            # Se mantiene el valor por defecto; sólo se avisa
            logger.warning("JWT_SECRET no configurado, usando secreto por defecto")
    return _settings
