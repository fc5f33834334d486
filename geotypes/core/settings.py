import os


class Settings:
    LOG_LEVEL: str = os.getenv('GEOTYPES_LOG_LEVEL', 'WARNING').upper()
    LOG_FORMAT: str = os.getenv('GEOTYPES_LOG_FORMAT', '%(asctime)s %(levelname)s %(name)s: %(message)s')
    LOG_DATE_FORMAT: str = '%Y-%m-%d %H:%M:%S'
