from config.settings import AppConfig, Config, DatabaseConfig

__all__ = ["AppConfig", "Config", "DatabaseConfig"]
