from app.core.config import Settings, settings

__all__ = ["Settings", "settings"]
