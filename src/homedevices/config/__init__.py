from .core_config import HomeDevicesConfig

__all__ = ["HomeDevicesConfig"]
