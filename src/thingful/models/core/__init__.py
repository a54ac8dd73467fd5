from .core_model import CoreModel, isoformat_utc

__all__ = ["CoreModel", "isoformat_utc"]
