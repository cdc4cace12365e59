from .renamer_service import Renamer

__all__ = ["Renamer"]
