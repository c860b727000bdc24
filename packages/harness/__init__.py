from .core import play_round
from .io import write_csv, write_manifest

__all__ = ["play_round", "write_csv", "write_manifest"]
