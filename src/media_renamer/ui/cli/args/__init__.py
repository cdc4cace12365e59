from .options import CLIArgs, RenameArgs
from .parser import ArgumentParser

__all__ = ["ArgumentParser", "CLIArgs", "RenameArgs"]
