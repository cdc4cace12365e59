from .executor import CommandExecutor, CommandResult
from .plan import PlanCommand
from .rename import RenameCommand

__all__ = ["CommandExecutor", "CommandResult", "PlanCommand", "RenameCommand"]
