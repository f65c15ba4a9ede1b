from .catalog import dump, dumps, load, loads
from .invoker import DirectInvoker, ShellInvoker, select_invoker
from .model import Catalog, Step
from .runner import RunResult, run_group

__all__ = [
    "load", "loads", "dump", "dumps",
    "DirectInvoker", "ShellInvoker", "select_invoker",
    "Catalog", "Step",
    "RunResult", "run_group",
]
