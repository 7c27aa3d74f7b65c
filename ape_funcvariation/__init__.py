from ape import plugins

from ape_funcvariation.backends import ApeBackend, CounterBackend, MemoryBackend
from ape_funcvariation.config import FuncVariationConfig
from ape_funcvariation.counter import Counter
from ape_funcvariation.exceptions import FuncVariationError, GuardRejected, ModelMismatchError
from ape_funcvariation.harness import ModelCheckedCounter, repeat, run_calls
from ape_funcvariation.types import Call, Operation, Outcome


@plugins.register(plugins.Config)
def config_class():
    return FuncVariationConfig


__all__ = [
    "ApeBackend",
    "Call",
    "Counter",
    "CounterBackend",
    "FuncVariationConfig",
    "FuncVariationError",
    "GuardRejected",
    "MemoryBackend",
    "ModelCheckedCounter",
    "ModelMismatchError",
    "Operation",
    "Outcome",
    "repeat",
    "run_calls",
]
