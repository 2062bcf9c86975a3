"""tagged-result: Result and Option tagged unions for Python 3.13+.

Flat imports (preferred):
    from tagged_result import Result, Ok, Err, Option, Some, Nothing
    from tagged_result import wrap, wrap_async, all_ok, any_ok, AsyncResult

Submodule imports (for organization):
    from tagged_result.result import Ok, Err, Result
    from tagged_result.option import Some, Nothing, Option
    from tagged_result.variant import Variant
    from tagged_result.streams import pipe, of, result_map, filter_result_ok
"""

# Config
from tagged_result._config import ResultConfig, get_config, init

# Async
from tagged_result.async_ import AsyncResult

# Decorators
from tagged_result.decorators import safe, safe_async

# Errors
from tagged_result.errors import MatchError, UnwrapError

# Option types
from tagged_result.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    all_some,
    any_some,
    is_option,
)

# Result types
from tagged_result.result import (
    Err,
    Ok,
    Result,
    all_ok,
    any_ok,
    collect,
    is_result,
    wrap,
    wrap_async,
)

# Variant base
from tagged_result.variant import Variant

__all__ = [
    'AsyncResult',
    'Err',
    'MatchError',
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Result',
    'ResultConfig',
    'Some',
    'UnwrapError',
    'Variant',
    'all_ok',
    'all_some',
    'any_ok',
    'any_some',
    'collect',
    'get_config',
    'init',
    'is_option',
    'is_result',
    'safe',
    'safe_async',
    'wrap',
    'wrap_async',
]
