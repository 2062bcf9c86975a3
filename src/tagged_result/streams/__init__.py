"""Result-aware operators over async-iterable streams."""

from tagged_result.streams.operators import (
    else_map,
    else_map_to,
    filter_result_err,
    filter_result_ok,
    result_map,
    result_map_err,
    result_map_err_to,
    result_map_to,
    result_merge_map,
    result_switch_map,
    tap_result_err,
    tap_result_ok,
)
from tagged_result.streams.sources import Operator, from_iterable, of, pipe

__all__ = [
    'Operator',
    'else_map',
    'else_map_to',
    'filter_result_err',
    'filter_result_ok',
    'from_iterable',
    'of',
    'pipe',
    'result_map',
    'result_map_err',
    'result_map_err_to',
    'result_map_to',
    'result_merge_map',
    'result_switch_map',
    'tap_result_err',
    'tap_result_ok',
]
