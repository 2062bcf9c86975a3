"""Async utilities: AsyncResult for composing Results without awaiting early."""

from tagged_result.async_.result import AsyncResult

__all__ = ['AsyncResult']
