# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from collections.abc import Iterator
from typing import TypeVar, Generic, TYPE_CHECKING

from .errors import SetModifiedError
from .log import _exc_summary

if TYPE_CHECKING:
	from .core import BaseSet

T = TypeVar("T")

class SetCursor(Iterator[T], Generic[T]):
	'''
	A lazy walk over the elements of a set, driven entirely by the caller.

	Each element is produced exactly once, in no particular order. A cursor is single-use: once exhausted (or abandoned) it cannot be restarted, ask the set for a new one instead. Nothing runs in the background, so dropping a half-read cursor leaks nothing.

	If the set is structurally modified while the cursor is still in use, the next call to `next()` raises `SetModifiedError` (when the set is strict) and the cursor is closed. With `strict=False` the check is skipped and whatever the cursor produces afterwards is undefined.

	>>> from strset import StringSet
	>>> s = StringSet(["a"])
	>>> cursor = s.iter()
	>>> next(cursor)
	'a'
	>>> next(cursor)
	Traceback (most recent call last):
	...
	StopIteration
	'''

	def __init__(self, owner:"BaseSet[T]") -> None:
		self._owner   : "BaseSet[T]|None" = owner
		self._version : int = owner._version
		self._it      : Iterator[T] = iter(owner._keys())

	def __iter__(self) -> "SetCursor[T]":
		return self

	def __next__(self) -> T:
		owner = self._owner
		if owner is None:
			raise StopIteration
		if owner._config.strict and owner._version != self._version:
			self.close()
			err = SetModifiedError(f"{type(owner).__name__} was modified during iteration")
			owner._config.logger.warning(_exc_summary(err))
			raise err
		try:
			return next(self._it)
		except StopIteration:
			self.close()
			raise

	def close(self) -> None:
		'''Release the set. Further calls to `next()` raise `StopIteration`.'''

		self._owner = None
		self._it = iter(())

	@property
	def closed(self) -> bool:
		return self._owner is None

	def __repr__(self) -> str:
		state = "closed" if self._owner is None else f"over {type(self._owner).__name__}"
		return f"<SetCursor {state}>"
