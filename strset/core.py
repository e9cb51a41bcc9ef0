# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from abc import abstractmethod
from collections.abc import MutableSet, Set, Mapping, Iterable, Callable, Hashable
from typing import TypeVar, Generic, AbstractSet, Any, ClassVar, Self
from logging import Logger
from types import NotImplementedType

from .config import _SetConfig
from .cursor import SetCursor

T = TypeVar("T", bound=Hashable)
S = TypeVar("S", bound="BaseSet")

def _as_container(other:Iterable[Any]) -> AbstractSet[Any]|Mapping[Any, Any]:
	'''Make `other` cheap to probe with `in`. Sets and mappings are used as they are, anything else is materialized.'''

	if isinstance(other, Set|Mapping):
		return other
	return frozenset(other)

class BaseSet(MutableSet[T], Generic[T]):
	'''
	An unordered collection of unique elements which supports lookups, insertions, deletions, iteration, and the common binary set operations. It is not thread-safe.

	Subclasses only provide the storage: `__len__`, `_has()`, `_insert()`, `_delete()`, `_keys()` and `_reset()`. Everything else, including the bulk operations, is written against those.

	`BaseSet` is also a `collections.abc.MutableSet`, so the usual operators (`|`, `&`, `-`, `^`, `<=`, `==`, ...) work and produce sets of the same type with the same options.

	A structural change (an element actually added or removed) while a cursor from `iter()` is in use is a contract violation. With `strict=True` (default) it is reported as `SetModifiedError` on the cursor's next step; otherwise the outcome is undefined. The same applies to callbacks given to `do()`, `do_while()` and `remove_if()`.
	'''

	element_type : ClassVar[type|None] = None

	def __init__(self, items:Iterable[T]|None = None, *, strict:bool = True, logger:Logger|None = None) -> None:
		self._config  : _SetConfig = _SetConfig.create(element_type=self.element_type, strict=strict, logger=logger)
		self._version : int = 0 # bumped on every structural change
		if isinstance(items, str):
			raise TypeError(f"Bad type for argument 'items' (expected an iterable of elements, not {str}): {items!r}")
		if items is not None:
			self.union(items)

	# --- Storage ---

	@abstractmethod
	def __len__(self) -> int:
		raise NotImplementedError()

	@abstractmethod
	def _has(self, v:T) -> bool:
		raise NotImplementedError()

	@abstractmethod
	def _insert(self, v:T) -> bool:
		'''Store `v`. Returns `False` if it was already present.'''
		raise NotImplementedError()

	@abstractmethod
	def _delete(self, v:T) -> bool:
		'''Drop `v`. Returns `False` if it was not present.'''
		raise NotImplementedError()

	@abstractmethod
	def _keys(self) -> Iterable[T]:
		'''A live view of the stored elements, walked by `SetCursor`.'''
		raise NotImplementedError()

	@abstractmethod
	def _reset(self) -> None:
		raise NotImplementedError()

	# --- Core operations ---

	@property
	def strict(self) -> bool:
		return self._config.strict

	def _spawn(self, items:Iterable[T]|None = None) -> Self:
		'''An independent set of the same type and options as this one.'''

		return type(self)(items, strict=self._config.strict, logger=self._config.logger)

	def copy(self) -> Self:
		'''
		Returns a new set that contains exactly the same elements as this set.

		>>> a = StringSet(["x"])
		>>> b = a.copy()
		>>> b.add("y")
		>>> sorted(a), sorted(b)
		(['x'], ['x', 'y'])
		'''

		res = self._spawn()
		res.union(self)
		return res

	def contains(self, v:Any) -> bool:
		'''Returns `True` if and only if this set contains `v`.'''

		return self._config.accepts(v) and self._has(v)

	def add(self, v:T) -> None:
		'''Inserts `v` into this set. Adding an element that is already present changes nothing.'''

		self._config.check(v)
		if self._insert(v):
			self._version += 1

	def remove(self, v:Any) -> bool: # type: ignore [override]
		'''
		Removes `v` from this set, if it is present. Returns `True` if and only if `v` was present.

		Unlike `set.remove()`, a missing element is not an error.

		>>> s = StringSet(["a"])
		>>> s.remove("a"), s.remove("a")
		(True, False)
		'''

		if not self._config.accepts(v):
			return False
		if self._delete(v):
			self._version += 1
			return True
		return False

	def discard(self, v:Any) -> None:
		self.remove(v)

	def to_list(self) -> list[T]:
		'''Returns every element of this set, in no particular order.'''

		return list(self._keys())

	def iter(self) -> SetCursor[T]:
		'''Returns a cursor that yields each element of this set exactly once. See `SetCursor`.'''

		return SetCursor(self)

	def do(self, f:Callable[[T], Any]) -> None:
		'''Executes `f(v)` for every element `v` in this set.'''

		for item in self.iter():
			f(item)

	def do_while(self, f:Callable[[T], bool]) -> None:
		'''
		Executes `f(v)` once for every element `v` in this set, stopping as soon as `f` returns a falsy value.

		>>> seen = []
		>>> StringSet(["a", "b", "c"]).do_while(lambda v: seen.append(v) is not None)
		>>> len(seen)
		1
		'''

		for item in self.iter():
			if not f(item):
				break

	# --- Bulk operations ---

	def union(self, other:Iterable[T]) -> None:
		'''Adds every element of `other` into this set.'''

		if other is self:
			return
		for item in other:
			self.add(item)

	def intersect(self, other:Iterable[Any]) -> None:
		'''
		Removes every element not in `other` from this set.

		>>> s = StringSet(["a", "b", "c"])
		>>> s.intersect(StringSet(["b", "c", "d"]))
		>>> sorted(s)
		['b', 'c']
		'''

		if other is self:
			return
		keep = _as_container(other)
		to_remove = [item for item in self.iter() if item not in keep]
		for item in to_remove:
			self.remove(item)
		self._config.logger.debug(f"{type(self).__name__}.intersect removed {len(to_remove)} element(s)")

	def subtract(self, other:Iterable[Any]) -> None:
		'''Removes every element of `other` from this set.'''

		if other is self:
			self.clear()
			return
		removed = 0
		for item in other:
			if self.remove(item):
				removed += 1
		self._config.logger.debug(f"{type(self).__name__}.subtract removed {removed} element(s)")

	def clear(self) -> None:
		'''Removes all elements from this set.'''

		count = len(self)
		if count:
			self._reset()
			self._version += 1
		self._config.logger.debug(f"{type(self).__name__}.clear removed {count} element(s)")

	def init(self) -> None:
		'''Same as `clear()`.'''

		self.clear()

	def remove_if(self, f:Callable[[T], bool]) -> None:
		'''
		Removes every element `v` from this set for which `f(v)` is true.

		>>> s = StringSet(["apple", "avocado", "banana"])
		>>> s.remove_if(lambda v: v.startswith("a"))
		>>> s.to_list()
		['banana']
		'''

		to_remove = [item for item in self.iter() if f(item)]
		for item in to_remove:
			self.remove(item)
		self._config.logger.debug(f"{type(self).__name__}.remove_if removed {len(to_remove)} element(s)")

	# --- Comparisons ---

	def is_subset(self, other:Iterable[Any]) -> bool:
		'''
		Returns `True` if and only if every element of this set is an element of `other`.

		>>> StringSet().is_subset(StringSet(["x"]))
		True
		'''

		if other is self:
			return True
		container = _as_container(other)
		return all(item in container for item in self.iter())

	def is_superset(self, other:Iterable[Any]) -> bool:
		'''Returns `True` if and only if every element of `other` is an element of this set.'''

		if isinstance(other, BaseSet):
			return other.is_subset(self)
		return all(self.contains(item) for item in other)

	def is_equal(self, other:Iterable[Any]) -> bool:
		'''Returns `True` if and only if this set and `other` contain exactly the same elements.'''

		container = _as_container(other)
		if len(self) != len(container):
			return False
		return self.is_subset(container)

	# --- Python protocols ---

	def __contains__(self, v:Any) -> bool:
		return self.contains(v)

	def __iter__(self) -> SetCursor[T]:
		return self.iter()

	def __eq__(self, other:Any) -> bool|NotImplementedType:
		if not isinstance(other, Set):
			return NotImplemented
		return self.is_equal(other)

	def __le__(self, other:Any) -> bool|NotImplementedType:
		if not isinstance(other, Set):
			return NotImplemented
		return self.is_subset(other)

	def __ge__(self, other:Any) -> bool|NotImplementedType:
		if not isinstance(other, Set):
			return NotImplemented
		return self.is_superset(other)

	__hash__ = None # type: ignore [assignment]

	def __ior__(self, other:AbstractSet[T]) -> Self: # type: ignore [override]
		self.union(other)
		return self

	def __iand__(self, other:AbstractSet[Any]) -> Self:
		self.intersect(other)
		return self

	def __isub__(self, other:AbstractSet[Any]) -> Self:
		self.subtract(other)
		return self

	def _from_iterable(self, it:Iterable[T]) -> Self: # type: ignore [override]
		return self._spawn(it)

	def __copy__(self) -> Self:
		return self.copy()

	def __repr__(self) -> str:
		elements = ", ".join(repr(x) for x in self._keys())
		return f"{type(self).__name__}([{elements}])"

class HashSet(BaseSet[T]):
	'''A `BaseSet` kept in the keys of a `dict`. The order in which elements come out is an artifact of the `dict` and must not be relied upon.'''

	def __init__(self, items:Iterable[T]|None = None, *, strict:bool = True, logger:Logger|None = None) -> None:
		self._data : dict[T, None] = {}
		super().__init__(items, strict=strict, logger=logger)

	def __len__(self) -> int:
		return len(self._data)

	def _has(self, v:T) -> bool:
		return v in self._data

	def _insert(self, v:T) -> bool:
		if v in self._data:
			return False
		self._data[v] = None
		return True

	def _delete(self, v:T) -> bool:
		if v in self._data:
			del self._data[v]
			return True
		return False

	def _keys(self) -> Iterable[T]:
		return self._data.keys()

	def _reset(self) -> None:
		self._data.clear()

class StringSet(HashSet[str]):
	'''
	A `HashSet` of strings. Adding anything other than a `str` raises `TypeError`; looking one up simply answers `False`.

	>>> s = StringSet(["a", "b", "a"])
	>>> len(s)
	2
	>>> 1 in s
	False
	'''

	element_type = str

def new_string_set(*items:str) -> StringSet:
	'''
	Returns a new `StringSet` pre-populated with the given items.

	>>> sorted(new_string_set("b", "a", "b"))
	['a', 'b']
	'''

	return StringSet(items)

def union(s1:S, s2:Iterable[Any]) -> S:
	'''
	Returns a new set which is the union of `s1` and `s2`. `s1` and `s2` are unmodified.

	>>> sorted(union(new_string_set("a", "b"), new_string_set("b", "c")))
	['a', 'b', 'c']
	'''

	s3 = s1.copy()
	s3.union(s2)
	return s3

def intersect(s1:S, s2:Iterable[Any]) -> S:
	'''Returns a new set which is the intersection of `s1` and `s2`. `s1` and `s2` are unmodified.'''

	s3 = s1.copy()
	s3.intersect(s2)
	return s3

def subtract(s1:S, s2:Iterable[Any]) -> S:
	'''Returns a new set which is the difference between `s1` and `s2`. `s1` and `s2` are unmodified.'''

	s3 = s1.copy()
	s3.subtract(s2)
	return s3
