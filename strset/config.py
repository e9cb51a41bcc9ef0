# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

from dataclasses import dataclass, replace
from logging import Logger

from .log import logger as _default_logger

@dataclass(frozen=True)
class _SetConfig:
	'''Pass the options of a set to a read-only data structure shared with its copies and cursors.'''

	element_type : type|None # elements must be instances of this type; None accepts any hashable
	strict       : bool      # detect mutation during iteration
	logger       : Logger

	def check(self, v) -> None:
		'''
		Raise `TypeError` if `v` cannot be stored in a set with these options.

		>>> _SetConfig.create(element_type=str).check(1)
		Traceback (most recent call last):
		...
		TypeError: Bad type for element (expected <class 'str'>): 1
		'''

		if self.element_type is not None and not isinstance(v, self.element_type):
			raise TypeError(f"Bad type for element (expected {self.element_type}): {v!r}")

	def accepts(self, v) -> bool:
		'''Whether `v` could be a member at all. Used so lookups with a foreign type answer `False` instead of raising.'''

		return self.element_type is None or isinstance(v, self.element_type)

	@classmethod
	def create(cls, *, element_type:type|None = None, strict:bool = True, logger:Logger|None = None) -> "_SetConfig":
		if element_type is not None and not isinstance(element_type, type):
			raise TypeError(f"Bad type for option 'element_type' (expected {type}): {element_type!r}")
		if not isinstance(strict, bool):
			raise TypeError(f"Bad type for option 'strict' (expected {bool}): {strict!r}")
		return cls(element_type, strict, logger if logger is not None else _default_logger)
