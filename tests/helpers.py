# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import logging
from typing import Iterable

from strset import BaseSet

class TempLoggingLevel:
	def __init__(self, logger, level):
		self.logger = logger
		self.level = level
	def __enter__(self):
		self.old_level = self.logger.level
		self.logger.setLevel(self.level)
	def __exit__(self, exc_type, exc_val, exc_tb):
		self.logger.setLevel(self.old_level)

def quiet():
	'''Silence the package logger, e.g. around deliberate contract violations.'''
	return TempLoggingLevel(logging.getLogger("strset"), logging.CRITICAL)

class ListSet(BaseSet):
	'''Minimal second backing store: only the storage hooks, kept in a list. Used to check that everything else in `BaseSet` is generic.'''

	def __init__(self, items:Iterable|None = None, **kwargs):
		self._items : list = []
		super().__init__(items, **kwargs)

	def __len__(self):
		return len(self._items)

	def _has(self, v):
		return v in self._items

	def _insert(self, v):
		if v in self._items:
			return False
		self._items.append(v)
		return True

	def _delete(self, v):
		try:
			self._items.remove(v)
		except ValueError:
			return False
		return True

	def _keys(self):
		return self._items

	def _reset(self):
		self._items.clear()

def members(s) -> list:
	'''Elements of `s` in a stable order, for comparisons in assertions.'''
	return sorted(s.to_list())
