# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import logging
import unittest

from strset import StringSet, SetCursor, SetModifiedError, StateError, new_string_set
from .helpers import *

logger = logging.getLogger("strset.tests")

class TestCursor(unittest.TestCase):

	def test_yields_each_once(self):
		s = new_string_set("a", "b", "c")
		cursor = s.iter()
		self.assertIsInstance(cursor, SetCursor)
		self.assertEqual(sorted(cursor), ["a", "b", "c"])

		self.assertEqual(sorted(iter(s)), ["a", "b", "c"])
		self.assertEqual(list(new_string_set().iter()), [])

	def test_single_use(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		self.assertIs(iter(cursor), cursor)
		self.assertEqual(len(list(cursor)), 2)
		self.assertTrue(cursor.closed)
		self.assertEqual(list(cursor), [])
		with self.assertRaises(StopIteration):
			next(cursor)

		# a new cursor starts a fresh walk
		self.assertEqual(len(list(s.iter())), 2)

	def test_lazy(self):
		s = new_string_set("a", "b", "c")
		cursor = s.iter()
		first = next(cursor)
		self.assertIn(first, s)
		self.assertFalse(cursor.closed)
		rest = list(cursor)
		self.assertEqual(sorted([first] + rest), ["a", "b", "c"])

	def test_close(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		next(cursor)
		cursor.close()
		self.assertTrue(cursor.closed)
		with self.assertRaises(StopIteration):
			next(cursor)

		# an abandoned cursor does not block mutation
		s.add("c")
		self.assertEqual(len(s), 3)

	def test_repr(self):
		cursor = new_string_set("a").iter()
		self.assertEqual(repr(cursor), "<SetCursor over StringSet>")
		list(cursor)
		self.assertEqual(repr(cursor), "<SetCursor closed>")

class TestMutationDuringIteration(unittest.TestCase):

	def test_add_invalidates(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		next(cursor)
		s.add("c")
		with quiet():
			with self.assertRaises(SetModifiedError):
				next(cursor)
		self.assertTrue(cursor.closed)
		with self.assertRaises(StopIteration):
			next(cursor)

	def test_remove_invalidates(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		s.remove("a")
		with quiet():
			with self.assertRaises(SetModifiedError):
				next(cursor)

	def test_clear_invalidates(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		s.clear()
		with quiet():
			with self.assertRaises(SetModifiedError):
				next(cursor)

	def test_same_size_swap_invalidates(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		next(cursor)
		s.remove("a")
		s.add("z")
		with quiet():
			with self.assertRaises(SetModifiedError):
				next(cursor)

	def test_noop_mutations_do_not_invalidate(self):
		s = new_string_set("a", "b")
		cursor = s.iter()
		next(cursor)
		s.add("a")
		s.remove("missing")
		s.union(["b"])
		s.subtract(["missing"])
		StringSet().clear()
		self.assertEqual(len(list(cursor)), 1)

	def test_do_callback_mutating(self):
		s = new_string_set("a", "b", "c")
		with quiet():
			with self.assertRaises(SetModifiedError):
				s.do(lambda v: s.add(v + "!"))
			with self.assertRaises(SetModifiedError):
				s.do_while(lambda v: s.remove(v))

	def test_remove_if_callback_mutating(self):
		s = new_string_set("a", "b")
		with quiet():
			with self.assertRaises(SetModifiedError):
				s.remove_if(lambda v: s.add(v * 2) or True)

	def test_subtract_own_cursor(self):
		s = new_string_set("a", "b")
		with quiet():
			with self.assertRaises(SetModifiedError):
				s.subtract(s.iter())

	def test_is_state_error(self):
		self.assertTrue(issubclass(SetModifiedError, StateError))
		self.assertTrue(issubclass(StateError, RuntimeError))

	def test_warning_logged(self):
		s = new_string_set("a")
		cursor = s.iter()
		s.add("b")
		with self.assertLogs("strset", level="WARNING") as cm:
			with self.assertRaises(SetModifiedError):
				next(cursor)
		self.assertEqual(cm.output, ["WARNING:strset:SetModifiedError: StringSet was modified during iteration"])

	def test_not_strict(self):
		s = StringSet(["a", "b"], strict=False)
		self.assertFalse(s.strict)
		cursor = s.iter()
		next(cursor)
		s.remove("a")
		s.add("c")
		# undefined, but never reported as SetModifiedError
		try:
			list(cursor)
		except SetModifiedError:
			self.fail("non-strict cursor raised SetModifiedError")
		except RuntimeError:
			pass

	def test_not_strict_list_backed(self):
		s = ListSet(["a", "b", "c"], strict=False)
		seen = []
		def visit(v):
			seen.append(v)
			if v == "a":
				s.add("d")
		s.do(visit)
		self.assertIn("a", seen)

if __name__ == "__main__":
	unittest.main()
