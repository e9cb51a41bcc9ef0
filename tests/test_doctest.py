# Copyright (c) 2025 Joe Walter
# GNU General Public License v3.0

import doctest
import logging

from strset import config, core, cursor, log

logger = logging.getLogger("strset.tests")

def load_tests(loader, tests, ignore):
	logger.info("Adding doctests to unittest.")
	tests.addTests(doctest.DocTestSuite(config))
	tests.addTests(doctest.DocTestSuite(core))
	tests.addTests(doctest.DocTestSuite(cursor))
	tests.addTests(doctest.DocTestSuite(log))
	return tests
