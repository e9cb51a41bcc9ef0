import sys
import logging

# Summary of logging levels used in this package:
# DEBUG    = bookkeeping of bulk operations (how many elements were removed, etc.)
# INFO     = not used by the set itself; left to callers sharing the logger
# WARNING  = a contract violation was detected (e.g. mutation during iteration)
# ERROR    = not used
# CRITICAL = not used

def _exc_summary(e) -> str:
	'''
	Get a one-line summary of an `Exception`.

	>>> _exc_summary(KeyError("a"))
	"KeyError: 'a'"
	>>> _exc_summary(ValueError())
	'ValueError'
	'''

	error_type = type(e).__name__
	error_message = str(e)
	if error_message:
		return f"{error_type}: {error_message}"
	return error_type

class _DebugInfoFilter(logging.Filter):
	'''Logging filter that only allows DEBUG and INFO records to pass.'''
	def filter(self, record):
		return logging.DEBUG <= record.levelno <= logging.INFO

class _NonEmptyFilter(logging.Filter):
	'''Logging filter that only allows non-empty messages.'''
	def filter(self, record):
		return bool(str(record.msg).strip())

class _ConsoleFormatter(logging.Formatter):
	BASE_FORMAT = "%(name)s: %(message)s"

	def __init__(self, fmt=BASE_FORMAT, datefmt=None, style="%"):
		super().__init__(fmt, datefmt, style)

	def format(self, record):
		msg = super().format(record)
		if record.levelno == logging.DEBUG:
			msg = "  " + msg.replace("\n", "\n  ").rstrip(" ")
		elif record.levelno >= logging.WARNING:
			msg = f"{record.levelname}: {msg}"
		return msg

logger = logging.getLogger("strset")

def setup_logger():
	if not logger.handlers:
		logger.setLevel(logging.INFO)
		handler_stdout = logging.StreamHandler(sys.stdout)
		handler_stderr = logging.StreamHandler(sys.stderr)
		handler_stdout.addFilter(_DebugInfoFilter())
		handler_stdout.addFilter(_NonEmptyFilter())
		handler_stdout.setLevel(logging.DEBUG)
		handler_stderr.setLevel(logging.WARNING)
		handler_stdout.setFormatter(_ConsoleFormatter())
		handler_stderr.setFormatter(_ConsoleFormatter())
		logger.addHandler(handler_stdout)
		logger.addHandler(handler_stderr)

setup_logger()
