"""
# Exceptions raised by the time package.

# All failures are subclasses of &TimeError which is itself a &ValueError;
# callers that treated the package's validation failures as &ValueError
# continue to work.

# [ Elements ]
# /InvalidDate/
	# Month or day out of range, or a day of year outside the year.
# /InvalidTime/
	# Hour, minute, second, or subsecond out of range.
# /InvalidFormat/
	# Text that does not match the ISO-8601 or simple string grammar.
# /InvalidYearBC/
	# &year_bc queried on an A.D. value, or set to a non-positive value.
"""

class TimeError(ValueError):
	"""
	# Base class for validation failures of time values.
	"""

class InvalidDate(TimeError):
	pass

class InvalidTime(TimeError):
	pass

class InvalidFormat(TimeError):
	"""
	# The given text does not conform to the expected grammar.

	# [ Properties ]
	# /source/
		# The text that failed to parse.
	# /style/
		# The name of the grammar that was expected.
	"""

	def __init__(self, message, source=None, style=None):
		super().__init__(message)
		self.source = source
		self.style = style

	def __str__(self):
		msg = self.args[0]
		if self.source is not None:
			msg += ': ' + repr(self.source)
		return msg

class InvalidYearBC(TimeError):
	pass
