"""
# Data regarding Earth-based units of time. (The earth day)

# The base unit of the package is the hnsec, a hecto-nanosecond or one hundred
# nanoseconds. Days are uniformly twenty-four hours; leap seconds do not exist.
"""

#: Number of seconds contained in a `minute`.
seconds_in_minute = 60

#: Number of minutes contained in an `hour`.
minutes_in_hour = 60

#: Number of hours contained in an earth `day`.
hours_in_day = 24

#: Number of days contained in a `week`.
days_in_week = 7

hnsecs_in_microsecond = 10
hnsecs_in_millisecond = 1000 * hnsecs_in_microsecond
hnsecs_in_second = 1000 * hnsecs_in_millisecond
hnsecs_in_minute = seconds_in_minute * hnsecs_in_second
hnsecs_in_hour = minutes_in_hour * hnsecs_in_minute
hnsecs_in_day = hours_in_day * hnsecs_in_hour
hnsecs_in_week = days_in_week * hnsecs_in_day

#: Unit names and their size in hnsecs.
unit_hnsecs = {
	'hnsec': 1,
	'microsecond': hnsecs_in_microsecond,
	'millisecond': hnsecs_in_millisecond,
	'second': hnsecs_in_second,
	'minute': hnsecs_in_minute,
	'hour': hnsecs_in_hour,
	'day': hnsecs_in_day,
	'week': hnsecs_in_week,
}

#: Calendar units whose size depends on the date they are applied to.
calendar_units = ('year', 'month')

#: Recognized spellings of the units mapped to their canonical name.
unit_names = {
	k: k for k in tuple(unit_hnsecs) + calendar_units
}
unit_names.update([(k + 's', k) for k in list(unit_names)])
unit_names.update([
	('usecs', 'microsecond'),
	('msecs', 'millisecond'),
])

def unit(name, accepted=None):
	"""
	# Resolve the canonical name of the unit identified by &name.

	# [ Parameters ]
	# /accepted/
		# Optional collection of canonical names that the caller supports.

	# [ Exceptions ]
	# /ValueError/
		# When the unit is unknown or not in &accepted.
	"""
	try:
		canonical = unit_names[name]
	except (KeyError, TypeError):
		raise ValueError("unknown unit of time: %r" %(name,)) from None

	if accepted is not None and canonical not in accepted:
		raise ValueError("unit %r is not supported here; expecting one of %r" %(
			name, tuple(accepted)
		))
	return canonical

def hnsecs_from_clock(hour, minute, second):
	"""
	# Convert the clock fields to hnsecs since midnight.
	"""
	return (((hour * minutes_in_hour) + minute) * seconds_in_minute + second) * hnsecs_in_second

def clock_from_hnsecs(hnsecs, divmod=divmod):
	"""
	# Decompose hnsecs since midnight into `(hour, minute, second, hnsecs)`.
	# The given value is expected to be within `[0, hnsecs_in_day)`.
	"""
	hour, hnsecs = divmod(hnsecs, hnsecs_in_hour)
	minute, hnsecs = divmod(hnsecs, hnsecs_in_minute)
	second, hnsecs = divmod(hnsecs, hnsecs_in_second)
	return (hour, minute, second, hnsecs)

#: Std time of 1970-01-01T00:00:00Z; hnsecs between 0001-01-01 and the Unix epoch.
unix_epoch_hnsecs = 621355968000000000
