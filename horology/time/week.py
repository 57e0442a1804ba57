"""
# Week based measures of time: days of seven.

# Weekdays are zero-based starting at Sunday; ordinal `1`, 0001-01-01, is a Monday.
"""
from . import gregorian

#: Total number of days in a week.
days_in_week = 7

#: Weekday indexes.
sunday, monday, tuesday, wednesday, thursday, friday, saturday = range(days_in_week)

def day_of_week(ordinal, offset=0):
	"""
	# Derive the canonical day of week of the day &ordinal.

	# [ Parameters ]
	# /offset/
		# Weekday that is to be considered the start of the week.
		# Defaults to Sunday.
	"""
	return ((ordinal % days_in_week) - offset) % days_in_week

def iso_week(year, month, day):
	"""
	# The ISO 8601 week number of the given date.

	# Week one is the week, starting on Monday, that contains the first Thursday
	# of the year. Days before it belong to the last week of the preceding year,
	# and the final days of December may belong to week one of the next year.
	"""
	ordinal = gregorian.ordinal_from_date(year, month, day)
	weekday = day_of_week(ordinal) or days_in_week # Sunday is the seventh day.
	doy = ordinal - gregorian.ordinal_from_date(year, 1, 1) + 1
	week = (doy - weekday + 10) // days_in_week

	if week == 53:
		next_year = day_of_week(gregorian.ordinal_from_date(year + 1, 1, 1))
		if monday <= next_year <= thursday:
			return 1
		return 53
	elif week > 0:
		return week
	else:
		return iso_week(year - 1, 12, 31)
