"""
# Gregorian calendar functions and data.

# Dates are addressed by day ordinals. Ordinal `1` is 0001-01-01 and ordinal `0`
# is 0000-12-31, the preceding day. Years use astronomical numbering: year zero
# is 1 B.C., year `-1` is 2 B.C., and so on. The calendar is proleptic; the
# Gregorian rules are applied to every year.

# The conversions count whole four hundred year cycles and their subdivisions
# from 0001-01-01. Floored division gives the same results for negative
# ordinals as for positive ones.
"""
import bisect
import itertools

from . import errors

#: number of centuries in a gregorian cycle.
centuries_in_cycle = 4

#: number of years in a century.
years_in_century = 100

#: number of years in a gregorian cycle.
years_in_cycle = centuries_in_cycle * years_in_century

#: english names of the months of the year.
month_names = (
	"january",
	"february",
	"march",
	"april",
	"may",
	"june",
	"july",
	"august",
	"september",
	"october",
	"november",
	"december",
)

#: number of months in a year.
months_in_year = len(month_names)

#: abbreviations for the english names of the months of the year.
month_abbreviations = (
	"jan", "feb", "mar",
	"apr", "may", "jun",
	"jul", "aug", "sep",
	"oct", "nov", "dec",
)

#: Finite map associating the names and abbreviations of the months with their number.
month_name_to_number = {
	month_names[i] : i + 1 for i in range(len(month_names))
}
month_name_to_number.update([
	(k[:3], v) for (k,v) in month_name_to_number.items()
])

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

days_in_common_year = sum(calendar_year)
days_in_leap_year = sum(calendar_leap)

#: Days elapsed before the first of each month; index zero is January.
days_before_month = tuple(itertools.accumulate((0,) + calendar_year[:-1]))
days_before_month_leap = tuple(itertools.accumulate((0,) + calendar_leap[:-1]))

#: Days in the spans that compose the four hundred year cycle starting at year 1.
days_in_quad = (days_in_common_year * 4) + 1
days_in_century = (days_in_quad * 25) - 1
days_in_cycle = (days_in_century * centuries_in_cycle) + 1

#: Julian day number of the noon preceding ordinal zero.
julian_day_offset = 1721425

#: Difference between the Julian day number and the modified Julian day.
modified_julian_day_offset = 2400001

#: Supported year range of the value types.
minimum_year = -32768
maximum_year = 32767

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	# Python's modulus is floored, so negative years follow the same rule: `0` and `-4`
	# are leap years.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def month_from_abbreviation(text):
	"""
	# The number of the month identified by its three letter abbreviation or name.
	# Case is ignored.

	# [ Exceptions ]
	# /&errors.InvalidDate/
		# When &text does not identify a month.
	"""
	try:
		return month_name_to_number[text.lower()]
	except KeyError:
		raise errors.InvalidDate("unknown month name: %r" %(text,)) from None

def days_in_year(year):
	return days_in_leap_year if year_is_leap(year) else days_in_common_year

def days_in_month(year, month):
	"""
	# The number of days in the &month of the &year.

	# [ Exceptions ]
	# /&errors.InvalidDate/
		# When &month is not within `1` and `12`.
	"""
	if not 1 <= month <= months_in_year:
		raise errors.InvalidDate("month out of range: %r" %(month,))
	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def valid(year, month, day):
	"""
	# Whether the triple identifies an existing day.
	"""
	if not 1 <= month <= months_in_year:
		return False
	return 1 <= day <= days_in_month(year, month)

def validate(year, month, day):
	"""
	# Raise &errors.InvalidDate if the triple does not identify an existing day.
	"""
	if not 1 <= month <= months_in_year:
		raise errors.InvalidDate("month out of range: %r" %(month,))
	limit = days_in_month(year, month)
	if not 1 <= day <= limit:
		raise errors.InvalidDate(
			"day out of range for %d-%02d: %r (1-%d)" %(year, month, day, limit)
		)

def days_before_year(year):
	"""
	# The number of days from 0001-01-01 to the first day of &year.
	# Negative for years before 1.
	"""
	y = year - 1
	return (y * days_in_common_year) + (y // 4) - (y // 100) + (y // 400)

def ordinal_from_date(year, month, day):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to its day ordinal.

	# No validation is performed; a &day beyond the end of the month addresses the
	# following month, and a &month beyond twelve addresses the following year.
	"""
	carry, moy = divmod(month - 1, months_in_year)
	year += carry
	if year_is_leap(year):
		before = days_before_month_leap[moy]
	else:
		before = days_before_month[moy]
	return days_before_year(year) + before + day

def date_from_ordinal(ordinal):
	"""
	# Convert the given day ordinal into a Gregorian date in the common form:
	# (year, month, day).
	"""
	cycles, days = divmod(ordinal - 1, days_in_cycle)

	# The last century of the cycle and the last year of a four year span
	# carry the extra leap day.
	centuries = min(days // days_in_century, centuries_in_cycle - 1)
	days -= centuries * days_in_century
	quads, days = divmod(days, days_in_quad)
	years = min(days // days_in_common_year, 3)
	days -= years * days_in_common_year

	year = (cycles * years_in_cycle) + (centuries * years_in_century) + (quads * 4) + years + 1
	if year_is_leap(year):
		table = days_before_month_leap
	else:
		table = days_before_month
	month = bisect.bisect_right(table, days)
	return (year, month, days - table[month-1] + 1)

def day_of_year(year, month, day):
	"""
	# The one-based index of the day within its year.
	"""
	return ordinal_from_date(year, month, day) - ordinal_from_date(year, 1, 1) + 1

def date_from_day_of_year(year, doy):
	"""
	# The (year, month, day) triple of the &doy'th day of &year.
	"""
	if not 1 <= doy <= days_in_year(year):
		raise errors.InvalidDate("day of year out of range for %d: %r" %(year, doy))
	return date_from_ordinal(ordinal_from_date(year, 1, 1) + doy - 1)

def julian_day(ordinal):
	"""
	# The Julian day number of the noon of the given day.
	"""
	return ordinal + julian_day_offset

def modified_julian_day(ordinal):
	"""
	# The modified Julian day; changes at midnight rather than noon.
	"""
	return julian_day(ordinal) - modified_julian_day_offset

def year_bc(year):
	"""
	# The B.C. year of a non-positive astronomical &year.

	# [ Exceptions ]
	# /&errors.InvalidYearBC/
		# When &year is A.D.
	"""
	if year > 0:
		raise errors.InvalidYearBC("year %d is A.D." %(year,))
	return 1 - year

def year_from_bc(year):
	"""
	# The astronomical year of the B.C. &year.
	"""
	if year <= 0:
		raise errors.InvalidYearBC("B.C. year must be positive: %r" %(year,))
	return 1 - year

def diff_months(year, month, other_year, other_month):
	"""
	# The difference in months between two (year, month) pairs ignoring days.
	"""
	return ((year - other_year) * months_in_year) + (month - other_month)
