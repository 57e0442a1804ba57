"""
# Calendar and clock value types.

#!python
	d = types.Date(2000, 1, 31)
	d.add('month', 1)
	assert d == types.Date(2000, 3, 2)

	dt = types.DateTime(1999, 7, 6, 12, 30, 33)
	assert dt - types.DateTime(1998, 7, 6, 12, 30, 33) == measure.Duration.of(day=365)

# The types are mutable values. Setters and the &add and &roll methods revalidate
# the entire value before committing any field, so a failure leaves the receiver
# unchanged. &add and &roll return the instance to allow chaining.

# [ Elements ]
# /AllowDayOverflow/
	# Policy applied when month arithmetic lands on a day beyond the end of the month.
# /Date/
	# A day of the proleptic Gregorian calendar.
# /TimeOfDay/
	# A clock time with second precision.
# /DateTime/
	# A &Date and a &TimeOfDay; owns the carry between the two.
"""
import enum
import functools

from . import earth
from . import errors
from . import gregorian
from . import measure
from . import week

class AllowDayOverflow(enum.Enum):
	"""
	# The handling of a day that exceeds the length of the month produced by
	# year or month arithmetic.

	# [ Elements ]
	# /overflow/
		# The excess days spill into the following month; 2000-01-31 plus one month
		# is 2000-03-02.
	# /clamp/
		# The day is set to the last day of the month; 2000-01-31 plus one month
		# is 2000-02-29.
	"""
	overflow = 'overflow'
	clamp = 'clamp'

class Limit(object):
	"""
	# Class attribute constructing a new value on every access.
	# Used for the extremes, &Date.min and &Date.max, of the mutable types.
	"""
	__slots__ = ('construct',)

	def __init__(self, construct):
		self.construct = construct

	def __get__(self, instance, owner):
		return self.construct()

def _settle(year, month, day, overflow):
	limit = gregorian.days_in_month(year, month)
	if day > limit:
		if overflow is AllowDayOverflow.overflow:
			# Never December; December is the longest month.
			return (year, month + 1, day - limit)
		elif overflow is AllowDayOverflow.clamp:
			return (year, month, limit)
		else:
			raise TypeError("overflow must be an AllowDayOverflow, not %r" %(overflow,))
	return (year, month, day)

def add_months(year, month, day, months, overflow=AllowDayOverflow.overflow):
	"""
	# Add &months to the date triple using a flat month index.
	"""
	y, m = divmod((year * gregorian.months_in_year) + (month - 1) + months, gregorian.months_in_year)
	return _settle(y, m + 1, day, overflow)

def roll_months(year, month, day, months, overflow=AllowDayOverflow.overflow):
	"""
	# Add &months to the month of the date triple without changing the year.
	"""
	m = ((month - 1) + months) % gregorian.months_in_year
	return _settle(year, m + 1, day, overflow)

def roll_days(year, month, day, days):
	"""
	# Add &days to the day of the date triple, wrapping within the month.
	"""
	limit = gregorian.days_in_month(year, month)
	return (year, month, ((day - 1) + days) % limit + 1)

@functools.total_ordering
class Date(object):
	"""
	# A day of the proleptic Gregorian calendar with astronomical year numbering.

	# [ Exceptions ]
	# /&errors.InvalidDate/
		# Raised by the constructor and the setters when the month or day is out of range.
	"""
	__slots__ = ('_year', '_month', '_day')

	def __init__(self, year=1, month=1, day=1):
		gregorian.validate(year, month, day)
		self._year = year
		self._month = month
		self._day = day

	@classmethod
	def _of(Class, year, month, day):
		# Construct without validation; the triple is known to be valid.
		ob = Class.__new__(Class)
		ob._year = year
		ob._month = month
		ob._day = day
		return ob

	@classmethod
	def from_ordinal(Class, ordinal):
		"""
		# The &Date of the given day of the Gregorian calendar.
		"""
		return Class._of(*gregorian.date_from_ordinal(ordinal))

	def _assign(self, year, month, day):
		gregorian.validate(year, month, day)
		self._year = year
		self._month = month
		self._day = day

	def copy(self):
		return self._of(self._year, self._month, self._day)

	def timetuple(self):
		return (self._year, self._month, self._day)

	@property
	def year(self) -> int:
		return self._year

	@year.setter
	def year(self, year):
		self._assign(year, self._month, self._day)

	@property
	def year_bc(self) -> int:
		"""
		# The year counted in B.C.; year zero is 1 B.C.

		# [ Exceptions ]
		# /&errors.InvalidYearBC/
			# On read when the date is A.D.; on write when the given year is not positive.
		"""
		return gregorian.year_bc(self._year)

	@year_bc.setter
	def year_bc(self, year):
		self._assign(gregorian.year_from_bc(year), self._month, self._day)

	@property
	def month(self) -> int:
		return self._month

	@month.setter
	def month(self, month):
		self._assign(self._year, month, self._day)

	@property
	def day(self) -> int:
		return self._day

	@day.setter
	def day(self, day):
		self._assign(self._year, self._month, day)

	@property
	def day_of_year(self) -> int:
		return gregorian.day_of_year(self._year, self._month, self._day)

	@day_of_year.setter
	def day_of_year(self, doy):
		self._assign(*gregorian.date_from_day_of_year(self._year, doy))

	@property
	def day_of_gregorian_cal(self) -> int:
		"""
		# The day ordinal; `1` is 0001-01-01.
		"""
		return gregorian.ordinal_from_date(self._year, self._month, self._day)

	@day_of_gregorian_cal.setter
	def day_of_gregorian_cal(self, ordinal):
		self._year, self._month, self._day = gregorian.date_from_ordinal(ordinal)

	@property
	def day_of_week(self) -> int:
		"""
		# Zero-based weekday starting with Sunday.
		"""
		return week.day_of_week(self.day_of_gregorian_cal)

	@property
	def iso_week(self) -> int:
		return week.iso_week(self._year, self._month, self._day)

	@property
	def is_leap_year(self) -> bool:
		return gregorian.year_is_leap(self._year)

	@property
	def is_ad(self) -> bool:
		return self._year > 0

	@property
	def days_in_month(self) -> int:
		return gregorian.days_in_month(self._year, self._month)

	@property
	def end_of_month(self):
		"""
		# The last day of the month of this date.
		"""
		return self._of(self._year, self._month, self.days_in_month)

	@property
	def julian_day(self) -> int:
		"""
		# The Julian day number at noon of this date.
		"""
		return gregorian.julian_day(self.day_of_gregorian_cal)

	@property
	def mod_julian_day(self) -> int:
		return gregorian.modified_julian_day(self.day_of_gregorian_cal)

	def add(self, unit, value, overflow=AllowDayOverflow.overflow):
		"""
		# Add &value &unit to the date. Negative values subtract.

		# Years and months are added to a flat month index; when the original day
		# does not exist in the resulting month, &overflow decides the outcome.
		# Weeks and days are added to the day ordinal.

		# [ Parameters ]
		# /unit/
			# One of `'year'`, `'month'`, `'week'`, or `'day'`. Plural spellings are accepted.
		# /value/
			# The number of units to add.
		# /overflow/
			# The &AllowDayOverflow policy.
		"""
		u = earth.unit(unit, ('year', 'month', 'week', 'day'))
		if u == 'year':
			self._assign(*add_months(*self.timetuple(), value * gregorian.months_in_year, overflow))
		elif u == 'month':
			self._assign(*add_months(*self.timetuple(), value, overflow))
		else:
			self._add_days(value * (earth.days_in_week if u == 'week' else 1))
		return self

	def roll(self, unit, value, overflow=AllowDayOverflow.overflow):
		"""
		# Add &value &unit to the date without affecting larger units.

		# Rolling months never changes the year and rolling days wraps within the
		# current month. Rolling years is identical to adding years.

		# [ Parameters ]
		# /unit/
			# One of `'year'`, `'month'`, or `'day'`.
		# /value/
			# The number of units to roll.
		# /overflow/
			# The &AllowDayOverflow policy applied by year and month rolls.
		"""
		u = earth.unit(unit, ('year', 'month', 'day'))
		if u == 'year':
			return self.add(u, value, overflow)
		elif u == 'month':
			self._assign(*roll_months(*self.timetuple(), value, overflow))
		else:
			self._assign(*roll_days(*self.timetuple(), value))
		return self

	def _add_days(self, days):
		self.day_of_gregorian_cal = self.day_of_gregorian_cal + days
		return self

	def diff_months(self, other) -> int:
		"""
		# The difference in months between the two dates. Days are ignored:
		# December 31st and January 1st are one month apart.
		"""
		return gregorian.diff_months(self._year, self._month, other._year, other._month)

	def __add__(self, duration):
		hnsecs = measure.hnsecs(duration)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_days(measure.Duration(hnsecs).total('day'))
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, Date):
			return measure.Duration.of(day=self.day_of_gregorian_cal - operand.day_of_gregorian_cal)

		hnsecs = measure.hnsecs(operand)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_days(-measure.Duration(hnsecs).total('day'))

	def __eq__(self, ob):
		if not isinstance(ob, Date):
			return NotImplemented
		return self.timetuple() == ob.timetuple()

	def __lt__(self, ob):
		if not isinstance(ob, Date):
			return NotImplemented
		return self.timetuple() < ob.timetuple()

	def __hash__(self):
		return hash(self.timetuple())

	def __repr__(self):
		return '%s(%d, %d, %d)' %(self.__class__.__name__, self._year, self._month, self._day)

	def __str__(self):
		return self.to_simple_string()

	def to_iso_string(self) -> str:
		"""
		# `YYYYMMDD`
		"""
		from . import format
		return format.format_date(self, 'iso')

	def to_iso_ext_string(self) -> str:
		"""
		# `YYYY-MM-DD`
		"""
		from . import format
		return format.format_date(self, 'extended')

	def to_simple_string(self) -> str:
		"""
		# `YYYY-Mon-DD`
		"""
		from . import format
		return format.format_date(self, 'simple')

	@classmethod
	def from_iso_string(Class, text):
		from . import format
		return format.parse_date(text, 'iso')

	@classmethod
	def from_iso_ext_string(Class, text):
		from . import format
		return format.parse_date(text, 'extended')

	@classmethod
	def from_simple_string(Class, text):
		from . import format
		return format.parse_date(text, 'simple')

Date.min = Limit(lambda: Date._of(gregorian.minimum_year, 1, 1))
Date.max = Limit(lambda: Date._of(gregorian.maximum_year, 12, 31))

@functools.total_ordering
class TimeOfDay(object):
	"""
	# A time of day with second precision.

	# Arithmetic wraps at midnight; carrying into a date is the concern of &DateTime.

	# [ Exceptions ]
	# /&errors.InvalidTime/
		# Raised by the constructor and the setters when a field is out of range.
	"""
	__slots__ = ('_hour', '_minute', '_second')

	limits = {
		'hour': earth.hours_in_day,
		'minute': earth.minutes_in_hour,
		'second': earth.seconds_in_minute,
	}

	def __init__(self, hour=0, minute=0, second=0):
		self._assign(hour, minute, second)

	@classmethod
	def _of(Class, hour, minute, second):
		ob = Class.__new__(Class)
		ob._hour = hour
		ob._minute = minute
		ob._second = second
		return ob

	@staticmethod
	def validate(hour, minute, second):
		"""
		# Raise &errors.InvalidTime when a field is out of range.
		"""
		for name, value in (('hour', hour), ('minute', minute), ('second', second)):
			if not 0 <= value < TimeOfDay.limits[name]:
				raise errors.InvalidTime("%s out of range: %r" %(name, value))

	def _assign(self, hour, minute, second):
		self.validate(hour, minute, second)
		self._hour = hour
		self._minute = minute
		self._second = second

	def copy(self):
		return self._of(self._hour, self._minute, self._second)

	def timetuple(self):
		return (self._hour, self._minute, self._second)

	@property
	def hour(self) -> int:
		return self._hour

	@hour.setter
	def hour(self, hour):
		self._assign(hour, self._minute, self._second)

	@property
	def minute(self) -> int:
		return self._minute

	@minute.setter
	def minute(self, minute):
		self._assign(self._hour, minute, self._second)

	@property
	def second(self) -> int:
		return self._second

	@second.setter
	def second(self, second):
		self._assign(self._hour, self._minute, second)

	def _seconds(self):
		return (self._hour * earth.minutes_in_hour + self._minute) * earth.seconds_in_minute + self._second

	def _add_seconds(self, seconds):
		# Wraps at midnight.
		total = (self._seconds() + seconds) % (earth.hnsecs_in_day // earth.hnsecs_in_second)
		h, m, s, _ = earth.clock_from_hnsecs(total * earth.hnsecs_in_second)
		self._hour, self._minute, self._second = h, m, s
		return self

	def add(self, unit, value):
		"""
		# Add &value &unit to the clock, carrying into larger units and wrapping at
		# midnight.
		"""
		u = earth.unit(unit, ('hour', 'minute', 'second'))
		return self._add_seconds(value * (earth.unit_hnsecs[u] // earth.hnsecs_in_second))

	def roll(self, unit, value):
		"""
		# Add &value &unit to the selected field only; the field wraps at its limit.
		"""
		u = earth.unit(unit, ('hour', 'minute', 'second'))
		fields = {'hour': self._hour, 'minute': self._minute, 'second': self._second}
		fields[u] = (fields[u] + value) % self.limits[u]
		self._hour, self._minute, self._second = fields['hour'], fields['minute'], fields['second']
		return self

	def __add__(self, duration):
		hnsecs = measure.hnsecs(duration)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_seconds(measure.Duration(hnsecs).total('second'))
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, TimeOfDay):
			return measure.Duration.of(second=self._seconds() - operand._seconds())

		hnsecs = measure.hnsecs(operand)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_seconds(-measure.Duration(hnsecs).total('second'))

	def __eq__(self, ob):
		if not isinstance(ob, TimeOfDay):
			return NotImplemented
		return self.timetuple() == ob.timetuple()

	def __lt__(self, ob):
		if not isinstance(ob, TimeOfDay):
			return NotImplemented
		return self.timetuple() < ob.timetuple()

	def __hash__(self):
		return hash(self.timetuple())

	def __repr__(self):
		return '%s(%d, %d, %d)' %(self.__class__.__name__, self._hour, self._minute, self._second)

	def __str__(self):
		return self.to_iso_ext_string()

	def to_iso_string(self) -> str:
		"""
		# `HHMMSS`
		"""
		from . import format
		return format.format_time_of_day(self, 'iso')

	def to_iso_ext_string(self) -> str:
		"""
		# `HH:MM:SS`
		"""
		from . import format
		return format.format_time_of_day(self, 'extended')

	@classmethod
	def from_iso_string(Class, text):
		from . import format
		return format.parse_time_of_day(text, 'iso')

	@classmethod
	def from_iso_ext_string(Class, text):
		from . import format
		return format.parse_time_of_day(text, 'extended')

TimeOfDay.min = Limit(lambda: TimeOfDay._of(0, 0, 0))
TimeOfDay.max = Limit(lambda: TimeOfDay._of(23, 59, 59))

@functools.total_ordering
class DateTime(object):
	"""
	# A &Date combined with a &TimeOfDay.

	# Sub-day arithmetic is performed by &_add_seconds, which carries whole days
	# into the date; rolling the clock fields never changes the date.
	"""
	__slots__ = ('_date', '_tod')

	def __init__(self, year=1, month=1, day=1, hour=0, minute=0, second=0):
		date = Date(year, month, day)
		tod = TimeOfDay(hour, minute, second)
		self._date = date
		self._tod = tod

	@classmethod
	def combine(Class, date, tod=None):
		"""
		# Construct from copies of a &Date and an optional &TimeOfDay.
		"""
		ob = Class.__new__(Class)
		ob._date = date.copy()
		ob._tod = tod.copy() if tod is not None else TimeOfDay._of(0, 0, 0)
		return ob

	@classmethod
	def _from_hnsecs(Class, hnsecs, divmod=divmod):
		"""
		# Decompose hnsecs since ordinal one at midnight into a &DateTime and the
		# remaining fraction of a second in hnsecs.
		"""
		days, hnsecs = divmod(hnsecs, earth.hnsecs_in_day)
		h, m, s, fraction = earth.clock_from_hnsecs(hnsecs)
		ob = Class.__new__(Class)
		ob._date = Date.from_ordinal(days + 1)
		ob._tod = TimeOfDay._of(h, m, s)
		return ob, fraction

	def _hnsecs(self):
		"""
		# The hnsecs since ordinal one at midnight.
		"""
		days = self._date.day_of_gregorian_cal - 1
		return (days * earth.hnsecs_in_day) + earth.hnsecs_from_clock(*self._tod.timetuple())

	def copy(self):
		return self.combine(self._date, self._tod)

	def timetuple(self):
		return self._date.timetuple() + self._tod.timetuple()

	@property
	def date(self) -> Date:
		return self._date.copy()

	@date.setter
	def date(self, date):
		self._date = date.copy()

	@property
	def time_of_day(self) -> TimeOfDay:
		return self._tod.copy()

	@time_of_day.setter
	def time_of_day(self, tod):
		self._tod = tod.copy()

	def _update_date(self, field, value):
		# Field assignment on the date; Date validates before committing.
		setattr(self._date, field, value)

	@property
	def year(self) -> int:
		return self._date.year

	@year.setter
	def year(self, year):
		self._update_date('year', year)

	@property
	def year_bc(self) -> int:
		return self._date.year_bc

	@year_bc.setter
	def year_bc(self, year):
		self._update_date('year_bc', year)

	@property
	def month(self) -> int:
		return self._date.month

	@month.setter
	def month(self, month):
		self._update_date('month', month)

	@property
	def day(self) -> int:
		return self._date.day

	@day.setter
	def day(self, day):
		self._update_date('day', day)

	@property
	def hour(self) -> int:
		return self._tod.hour

	@hour.setter
	def hour(self, hour):
		self._tod.hour = hour

	@property
	def minute(self) -> int:
		return self._tod.minute

	@minute.setter
	def minute(self, minute):
		self._tod.minute = minute

	@property
	def second(self) -> int:
		return self._tod.second

	@second.setter
	def second(self, second):
		self._tod.second = second

	@property
	def day_of_year(self) -> int:
		return self._date.day_of_year

	@day_of_year.setter
	def day_of_year(self, doy):
		self._update_date('day_of_year', doy)

	@property
	def day_of_gregorian_cal(self) -> int:
		return self._date.day_of_gregorian_cal

	@day_of_gregorian_cal.setter
	def day_of_gregorian_cal(self, ordinal):
		self._update_date('day_of_gregorian_cal', ordinal)

	@property
	def day_of_week(self) -> int:
		return self._date.day_of_week

	@property
	def iso_week(self) -> int:
		return self._date.iso_week

	@property
	def is_leap_year(self) -> bool:
		return self._date.is_leap_year

	@property
	def is_ad(self) -> bool:
		return self._date.is_ad

	@property
	def days_in_month(self) -> int:
		return self._date.days_in_month

	@property
	def end_of_month(self):
		"""
		# The last second of the month of this date-time.
		"""
		return self.combine(self._date.end_of_month, TimeOfDay.max)

	@property
	def julian_day(self) -> int:
		"""
		# The Julian day number; the Julian day changes at noon.
		"""
		jd = self._date.julian_day
		return jd if self._tod.hour >= 12 else jd - 1

	@property
	def mod_julian_day(self) -> int:
		return self._date.mod_julian_day

	def _add_seconds(self, seconds, divmod=divmod):
		"""
		# Add &seconds to the date-time, carrying whole days into the date.
		"""
		hnsecs = earth.hnsecs_from_clock(*self._tod.timetuple())
		hnsecs += seconds * earth.hnsecs_in_second

		# Floored; a negative total borrows a day and leaves a remainder in [0, day).
		days, hnsecs = divmod(hnsecs, earth.hnsecs_in_day)

		date = self._date.copy()._add_days(days)
		h, m, s, _ = earth.clock_from_hnsecs(hnsecs)
		self._date = date
		self._tod = TimeOfDay._of(h, m, s)
		return self

	def add(self, unit, value, overflow=AllowDayOverflow.overflow):
		"""
		# Add &value &unit to the date-time.

		# Years and months are applied to the date with the &overflow policy.
		# Weeks, days, hours, minutes, and seconds carry into larger units.
		"""
		u = earth.unit(unit, ('year', 'month', 'week', 'day', 'hour', 'minute', 'second'))
		if u in earth.calendar_units:
			self._date.add(u, value, overflow)
		else:
			self._add_seconds(value * (earth.unit_hnsecs[u] // earth.hnsecs_in_second))
		return self

	def roll(self, unit, value, overflow=AllowDayOverflow.overflow):
		"""
		# Add &value &unit without affecting larger units.

		# Years, months, and days roll on the &Date. Hours, minutes, and seconds roll on
		# the &TimeOfDay and never change the date.
		"""
		u = earth.unit(unit, ('year', 'month', 'day', 'hour', 'minute', 'second'))
		if u in ('year', 'month', 'day'):
			self._date.roll(u, value, overflow)
		else:
			self._tod.roll(u, value)
		return self

	def diff_months(self, other) -> int:
		return self._date.diff_months(other._date)

	def __add__(self, duration):
		hnsecs = measure.hnsecs(duration)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_seconds(measure.Duration(hnsecs).total('second'))
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, DateTime):
			return measure.Duration(self._hnsecs() - operand._hnsecs())

		hnsecs = measure.hnsecs(operand)
		if hnsecs is None:
			return NotImplemented
		return self.copy()._add_seconds(-measure.Duration(hnsecs).total('second'))

	def __eq__(self, ob):
		if not isinstance(ob, DateTime):
			return NotImplemented
		return self.timetuple() == ob.timetuple()

	def __lt__(self, ob):
		if not isinstance(ob, DateTime):
			return NotImplemented
		return self.timetuple() < ob.timetuple()

	def __hash__(self):
		return hash(self.timetuple())

	def __repr__(self):
		return '%s(%d, %d, %d, %d, %d, %d)' %((self.__class__.__name__,) + self.timetuple())

	def __str__(self):
		return self.to_simple_string()

	def to_iso_string(self) -> str:
		"""
		# `YYYYMMDDTHHMMSS`
		"""
		from . import format
		return format.format_date_time(self, 'iso')

	def to_iso_ext_string(self) -> str:
		"""
		# `YYYY-MM-DDTHH:MM:SS`
		"""
		from . import format
		return format.format_date_time(self, 'extended')

	def to_simple_string(self) -> str:
		"""
		# `YYYY-Mon-DD HH:MM:SS`
		"""
		from . import format
		return format.format_date_time(self, 'simple')

	@classmethod
	def from_iso_string(Class, text):
		from . import format
		return format.parse_date_time(text, 'iso')

	@classmethod
	def from_iso_ext_string(Class, text):
		from . import format
		return format.parse_date_time(text, 'extended')

	@classmethod
	def from_simple_string(Class, text):
		from . import format
		return format.parse_date_time(text, 'simple')

DateTime.min = Limit(lambda: DateTime.combine(Date.min, TimeOfDay.min))
DateTime.max = Limit(lambda: DateTime.combine(Date.max, TimeOfDay.max))
