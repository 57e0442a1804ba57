"""
# Absolute points in time viewed through a time zone policy.

# &SysTime holds std time, the number of hnsecs since 0001-01-01T00:00:00 UTC,
# and the &abstract.TimeZone used to present it. The clock fields are derived from
# the adjusted time on every access; nothing is cached, so assigning a new policy
# changes the fields without changing the instant.

#!python
	st = SysTime(types.DateTime(2015, 12, 31, 23, 59, 59), tz=views.utc)
	st += measure.Duration.of(second=1)
	assert st == SysTime(types.DateTime(2016, 1, 1), tz=views.utc)

# Duration arithmetic moves the instant. &SysTime.add and &SysTime.roll move the
# clock face; the two differ when a zone transition falls within the span.
"""
import functools

from . import abstract
from . import earth
from . import errors
from . import measure
from . import types
from . import views

def unix_time_to_std_time(seconds:int) -> int:
	"""
	# Convert seconds since 1970-01-01T00:00:00Z to std time.
	"""
	return (seconds * earth.hnsecs_in_second) + earth.unix_epoch_hnsecs

def std_time_to_unix_time(std_time:int, width:int=64) -> int:
	"""
	# Convert std time to seconds since the Unix epoch.

	# Sub-second portions are truncated toward zero. When &width is less than
	# `64`, the result saturates at the limits of a signed integer of that width.
	"""
	hnsecs = std_time - earth.unix_epoch_hnsecs
	seconds = abs(hnsecs) // earth.hnsecs_in_second
	if hnsecs < 0:
		seconds = -seconds

	if width < 64:
		limit = 1 << (width - 1)
		if seconds >= limit:
			return limit - 1
		if seconds < -limit:
			return -limit
	return seconds

def _zone(tz):
	if tz is None:
		return views.local()
	if not isinstance(tz, abstract.TimeZone):
		raise TypeError("tz must be a TimeZone, not %r" %(type(tz).__name__,))
	return tz

def _field(name, settable=True):
	"""
	# Property reading, and optionally assigning, the &name field of the decomposed
	# adjusted time.
	"""
	def get(self):
		return getattr(self._decompose()[0], name)

	if not settable:
		return property(get)

	def assign(self, value):
		self._set(name, value)
	return property(get, assign)

@functools.total_ordering
class SysTime(object):
	"""
	# A point in time and the time zone policy it is presented in.

	# [ Parameters ]
	# /value/
		# A &types.DateTime or &types.Date read on the clock of &tz, or an &int
		# std time.
	# /frac_secs/
		# The fraction of a second of a &types.DateTime &value as a &measure.Duration.
		# Must be within `[0, 1)` seconds.
	# /tz/
		# The &abstract.TimeZone; &None selects the process' local time zone.
		# May be given in place of &frac_secs.

	# [ Exceptions ]
	# /&errors.InvalidTime/
		# When &frac_secs is negative or not less than one second.
	"""
	__slots__ = ('_std_time', '_tz')

	def __init__(self, value, frac_secs=None, tz=None):
		if isinstance(frac_secs, abstract.TimeZone):
			frac_secs, tz = None, frac_secs
		tz = _zone(tz)

		if isinstance(value, types.DateTime):
			fraction = _fraction(frac_secs) if frac_secs is not None else 0
			std = tz.tz_to_utc(value._hnsecs() + fraction)
		elif frac_secs is not None:
			raise TypeError("frac_secs requires a DateTime value")
		elif isinstance(value, types.Date):
			std = tz.tz_to_utc(types.DateTime.combine(value)._hnsecs())
		elif isinstance(value, int) and not isinstance(value, bool):
			std = int(value)
		else:
			raise TypeError("cannot construct SysTime from %r" %(type(value).__name__,))

		self._std_time = std
		self._tz = tz

	@classmethod
	def _of(Class, std_time, tz):
		ob = Class.__new__(Class)
		ob._std_time = std_time
		ob._tz = tz
		return ob

	@classmethod
	def from_unix_time(Class, seconds:int, tz=None):
		"""
		# Construct from seconds since the Unix epoch.
		"""
		return Class._of(unix_time_to_std_time(seconds), _zone(tz))

	def copy(self):
		return self._of(self._std_time, self._tz)

	@property
	def std_time(self) -> int:
		return self._std_time

	@std_time.setter
	def std_time(self, value):
		self._std_time = int(value)

	@property
	def timezone(self) -> abstract.TimeZone:
		return self._tz

	@timezone.setter
	def timezone(self, tz):
		self._tz = _zone(tz)

	@property
	def adj_time(self) -> int:
		"""
		# The std time converted to the clock of the time zone.
		"""
		return self._tz.utc_to_tz(self._std_time)

	@adj_time.setter
	def adj_time(self, value):
		self._std_time = self._tz.tz_to_utc(value)

	def _decompose(self):
		return types.DateTime._from_hnsecs(self.adj_time)

	def _recompose(self, dt, fraction):
		self.adj_time = dt._hnsecs() + fraction

	def _set(self, field, value):
		# The decomposed DateTime is a scratch value; it validates the assignment.
		dt, fraction = self._decompose()
		setattr(dt, field, value)
		self._recompose(dt, fraction)

	year = _field('year')
	year_bc = _field('year_bc')
	month = _field('month')
	day = _field('day')
	hour = _field('hour')
	minute = _field('minute')
	second = _field('second')
	day_of_year = _field('day_of_year')
	day_of_gregorian_cal = _field('day_of_gregorian_cal')

	day_of_week = _field('day_of_week', False)
	iso_week = _field('iso_week', False)
	is_leap_year = _field('is_leap_year', False)
	is_ad = _field('is_ad', False)
	days_in_month = _field('days_in_month', False)
	julian_day = _field('julian_day', False)
	mod_julian_day = _field('mod_julian_day', False)

	@property
	def frac_secs(self) -> measure.Duration:
		"""
		# The fraction of the second as a &measure.Duration.
		"""
		return measure.Duration(self._decompose()[1])

	@frac_secs.setter
	def frac_secs(self, value):
		fraction = _fraction(value)
		dt, _ = self._decompose()
		self._recompose(dt, fraction)

	@property
	def end_of_month(self):
		"""
		# The last hnsec of the month of this time on the same time zone.
		"""
		dt, _ = self._decompose()
		end = dt.end_of_month
		return self._of(self._tz.tz_to_utc(end._hnsecs() + earth.hnsecs_in_second - 1), self._tz)

	@property
	def dst_in_effect(self) -> bool:
		return self._tz.dst_in_effect(self._std_time)

	@property
	def utc_offset(self) -> measure.Duration:
		"""
		# The offset from UTC in effect at this time.
		"""
		return measure.Duration(self._tz.utc_offset_at(self._std_time))

	def add(self, unit, value, overflow=types.AllowDayOverflow.overflow):
		"""
		# Add &value &unit to the clock face of the time zone.

		# Calendar and clock units are applied to the decomposed &types.DateTime.
		# Sub-second units are added to the adjusted time directly.
		"""
		u = earth.unit(unit)
		if u in ('millisecond', 'microsecond', 'hnsec'):
			self.adj_time = self.adj_time + (value * earth.unit_hnsecs[u])
			return self

		dt, fraction = self._decompose()
		dt.add(u, value, overflow)
		self._recompose(dt, fraction)
		return self

	def roll(self, unit, value, overflow=types.AllowDayOverflow.overflow):
		"""
		# Add &value &unit to the clock face without affecting larger units.

		# Sub-second units roll the fraction of the second; the result wraps within
		# the current second.
		"""
		u = earth.unit(unit, ('year', 'month', 'day', 'hour', 'minute', 'second', 'millisecond', 'microsecond', 'hnsec'))
		dt, fraction = self._decompose()

		if u in ('millisecond', 'microsecond', 'hnsec'):
			fraction = (fraction + (value * earth.unit_hnsecs[u])) % earth.hnsecs_in_second
		else:
			dt.roll(u, value, overflow)

		self._recompose(dt, fraction)
		return self

	def diff_months(self, other) -> int:
		"""
		# Difference in months between the clock faces of the two times.
		"""
		return self._decompose()[0].diff_months(other._decompose()[0])

	def to_utc(self):
		return self._of(self._std_time, views.utc)

	def to_local_time(self):
		return self._of(self._std_time, views.local())

	def to_other_tz(self, tz):
		"""
		# The same instant presented in the zone &tz.
		"""
		return self._of(self._std_time, _zone(tz))

	def to_unix_time(self, width:int=64) -> int:
		return std_time_to_unix_time(self._std_time, width)

	def to_date(self):
		return self._decompose()[0].date

	def to_date_time(self):
		return self._decompose()[0]

	def to_time_of_day(self):
		return self._decompose()[0].time_of_day

	def __add__(self, duration):
		hnsecs = measure.hnsecs(duration)
		if hnsecs is None:
			return NotImplemented
		return self._of(self._std_time + hnsecs, self._tz)
	__radd__ = __add__

	def __sub__(self, operand):
		if isinstance(operand, SysTime):
			return measure.Duration(self._std_time - operand._std_time)

		hnsecs = measure.hnsecs(operand)
		if hnsecs is None:
			return NotImplemented
		return self._of(self._std_time - hnsecs, self._tz)

	def __eq__(self, ob):
		if not isinstance(ob, SysTime):
			return NotImplemented
		return self._std_time == ob._std_time

	def __lt__(self, ob):
		if not isinstance(ob, SysTime):
			return NotImplemented
		return self._std_time < ob._std_time

	def __hash__(self):
		return hash(self._std_time)

	def __repr__(self):
		return '%s(%d, tz=%r)' %(self.__class__.__name__, self._std_time, self._tz)

	def __str__(self):
		return self.to_simple_string()

	def to_iso_string(self) -> str:
		"""
		# `YYYYMMDDTHHMMSS.FFFFFFFTZ`
		"""
		from . import format
		return format.format_sys_time(self, 'iso')

	def to_iso_ext_string(self) -> str:
		"""
		# `YYYY-MM-DDTHH:MM:SS.FFFFFFFTZ`
		"""
		from . import format
		return format.format_sys_time(self, 'extended')

	def to_simple_string(self) -> str:
		"""
		# `YYYY-Mon-DD HH:MM:SS.FFFFFFFTZ`
		"""
		from . import format
		return format.format_sys_time(self, 'simple')

	@classmethod
	def from_iso_string(Class, text, tz=None):
		from . import format
		return format.parse_sys_time(text, 'iso', tz=tz)

	@classmethod
	def from_iso_ext_string(Class, text, tz=None):
		from . import format
		return format.parse_sys_time(text, 'extended', tz=tz)

	@classmethod
	def from_simple_string(Class, text, tz=None):
		from . import format
		return format.parse_sys_time(text, 'simple', tz=tz)

def _fraction(value):
	hnsecs = measure.hnsecs(value)
	if hnsecs is None:
		raise TypeError("fractional seconds must be a Duration or timedelta")
	if not 0 <= hnsecs < earth.hnsecs_in_second:
		raise errors.InvalidTime("fractional seconds must be within [0, 1) seconds: %r" %(value,))
	return hnsecs

SysTime.min = types.Limit(lambda: SysTime._of(-(1 << 63), views.utc))
SysTime.max = types.Limit(lambda: SysTime._of((1 << 63) - 1, views.utc))
