"""
# Time zone policies for viewing std time on a local clock.

# Usage:

#!syntax/python
	from horology.time import views, system
	z = views.SimpleTimeZone(measure.Duration.of(hour=-7))
	st = system.SysTime(types.DateTime(2010, 7, 4, 12), tz=z)

# Zone rule databases are not read here. &Zone accepts a transition table built by the
# caller, &LocalTime defers to the C library through &time.localtime, and &local
# provides the process-wide instance of &LocalTime.

# [ Elements ]
# /utc/
	# The &UTC instance.
"""
import bisect
import logging
import threading
import time

from . import abstract
from . import earth
from . import measure

log = logging.getLogger(__name__)

class UTC(abstract.TimeZone):
	"""
	# Coordinated Universal Time; adjusted time is std time.
	"""

	def __init__(self):
		super().__init__('UTC', 'UTC', 'UTC')

	has_dst = False

	def dst_in_effect(self, std_time):
		return False

	def utc_offset_at(self, std_time):
		return measure.Duration(0)

	def utc_to_tz(self, std_time):
		return std_time

	def tz_to_utc(self, adj_time):
		return adj_time

utc = UTC()

class SimpleTimeZone(abstract.TimeZone):
	"""
	# A zone with a fixed offset from UTC and no daylight savings time.

	# [ Properties ]
	# /utc_offset/
		# The &measure.Duration added to UTC to produce local time.
	"""

	#: Offsets must be strictly within a day.
	limit = earth.hnsecs_in_day

	def __init__(self, utc_offset, name=''):
		offset = measure.hnsecs(utc_offset)
		if offset is None:
			raise TypeError("utc_offset must be a Duration or timedelta")
		if not -self.limit < offset < self.limit:
			raise ValueError("utc offset must be less than a day: %r" %(utc_offset,))
		if offset % earth.hnsecs_in_minute:
			raise ValueError("utc offset must be a whole number of minutes: %r" %(utc_offset,))

		self.utc_offset = measure.Duration(offset)
		super().__init__(name, name, name)

	def __repr__(self):
		return '<%s: %r>' %(self.__class__.__name__, self.utc_offset)

	has_dst = False

	def dst_in_effect(self, std_time):
		return False

	def utc_offset_at(self, std_time):
		return self.utc_offset

	def utc_to_tz(self, std_time):
		return std_time + int(self.utc_offset)

	def tz_to_utc(self, adj_time):
		return adj_time - int(self.utc_offset)

class Zone(abstract.TimeZone):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# The sorted std times at which the corresponding &offsets take effect.
	# /offsets/
		# The &Offset in effect from the corresponding transition onward.
	# /default/
		# The &Offset in effect before the first transition.
	"""

	class Offset(tuple):
		"""
		# A transition's target: `(seconds_east_of_utc, abbreviation, kind)` where
		# the kind is `'dst'` or `'std'`.
		"""
		__slots__ = ()

		@property
		def abbreviation(self):
			return self[1]

		@property
		def is_dst(self):
			return self[2] == 'dst'

		@property
		def duration(self):
			"""
			# The offset east of UTC as a &measure.Duration.
			"""
			return measure.Duration.of(second=self[0])

		def __repr__(self):
			return '%s(%r)' %(self.__class__.__name__, tuple(self))

	def __init__(self, transitions, offsets, default, name=''):
		if len(transitions) != len(offsets):
			raise ValueError("transitions and offsets must have the same length")
		if any(a >= b for a, b in zip(transitions, transitions[1:])):
			raise ValueError("transitions must be strictly increasing")

		self.transitions = tuple(transitions)
		self.offsets = tuple(offsets)
		self.default = default

		std_name = default.abbreviation
		dst_name = std_name
		for offset in self.offsets:
			if offset.is_dst:
				dst_name = offset.abbreviation
				break
		super().__init__(name, std_name, dst_name)

	def __repr__(self):
		return '<%s: %s[%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
		)

	@classmethod
	def from_unix_transitions(Class, name, default, transitions):
		"""
		# Construct a zone from transition times in Unix seconds.

		# [ Parameters ]
		# /name/
			# The identifier of the zone.
		# /default/
			# The &Offset in effect before the first transition.
		# /transitions/
			# Iterable of `(unix_seconds, offset)` pairs in ascending order.
		"""
		pairs = list(transitions)
		return Class(
			[(t * earth.hnsecs_in_second) + earth.unix_epoch_hnsecs for t, o in pairs],
			[Class.Offset(o) for t, o in pairs],
			Class.Offset(default),
			name=name,
		)

	@property
	def has_dst(self):
		return any(x.is_dst for x in self.offsets) or self.default.is_dst

	def find(self, std_time, search=bisect.bisect):
		"""
		# Get the appropriate offset in the zone for the given std time.
		# If the time precedes every transition, the &default will be returned.
		"""
		idx = search(self.transitions, std_time) - 1
		if idx < 0:
			return self.default
		return self.offsets[idx]

	def dst_in_effect(self, std_time):
		return self.find(std_time).is_dst

	def utc_offset_at(self, std_time):
		return self.find(std_time).duration

class LocalTime(abstract.TimeZone):
	"""
	# The zone configured for the process by the operating system.

	# Offsets are read from &time.localtime, so the `TZ` environment variable is
	# honored. It is read once, by &time.tzset, when the instance is created.
	# Use &local instead of constructing instances directly.
	"""

	def __init__(self):
		if hasattr(time, 'tzset'):
			time.tzset()
		std_name, dst_name = time.tzname
		super().__init__('', std_name, dst_name)
		self._daylight = bool(time.daylight)

	@property
	def has_dst(self):
		return self._daylight

	def _struct(self, std_time, localtime=time.localtime):
		return localtime((std_time - earth.unix_epoch_hnsecs) // earth.hnsecs_in_second)

	def dst_in_effect(self, std_time):
		return self._struct(std_time).tm_isdst > 0

	def utc_offset_at(self, std_time):
		return measure.Duration.of(second=self._struct(std_time).tm_gmtoff)

_local_zone = None
_local_lock = threading.Lock()

def local():
	"""
	# The process-wide &LocalTime instance.

	# Created on first use and kept for the life of the process.
	"""
	global _local_zone

	zone = _local_zone
	if zone is None:
		with _local_lock:
			zone = _local_zone
			if zone is None:
				zone = _local_zone = LocalTime()
				log.debug("local time zone initialized: std=%s dst=%s", zone.std_name, zone.dst_name)
	return zone
