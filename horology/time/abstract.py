"""
# Abstract base class for time zone policies.

# A policy converts between std time, hnsecs since 0001-01-01T00:00 UTC, and
# adjusted time, the same count on the zone's local clock. &..system.SysTime keeps
# std time and consults its policy on every field access; policies are shared by
# any number of instances and are never mutated after construction.
"""
from abc import ABC, abstractmethod
from . import earth

class TimeZone(ABC):
	"""
	# The interface consumed by &..system.SysTime.

	# Subclasses implement &utc_offset_at and &dst_in_effect; the conversions
	# &utc_to_tz and &tz_to_utc are derived from the offsets unless overridden.

	# [ Properties ]
	# /name/
		# The identifier of the zone; may be empty when the zone has none.
	# /std_name/
		# Abbreviation or name used while standard time is in effect.
	# /dst_name/
		# Abbreviation or name used while daylight savings time is in effect.
	"""

	def __init__(self, name, std_name, dst_name):
		self.name = name
		self.std_name = std_name
		self.dst_name = dst_name

	def __repr__(self):
		return '<%s: %s>' %(self.__class__.__name__, self.name or self.std_name)

	@property
	@abstractmethod
	def has_dst(self) -> bool:
		"""
		# Whether the zone ever observes daylight savings time.
		"""

	@abstractmethod
	def dst_in_effect(self, std_time:int) -> bool:
		"""
		# Whether daylight savings time is in effect at the instant &std_time.
		"""

	@abstractmethod
	def utc_offset_at(self, std_time:int):
		"""
		# The &..measure.Duration added to UTC to produce local time at &std_time.
		"""

	def display_name(self, dst:bool) -> str:
		"""
		# The name to present for the zone given whether DST is in effect.
		"""
		return self.dst_name if dst else self.std_name

	def utc_to_tz(self, std_time:int) -> int:
		"""
		# Convert std time to adjusted time.
		"""
		return std_time + int(self.utc_offset_at(std_time))

	def tz_to_utc(self, adj_time:int) -> int:
		"""
		# Convert adjusted time to std time.

		# Local times repeated by a transition resolve to their first occurrence.
		# Local times skipped by a transition are read with the offset in effect
		# before it, which places the result after the transition by the size of
		# the gap: 02:30 on a spring-forward day becomes 03:30.
		"""
		before = int(self.utc_offset_at(adj_time - earth.hnsecs_in_day))
		after = int(self.utc_offset_at(adj_time + earth.hnsecs_in_day))

		if before == after:
			return adj_time - before

		for offset in (before, after):
			std_time = adj_time - offset
			if int(self.utc_offset_at(std_time)) == offset:
				return std_time

		# Gap.
		return adj_time - before
