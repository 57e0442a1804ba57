"""
# Elapsed time measured in hnsecs.

# &Duration is the elapsed-time operand of the value types. It is an &int subclass
# and its integer value is the signed number of hnsecs; the value types never look
# further into it than that.

#!python
	two_hours = measure.Duration.of(hour=2)
	assert two_hours.total('minute') == 120
	assert measure.Duration.of(day=1) == measure.Duration.of(hour=24)
"""
import datetime
from . import earth

class Duration(int):
	"""
	# A signed quantity of hnsecs.
	"""
	__slots__ = ()

	unit = 'hnsec'

	@classmethod
	def of(Class, **parts):
		"""
		# Create an instance from the sum of the given &parts.

		#!python
			d = Duration.of(hour=1, minute=30)

		# Keywords are unit names, singular or plural, from `week` to `hnsec`.
		# Calendar units, months and years, have no fixed size and are rejected.
		"""
		total = 0
		for name, value in parts.items():
			u = earth.unit(name, earth.unit_hnsecs)
			total += int(value * earth.unit_hnsecs[u])
		return Class(total)

	@classmethod
	def from_timedelta(Class, delta):
		"""
		# Convert a &datetime.timedelta.
		"""
		seconds = (delta.days * earth.hours_in_day * earth.minutes_in_hour * earth.seconds_in_minute) + delta.seconds
		return Class(
			(seconds * earth.hnsecs_in_second) +
			(delta.microseconds * earth.hnsecs_in_microsecond)
		)

	def total(self, unit='hnsec'):
		"""
		# The number of whole &unit contained by the duration, truncated toward zero.
		"""
		size = earth.unit_hnsecs[earth.unit(unit, earth.unit_hnsecs)]
		q = abs(int(self)) // size
		return -q if self < 0 else q

	def split(self, *units):
		"""
		# Decompose the absolute value of the duration into the given &units,
		# largest first. The final element of the returned tuple is the remainder
		# in hnsecs.

		#!python
			hours, minutes, rest = Duration.of(minute=90, second=1).split('hour', 'minute')
		"""
		r = abs(int(self))
		out = []
		for u in units:
			q, r = divmod(r, earth.unit_hnsecs[earth.unit(u, earth.unit_hnsecs)])
			out.append(q)
		out.append(r)
		return tuple(out)

	def to_timedelta(self):
		return datetime.timedelta(microseconds=self.total('microsecond'))

	def __add__(self, ob):
		if not isinstance(ob, int) or isinstance(ob, bool):
			return NotImplemented
		return self.__class__(int(self) + int(ob))
	__radd__ = __add__

	def __sub__(self, ob):
		if not isinstance(ob, int) or isinstance(ob, bool):
			return NotImplemented
		return self.__class__(int(self) - int(ob))

	def __rsub__(self, ob):
		if not isinstance(ob, int) or isinstance(ob, bool):
			return NotImplemented
		return self.__class__(int(ob) - int(self))

	def __mul__(self, ob):
		if isinstance(ob, Duration) or not isinstance(ob, int):
			return NotImplemented
		return self.__class__(int(self) * ob)
	__rmul__ = __mul__

	def __floordiv__(self, ob):
		if isinstance(ob, Duration):
			return int(self) // int(ob)
		if not isinstance(ob, int):
			return NotImplemented
		return self.__class__(int(self) // ob)

	def __neg__(self):
		return self.__class__(super().__neg__())

	def __pos__(self):
		return self

	def __abs__(self):
		return self.__class__(super().__abs__())

	def __repr__(self, units=('week', 'day', 'hour', 'minute', 'second', 'hnsec')):
		sign = '-' if self < 0 else ''
		fields = [
			'{0}={1}{2}'.format(u, sign, v)
			for u, v in zip(units, self.split(*units[:-1]))
			if v
		]
		if not fields:
			return 'Duration(0)'
		return 'Duration.of(' + ', '.join(fields) + ')'

def hnsecs(operand):
	"""
	# The hnsecs of a &Duration or &datetime.timedelta operand.
	# Returns &None when the operand is neither.
	"""
	if isinstance(operand, Duration):
		return int(operand)
	if isinstance(operand, datetime.timedelta):
		return int(Duration.from_timedelta(operand))
	return None
